from pydantic import BaseModel, StrictInt


class ChangeSeatsRequestBody(BaseModel):
    seats: StrictInt

    class Config:
        json_schema_extra = {
            'example': {
                'seats': 200,
            }
        }


class MessageResponse(BaseModel):
    message: str

    class Config:
        json_schema_extra = {
            'example': {
                'message': 'Seats updated',
            }
        }
