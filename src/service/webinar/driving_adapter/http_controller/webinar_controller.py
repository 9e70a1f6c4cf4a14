from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.command.change_seats_use_case import ChangeSeatsUseCase
from src.service.webinar.app.dto import ChangeSeatsRequest
from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.driving_adapter.http_controller.current_user import get_current_user
from src.service.webinar.driving_adapter.schema.webinar_schema import (
    ChangeSeatsRequestBody,
    MessageResponse,
)


router = APIRouter()


@router.post('/{webinar_id}/seats', status_code=status.HTTP_200_OK)
@Logger.io
async def change_seats(
    webinar_id: str,
    request: ChangeSeatsRequestBody,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ChangeSeatsUseCase = Depends(ChangeSeatsUseCase.depends),
) -> MessageResponse:
    # Domain failures are raised as CustomBaseError and mapped by the exception handlers
    await use_case.execute(
        ChangeSeatsRequest(webinar_id=webinar_id, user=current_user, seats=request.seats)
    )
    return MessageResponse(message='Seats updated')
