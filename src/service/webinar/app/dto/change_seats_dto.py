import attrs

from src.service.webinar.domain.entity.user_entity import UserEntity


@attrs.define(frozen=True)
class ChangeSeatsRequest:
    webinar_id: str
    user: UserEntity
    seats: int
