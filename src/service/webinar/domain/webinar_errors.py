"""Webinar domain errors.

Each error carries the transport status code through its platform base class,
so the HTTP layer maps it without knowing the webinar rules.
"""

from enum import Enum

from src.platform.exception.exceptions import (
    AuthenticationError,
    CustomBaseError,
    DomainError,
    NotFoundError,
)
from src.service.webinar.domain.entity.webinar_entity import MAX_SEATS


class WebinarErrorMessage(Enum):
    WEBINAR_NOT_FOUND = 'Webinar not found'
    NOT_ORGANIZER = 'User is not allowed to update this webinar'
    REDUCE_SEATS = 'You cannot reduce the number of seats'
    TOO_MANY_SEATS = f'Webinar must have at most {MAX_SEATS} seats'


class WebinarError(CustomBaseError):
    """Marker shared by every webinar domain failure."""


class WebinarNotFoundError(WebinarError, NotFoundError):
    def __init__(self, webinar_id: str) -> None:
        super().__init__(WebinarErrorMessage.WEBINAR_NOT_FOUND.value)
        self.webinar_id = webinar_id


class WebinarNotOrganizerError(WebinarError, AuthenticationError):
    def __init__(self, *, webinar_id: str, user_id: str) -> None:
        super().__init__(WebinarErrorMessage.NOT_ORGANIZER.value)
        self.webinar_id = webinar_id
        self.user_id = user_id


class WebinarReduceSeatsError(WebinarError, DomainError):
    def __init__(self, *, webinar_id: str, current_seats: int, requested_seats: int) -> None:
        super().__init__(WebinarErrorMessage.REDUCE_SEATS.value, 400)
        self.webinar_id = webinar_id
        self.current_seats = current_seats
        self.requested_seats = requested_seats


class WebinarTooManySeatsError(WebinarError, DomainError):
    def __init__(self, *, webinar_id: str, requested_seats: int) -> None:
        super().__init__(WebinarErrorMessage.TOO_MANY_SEATS.value, 400)
        self.webinar_id = webinar_id
        self.requested_seats = requested_seats
        self.max_seats = MAX_SEATS
