from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.dto import ChangeSeatsRequest
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.webinar_entity import MAX_SEATS, Webinar
from src.service.webinar.domain.webinar_errors import (
    WebinarNotFoundError,
    WebinarNotOrganizerError,
    WebinarReduceSeatsError,
    WebinarTooManySeatsError,
)


class ChangeSeatsUseCase:
    """
    Change the seat capacity of a webinar.

    Flow (fail fast, nothing is written unless every check passes):
    1. Load webinar                      -> WebinarNotFoundError
    2. Caller must be the organizer      -> WebinarNotOrganizerError
    3. Seats may be held or increased    -> WebinarReduceSeatsError
    4. Seats must not exceed MAX_SEATS   -> WebinarTooManySeatsError
    5. Persist the new snapshot with a single repo.update

    Repository errors propagate unchanged.
    """

    def __init__(self, *, webinar_repo: IWebinarRepo) -> None:
        self.webinar_repo = webinar_repo

    @classmethod
    @inject
    def depends(
        cls,
        webinar_repo: IWebinarRepo = Depends(Provide[Container.webinar_repo]),
    ) -> Self:
        return cls(webinar_repo=webinar_repo)

    @Logger.io
    async def execute(self, request: ChangeSeatsRequest) -> None:
        webinar = await self.webinar_repo.find_by_id(request.webinar_id)
        if webinar is None:
            raise WebinarNotFoundError(request.webinar_id)

        if not webinar.is_organizer(request.user):
            raise WebinarNotOrganizerError(webinar_id=webinar.id, user_id=request.user.id)

        self._validate_seats(webinar=webinar, seats=request.seats)

        await self.webinar_repo.update(webinar.with_seats(request.seats))
        Logger.base.info(
            f'💺 [CHANGE_SEATS] Webinar {webinar.id} seats {webinar.seats} -> {request.seats}'
        )

    @staticmethod
    def _validate_seats(*, webinar: Webinar, seats: int) -> None:
        if seats < webinar.seats:
            raise WebinarReduceSeatsError(
                webinar_id=webinar.id, current_seats=webinar.seats, requested_seats=seats
            )
        if seats > MAX_SEATS:
            raise WebinarTooManySeatsError(webinar_id=webinar.id, requested_seats=seats)
