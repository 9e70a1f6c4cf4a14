from typing import Iterable, Optional

from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.webinar_entity import Webinar
from src.service.webinar.domain.webinar_errors import WebinarNotFoundError


class InMemoryWebinarRepoImpl(IWebinarRepo):
    """
    Webinar repository held in an ordered list for the lifetime of the process.

    Webinars are frozen, so handing out the stored instance is safe.
    """

    def __init__(self, webinars: Optional[Iterable[Webinar]] = None) -> None:
        self._webinars: list[Webinar] = list(webinars or [])

    @property
    def webinars(self) -> tuple[Webinar, ...]:
        return tuple(self._webinars)

    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        return next((w for w in self._webinars if w.id == webinar_id), None)

    async def create(self, webinar: Webinar) -> None:
        self._webinars.append(webinar)

    async def update(self, webinar: Webinar) -> None:
        for index, stored in enumerate(self._webinars):
            if stored.id == webinar.id:
                self._webinars[index] = webinar
                return
        raise WebinarNotFoundError(webinar.id)
