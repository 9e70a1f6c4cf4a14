from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.webinar_entity import Webinar
from src.service.webinar.domain.webinar_errors import WebinarNotFoundError
from src.service.webinar.driven_adapter.model.webinar_model import WebinarModel


class WebinarRepoImpl(IWebinarRepo):
    """SQLAlchemy-backed webinar repository. Each call runs in its own session."""

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(db_webinar: WebinarModel) -> Webinar:
        return Webinar(
            id=db_webinar.id,
            organizer_id=db_webinar.organizer_id,
            title=db_webinar.title,
            start_date=db_webinar.start_date,
            end_date=db_webinar.end_date,
            seats=db_webinar.seats,
        )

    @Logger.io
    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(WebinarModel).where(WebinarModel.id == webinar_id)
            )
            db_webinar = result.scalar_one_or_none()

            if not db_webinar:
                return None

            return self._to_entity(db_webinar)

    @Logger.io
    async def create(self, webinar: Webinar) -> None:
        async with self.session_factory() as session, session.begin():
            session.add(
                WebinarModel(
                    id=webinar.id,
                    organizer_id=webinar.organizer_id,
                    title=webinar.title,
                    start_date=webinar.start_date,
                    end_date=webinar.end_date,
                    seats=webinar.seats,
                )
            )

    @Logger.io
    async def update(self, webinar: Webinar) -> None:
        # One UPDATE statement in one transaction: readers see the old row or the new row
        stmt = (
            sql_update(WebinarModel)
            .where(WebinarModel.id == webinar.id)
            .values(
                organizer_id=webinar.organizer_id,
                title=webinar.title,
                start_date=webinar.start_date,
                end_date=webinar.end_date,
                seats=webinar.seats,
            )
            .execution_options(synchronize_session=False)
        )
        async with self.session_factory() as session, session.begin():
            result = await session.execute(stmt)
            if result.rowcount == 0:
                raise WebinarNotFoundError(webinar.id)
