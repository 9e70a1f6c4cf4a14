from datetime import datetime

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base, UTCDateTime


class WebinarModel(Base):
    __tablename__ = 'webinar'
    __table_args__ = (CheckConstraint('seats > 0', name='ck_webinar_seats_positive'),)

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    organizer_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    seats: Mapped[int] = mapped_column(Integer, nullable=False)
