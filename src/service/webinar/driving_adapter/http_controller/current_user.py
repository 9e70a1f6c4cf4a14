"""Caller identity for the webinar endpoints.

Authentication happens upstream; this only turns the forwarded identity
into a UserEntity. The DEFAULT_USER_ID fallback is honoured in DEBUG only,
so a production request without the header is rejected.
"""

from typing import Optional

from fastapi import Header

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.webinar.domain.entity.user_entity import UserEntity


USER_ID_HEADER = 'X-User-Id'
MISSING_USER_MESSAGE = f'Missing {USER_ID_HEADER} header'


async def get_current_user(
    x_user_id: Optional[str] = Header(default=None, alias=USER_ID_HEADER),
) -> UserEntity:
    if x_user_id:
        return UserEntity(id=x_user_id)
    if settings.DEBUG and settings.DEFAULT_USER_ID:
        return UserEntity(id=settings.DEFAULT_USER_ID)
    raise AuthenticationError(MISSING_USER_MESSAGE)
