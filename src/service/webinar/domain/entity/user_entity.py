import re
from typing import Optional

import attrs


EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


@attrs.define(frozen=True)
class UserEntity:
    """Caller identity. The seat-change flow only reads `id`."""

    id: str = attrs.field(validator=attrs.validators.instance_of(str))
    email: str = ''
    password: Optional[str] = attrs.field(default=None, repr=False)  # Hide from repr for security

    def is_email_valid(self) -> bool:
        return bool(EMAIL_PATTERN.match(self.email))

    def is_password_valid(self, password: str) -> bool:
        return self.password is not None and self.password == password
