from datetime import datetime
from typing import TYPE_CHECKING

import attrs


if TYPE_CHECKING:
    from src.service.webinar.domain.entity.user_entity import UserEntity


MAX_SEATS = 1000


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Webinar {attribute.name} cannot be empty')


def _validate_positive_seats(instance: object, attribute: attrs.Attribute, value: int) -> None:
    # bool is an int subclass; True must not pass as one seat
    if isinstance(value, bool) or value <= 0:
        raise ValueError('Webinar seats must be a positive integer')


@attrs.define(frozen=True)
class Webinar:
    """
    Snapshot of a webinar as stored.

    Frozen: a seat change produces a new snapshot via `with_seats`, which is
    what gets handed to the repository's `update`.
    """

    id: str = attrs.field(validator=[attrs.validators.instance_of(str), _validate_non_empty_string])
    organizer_id: str = attrs.field(
        validator=[attrs.validators.instance_of(str), _validate_non_empty_string]
    )
    title: str = attrs.field(validator=attrs.validators.instance_of(str))
    start_date: datetime = attrs.field(validator=attrs.validators.instance_of(datetime))
    end_date: datetime = attrs.field(validator=attrs.validators.instance_of(datetime))
    seats: int = attrs.field(
        validator=[attrs.validators.instance_of(int), _validate_positive_seats]
    )

    @classmethod
    def create(
        cls,
        *,
        id: str,
        organizer_id: str,
        title: str,
        start_date: datetime,
        end_date: datetime,
        seats: int,
    ) -> 'Webinar':
        return cls(
            id=id,
            organizer_id=organizer_id,
            title=title,
            start_date=start_date,
            end_date=end_date,
            seats=seats,
        )

    def is_organizer(self, user: 'UserEntity') -> bool:
        return user.id == self.organizer_id

    def with_seats(self, seats: int) -> 'Webinar':
        return attrs.evolve(self, seats=seats)
