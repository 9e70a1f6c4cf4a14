"""
Unit tests for ChangeSeatsUseCase

Test Focus:
1. Happy path: organizer raises (or holds) seats, stored webinar reflects it
2. Fail Fast, in order: not found -> not organizer -> reduce seats -> too many seats
3. No write happens when any check fails; repository errors propagate unchanged
"""

from unittest.mock import AsyncMock

import pytest

from src.service.webinar.app.command.change_seats_use_case import ChangeSeatsUseCase
from src.service.webinar.app.dto import ChangeSeatsRequest
from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.domain.entity.webinar_entity import MAX_SEATS, Webinar
from src.service.webinar.domain.webinar_errors import (
    WebinarError,
    WebinarNotFoundError,
    WebinarNotOrganizerError,
    WebinarReduceSeatsError,
    WebinarTooManySeatsError,
)
from src.service.webinar.driven_adapter.repo.in_memory_webinar_repo_impl import (
    InMemoryWebinarRepoImpl,
)


@pytest.mark.unit
class TestChangeSeats:
    @pytest.fixture
    def use_case(self, in_memory_repo: InMemoryWebinarRepoImpl) -> ChangeSeatsUseCase:
        return ChangeSeatsUseCase(webinar_repo=in_memory_repo)

    async def _stored_seats(self, repo: InMemoryWebinarRepoImpl) -> int:
        stored = await repo.find_by_id('webinar-id')
        assert stored is not None
        return stored.seats

    @pytest.mark.asyncio
    async def test_organizer_changes_seats(
        self,
        use_case: ChangeSeatsUseCase,
        in_memory_repo: InMemoryWebinarRepoImpl,
        alice: UserEntity,
    ) -> None:
        await use_case.execute(ChangeSeatsRequest(webinar_id='webinar-id', user=alice, seats=200))

        assert await self._stored_seats(in_memory_repo) == 200

    @pytest.mark.asyncio
    @pytest.mark.parametrize('seats', [100, 101, MAX_SEATS])
    async def test_boundaries_are_accepted(
        self,
        use_case: ChangeSeatsUseCase,
        in_memory_repo: InMemoryWebinarRepoImpl,
        alice: UserEntity,
        seats: int,
    ) -> None:
        await use_case.execute(ChangeSeatsRequest(webinar_id='webinar-id', user=alice, seats=seats))

        assert await self._stored_seats(in_memory_repo) == seats

    @pytest.mark.asyncio
    async def test_repeating_same_change_is_a_no_op(
        self,
        use_case: ChangeSeatsUseCase,
        in_memory_repo: InMemoryWebinarRepoImpl,
        alice: UserEntity,
    ) -> None:
        request = ChangeSeatsRequest(webinar_id='webinar-id', user=alice, seats=200)

        await use_case.execute(request)
        first = in_memory_repo.webinars
        await use_case.execute(request)

        assert in_memory_repo.webinars == first

    @pytest.mark.asyncio
    async def test_only_seats_change(
        self,
        use_case: ChangeSeatsUseCase,
        in_memory_repo: InMemoryWebinarRepoImpl,
        webinar: Webinar,
        alice: UserEntity,
    ) -> None:
        await use_case.execute(ChangeSeatsRequest(webinar_id='webinar-id', user=alice, seats=300))

        stored = await in_memory_repo.find_by_id('webinar-id')
        assert stored == webinar.with_seats(300)

    @pytest.mark.asyncio
    async def test_fail_when_webinar_not_found(
        self,
        use_case: ChangeSeatsUseCase,
        in_memory_repo: InMemoryWebinarRepoImpl,
        alice: UserEntity,
    ) -> None:
        with pytest.raises(WebinarNotFoundError, match='Webinar not found') as exc_info:
            await use_case.execute(
                ChangeSeatsRequest(webinar_id='non-existing-id', user=alice, seats=200)
            )

        assert exc_info.value.webinar_id == 'non-existing-id'
        assert exc_info.value.status_code == 404
        assert await self._stored_seats(in_memory_repo) == 100

    @pytest.mark.asyncio
    @pytest.mark.parametrize('seats', [50, 200, 1500])
    async def test_fail_when_user_is_not_organizer(
        self,
        use_case: ChangeSeatsUseCase,
        in_memory_repo: InMemoryWebinarRepoImpl,
        bob: UserEntity,
        seats: int,
    ) -> None:
        with pytest.raises(WebinarNotOrganizerError) as exc_info:
            await use_case.execute(ChangeSeatsRequest(webinar_id='webinar-id', user=bob, seats=seats))

        assert exc_info.value.user_id == 'bob'
        assert exc_info.value.status_code == 401
        assert await self._stored_seats(in_memory_repo) == 100

    @pytest.mark.asyncio
    async def test_fail_when_reducing_seats(
        self,
        use_case: ChangeSeatsUseCase,
        in_memory_repo: InMemoryWebinarRepoImpl,
        alice: UserEntity,
    ) -> None:
        with pytest.raises(WebinarReduceSeatsError) as exc_info:
            await use_case.execute(ChangeSeatsRequest(webinar_id='webinar-id', user=alice, seats=50))

        assert exc_info.value.current_seats == 100
        assert exc_info.value.requested_seats == 50
        assert await self._stored_seats(in_memory_repo) == 100

    @pytest.mark.asyncio
    async def test_fail_when_too_many_seats(
        self,
        use_case: ChangeSeatsUseCase,
        in_memory_repo: InMemoryWebinarRepoImpl,
        alice: UserEntity,
    ) -> None:
        with pytest.raises(WebinarTooManySeatsError) as exc_info:
            await use_case.execute(
                ChangeSeatsRequest(webinar_id='webinar-id', user=alice, seats=1500)
            )

        assert exc_info.value.max_seats == MAX_SEATS
        assert await self._stored_seats(in_memory_repo) == 100

    @pytest.mark.asyncio
    async def test_just_above_ceiling_is_rejected(
        self, use_case: ChangeSeatsUseCase, alice: UserEntity
    ) -> None:
        with pytest.raises(WebinarTooManySeatsError):
            await use_case.execute(
                ChangeSeatsRequest(webinar_id='webinar-id', user=alice, seats=MAX_SEATS + 1)
            )

    @pytest.mark.asyncio
    async def test_reduce_is_checked_before_ceiling(
        self,
        alice: UserEntity,
        webinar: Webinar,
    ) -> None:
        # Stored webinar already at the ceiling; a smaller request is a reduction
        repo = InMemoryWebinarRepoImpl([webinar.with_seats(MAX_SEATS)])
        use_case = ChangeSeatsUseCase(webinar_repo=repo)

        with pytest.raises(WebinarReduceSeatsError):
            await use_case.execute(
                ChangeSeatsRequest(webinar_id='webinar-id', user=alice, seats=MAX_SEATS - 1)
            )

    def test_all_failures_share_webinar_error_base(self) -> None:
        for error_class in (
            WebinarNotFoundError,
            WebinarNotOrganizerError,
            WebinarReduceSeatsError,
            WebinarTooManySeatsError,
        ):
            assert issubclass(error_class, WebinarError)


@pytest.mark.unit
class TestChangeSeatsRepositoryInteraction:
    @pytest.fixture
    def mock_repo(self, webinar: Webinar) -> AsyncMock:
        repo = AsyncMock()
        repo.find_by_id = AsyncMock(return_value=webinar)
        repo.update = AsyncMock(return_value=None)
        return repo

    @pytest.mark.asyncio
    async def test_success_reads_once_and_writes_once(
        self, mock_repo: AsyncMock, webinar: Webinar, alice: UserEntity
    ) -> None:
        use_case = ChangeSeatsUseCase(webinar_repo=mock_repo)

        await use_case.execute(ChangeSeatsRequest(webinar_id='webinar-id', user=alice, seats=200))

        mock_repo.find_by_id.assert_awaited_once_with('webinar-id')
        mock_repo.update.assert_awaited_once_with(webinar.with_seats(200))
        mock_repo.create.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ('user_id', 'seats', 'error_class'),
        [
            ('bob', 200, WebinarNotOrganizerError),
            ('alice', 50, WebinarReduceSeatsError),
            ('alice', 1500, WebinarTooManySeatsError),
        ],
    )
    async def test_rejected_request_never_writes(
        self,
        mock_repo: AsyncMock,
        user_id: str,
        seats: int,
        error_class: type[Exception],
    ) -> None:
        use_case = ChangeSeatsUseCase(webinar_repo=mock_repo)

        with pytest.raises(error_class):
            await use_case.execute(
                ChangeSeatsRequest(webinar_id='webinar-id', user=UserEntity(id=user_id), seats=seats)
            )

        mock_repo.find_by_id.assert_awaited_once()
        mock_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_webinar_never_writes(
        self, mock_repo: AsyncMock, alice: UserEntity
    ) -> None:
        mock_repo.find_by_id = AsyncMock(return_value=None)
        use_case = ChangeSeatsUseCase(webinar_repo=mock_repo)

        with pytest.raises(WebinarNotFoundError):
            await use_case.execute(ChangeSeatsRequest(webinar_id='missing', user=alice, seats=200))

        mock_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_read_failure_propagates_unchanged(
        self, mock_repo: AsyncMock, alice: UserEntity
    ) -> None:
        failure = ConnectionError('database unreachable')
        mock_repo.find_by_id = AsyncMock(side_effect=failure)
        use_case = ChangeSeatsUseCase(webinar_repo=mock_repo)

        with pytest.raises(ConnectionError) as exc_info:
            await use_case.execute(
                ChangeSeatsRequest(webinar_id='webinar-id', user=alice, seats=200)
            )

        assert exc_info.value is failure
        mock_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_write_failure_propagates_unchanged(
        self, mock_repo: AsyncMock, alice: UserEntity
    ) -> None:
        failure = TimeoutError('write timed out')
        mock_repo.update = AsyncMock(side_effect=failure)
        use_case = ChangeSeatsUseCase(webinar_repo=mock_repo)

        with pytest.raises(TimeoutError) as exc_info:
            await use_case.execute(
                ChangeSeatsRequest(webinar_id='webinar-id', user=alice, seats=200)
            )

        assert exc_info.value is failure
        mock_repo.update.assert_awaited_once()
