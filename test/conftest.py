"""
Test Configuration and Fixtures

This module provides:
- Environment setup before application modules are imported
- Webinar and user seeds shared by unit, integration and e2e tests
- A SQLite database per test (scoped acquire / dispose)
- A FastAPI TestClient bound to that database

Architecture:
- Unit tests (@pytest.mark.unit): in-memory repository or mocks, no database
- Integration tests: WebinarRepoImpl against a real SQL database
- E2E tests: HTTP through the FastAPI app down to the database
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are built at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ['SERVICE_NAME'] = 'webinar-service-test'
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{test_log_dir / "default.db"}'
    os.environ['DEBUG'] = 'true'
    os.environ['DEFAULT_USER_ID'] = 'test-user'


_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import AsyncGenerator, Callable, Coroutine, Generator  # noqa: E402
from datetime import datetime, timezone  # noqa: E402
from typing import Any, Optional, TypeVar  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.platform.database.db_setting import Database  # noqa: E402
from src.service.webinar.domain.entity.user_entity import UserEntity  # noqa: E402
from src.service.webinar.domain.entity.webinar_entity import Webinar  # noqa: E402
from src.service.webinar.driven_adapter.repo.in_memory_webinar_repo_impl import (  # noqa: E402
    InMemoryWebinarRepoImpl,
)
from src.service.webinar.driven_adapter.repo.webinar_repo_impl import (  # noqa: E402
    WebinarRepoImpl,
)


_T = TypeVar('_T')

WEBINAR_ID = 'webinar-id'
ALICE = UserEntity(id='alice', email='alice@gmail.com', password='azerty')
BOB = UserEntity(id='bob', email='bob@gmail.com', password='azerty')


# =============================================================================
# Seeds
# =============================================================================
@pytest.fixture
def alice() -> UserEntity:
    return ALICE


@pytest.fixture
def bob() -> UserEntity:
    return BOB


@pytest.fixture
def webinar() -> Webinar:
    return Webinar(
        id=WEBINAR_ID,
        organizer_id=ALICE.id,
        title='Webinar Title',
        start_date=datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc),
        end_date=datetime(2024, 1, 1, 11, 0, tzinfo=timezone.utc),
        seats=100,
    )


@pytest.fixture
def in_memory_repo(webinar: Webinar) -> InMemoryWebinarRepoImpl:
    return InMemoryWebinarRepoImpl([webinar])


# =============================================================================
# Database Fixtures
# =============================================================================
@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    return f'sqlite+aiosqlite:///{tmp_path / "webinar.db"}'


@pytest.fixture
async def database(sqlite_url: str) -> AsyncGenerator[Database, None]:
    database = Database(url=sqlite_url)
    await database.create_tables()
    yield database
    await database.dispose()


@pytest.fixture
def webinar_repo(database: Database) -> WebinarRepoImpl:
    return WebinarRepoImpl(session_factory=database.session)


# =============================================================================
# HTTP Fixtures
# =============================================================================
def run_sync(coro: Coroutine[Any, Any, _T]) -> _T:
    """Run a coroutine from a sync test; TestClient owns its own event loop."""
    return asyncio.run(coro)


async def _with_repo(sqlite_url: str, action: str, arg: Any) -> Any:
    database = Database(url=sqlite_url)
    try:
        repo = WebinarRepoImpl(session_factory=database.session)
        return await getattr(repo, action)(arg)
    finally:
        await database.dispose()


@pytest.fixture
def seed_webinar(sqlite_url: str) -> Callable[[Webinar], None]:
    def _seed(webinar: Webinar) -> None:
        run_sync(_with_repo(sqlite_url, 'create', webinar))

    return _seed


@pytest.fixture
def load_webinar(sqlite_url: str) -> Callable[[str], Optional[Webinar]]:
    def _load(webinar_id: str) -> Optional[Webinar]:
        return run_sync(_with_repo(sqlite_url, 'find_by_id', webinar_id))

    return _load


@pytest.fixture
def client(sqlite_url: str) -> Generator[TestClient, None, None]:
    from src.main import app

    with container.database.override(providers.Singleton(Database, url=sqlite_url)):
        container.webinar_repo.reset()
        with TestClient(app) as test_client:
            yield test_client
    container.webinar_repo.reset()
