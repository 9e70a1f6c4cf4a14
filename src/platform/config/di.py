"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.db_setting import Database
from src.service.webinar.driven_adapter.repo.webinar_repo_impl import WebinarRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database
    database = providers.Singleton(Database, url=config_service.provided.DATABASE_URL_ASYNC)

    # Repositories (stateless - open a session per call)
    webinar_repo = providers.Singleton(WebinarRepoImpl, session_factory=database.provided.session)


container = Container()
