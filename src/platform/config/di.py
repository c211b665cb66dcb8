"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.service.partier.driven_adapter.payment.mock_payment_processor import (
    MockPaymentProcessor,
)
from src.service.partier.driven_adapter.repo.event_catalog_command_repo_impl import (
    EventCatalogCommandRepoImpl,
)
from src.service.partier.driven_adapter.repo.event_catalog_query_repo_impl import (
    EventCatalogQueryRepoImpl,
)
from src.service.partier.driven_adapter.repo.ticket_command_repo_impl import TicketCommandRepoImpl
from src.service.partier.driven_adapter.repo.ticket_query_repo_impl import TicketQueryRepoImpl
from src.service.partier.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.partier.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.partier.driven_adapter.repo.user_session_repo_impl import UserSessionRepoImpl
from src.service.partier.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.partier.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Database: one engine (connection pool) per process, disposed by the app lifespan
    database = providers.Singleton(Database)

    # Repositories (stateless - use session_factory per-operation)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    event_catalog_command_repo = providers.Singleton(
        EventCatalogCommandRepoImpl, session_factory=database.provided.session
    )
    event_catalog_query_repo = providers.Singleton(
        EventCatalogQueryRepoImpl, session_factory=database.provided.session
    )
    ticket_command_repo = providers.Singleton(
        TicketCommandRepoImpl, session_factory=database.provided.session
    )
    ticket_query_repo = providers.Singleton(
        TicketQueryRepoImpl, session_factory=database.provided.session
    )
    user_session_repo = providers.Singleton(
        UserSessionRepoImpl, session_factory=database.provided.session
    )

    # Security / payment
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    payment_processor = providers.Singleton(MockPaymentProcessor)

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth, session_repo=user_session_repo)


container = Container()
