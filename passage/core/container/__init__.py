"""Container module - centralized dependency injection (composition root).

    from passage.core.container import get_db_session, get_login_user_handler

Organized by concern:
- infrastructure: database, logging, hashing, tokens, email
- auth_handlers: request-scoped services and handler factories
"""

from passage.core.container.auth_handlers import (
    get_authenticate_access_token_handler,
    get_get_user_handler,
    get_login_user_handler,
    get_logout_user_handler,
    get_refresh_token_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_reset_password_handler,
    get_session_manager,
    get_token_issuer,
    get_verification_code_service,
    get_verify_email_handler,
)
from passage.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
    get_password_service,
    get_token_codec,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_logger",
    "get_password_service",
    "get_token_codec",
    # Services
    "get_session_manager",
    "get_token_issuer",
    "get_verification_code_service",
    # Handlers
    "get_authenticate_access_token_handler",
    "get_get_user_handler",
    "get_login_user_handler",
    "get_logout_user_handler",
    "get_refresh_token_handler",
    "get_register_user_handler",
    "get_request_password_reset_handler",
    "get_reset_password_handler",
    "get_verify_email_handler",
]
