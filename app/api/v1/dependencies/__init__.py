"""Presentation-layer dependency injection (composition root).

Routes depend only on these providers, never on infrastructure directly.
"""

from app.api.v1.dependencies.auth import (
    get_activation_manager,
    get_auth_service,
    get_clock,
    get_notifier,
    get_password_hasher,
    get_session_id_generator,
    get_session_token_codec,
)
from app.api.v1.dependencies.budget import get_category_service, get_expense_service
from app.api.v1.dependencies.db import (
    get_activation_code_repo,
    get_category_repo,
    get_expense_repo,
    get_revoked_session_repo,
    get_user_repo,
)
from app.api.v1.dependencies.guards import (
    CurrentSession,
    get_optional_session,
    get_session_token,
    require_anonymous,
    require_session,
)

__all__ = [
    "CurrentSession",
    "get_activation_code_repo",
    "get_activation_manager",
    "get_auth_service",
    "get_category_repo",
    "get_category_service",
    "get_clock",
    "get_expense_repo",
    "get_expense_service",
    "get_notifier",
    "get_optional_session",
    "get_password_hasher",
    "get_revoked_session_repo",
    "get_session_id_generator",
    "get_session_token",
    "get_user_repo",
    "require_anonymous",
    "require_session",
]
