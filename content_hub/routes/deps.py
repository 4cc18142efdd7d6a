"""Request dependencies: bearer token -> SessionContext."""
from fastapi import Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from content_hub.services.auth_service import SessionContext, require_session, resolve_session
from content_hub.utils.logging import bind_user

bearer_scheme = HTTPBearer(auto_error=False)


async def get_optional_session(
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> SessionContext | None:
    """SessionContext when a bearer token was sent, else None (no network call)."""
    if not credentials or not credentials.credentials:
        return None
    ctx = await resolve_session(credentials.credentials)
    bind_user(ctx.user_id)
    return ctx


async def get_session_context(
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> SessionContext:
    """SessionContext or AuthError."""
    return require_session(await get_optional_session(credentials))
