"""Session accessor: resolve a Supabase access token into an explicit SessionContext."""
from dataclasses import dataclass

import httpx

from content_hub.config import settings
from content_hub.errors import AuthError
from content_hub.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SessionContext:
    """Authenticated identity handed to every component that needs a token."""

    access_token: str
    user_id: str
    email: str | None = None

    def auth_headers(self) -> dict[str, str]:
        """Bearer token plus the static project key, as the generation endpoints expect."""
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
            "apikey": settings.supabase_key,
        }


def require_session(ctx: SessionContext | None) -> SessionContext:
    """Raise AuthError unless ctx carries a token and a user id."""
    if ctx is None or not ctx.access_token or not ctx.user_id:
        raise AuthError("Could not get user session. Please log in again.")
    return ctx


async def resolve_session(access_token: str) -> SessionContext:
    """Ask Supabase Auth who owns this token."""
    if not access_token:
        raise AuthError("Missing authentication token")
    if not settings.supabase_url:
        raise AuthError("SUPABASE_URL is not configured")
    try:
        async with httpx.AsyncClient() as client:
            resp = await client.get(
                f"{settings.supabase_url.rstrip('/')}/auth/v1/user",
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "apikey": settings.supabase_key,
                },
            )
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("session_rejected", status=e.response.status_code)
        raise AuthError("Invalid or expired token") from e
    except httpx.HTTPError as e:
        logger.warning("session_lookup_failed", error=str(e))
        raise AuthError("Could not verify session") from e
    data = resp.json()
    user_id = data.get("id")
    if not user_id:
        raise AuthError("Invalid or expired token")
    return SessionContext(access_token=access_token, user_id=str(user_id), email=data.get("email"))
