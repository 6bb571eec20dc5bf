import hmac
import logging
from typing import Optional

from fastapi import Header, Request

from errors import AuthorizationError

logger = logging.getLogger(__name__)

ADMIN_HEADER = "X-Admin-Key"


def authorize(presented: Optional[str], secret: str) -> bool:
    if not presented or not secret:
        return False
    return hmac.compare_digest(presented.encode(), secret.encode())


def require_admin(request: Request, x_admin_key: Optional[str] = Header(None)) -> None:
    """Dependency guarding the admin routes with the shared secret."""
    if not authorize(x_admin_key, request.app.state.settings.admin_key):
        logger.warning("Denied admin access to %s %s", request.method, request.url.path)
        raise AuthorizationError()
