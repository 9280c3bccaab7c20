"""Bearer-token authentication for routes."""

from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from forum.domain.service import JWTService
from forum.interface.error import AuthenticationRequiredError
from forum.util.jwt import TokenPayload

bearer_scheme = HTTPBearer(auto_error=False)


def require_actor(
    jwt_service: JWTService,
    credentials: HTTPAuthorizationCredentials | None,
    action: str,
) -> TokenPayload:
    """Resolve the acting user from the Authorization header.

    Args:
        jwt_service: JWT service for token verification
        credentials: Parsed ``Authorization: Bearer`` header, if any
        action: What the caller is trying to do, for the error message

    Returns:
        Token payload of the authenticated user

    Raises:
        AuthenticationRequiredError: If the header is missing or the token is invalid
    """
    token = credentials.credentials if credentials else None
    actor = jwt_service.get_actor_from_token(token)
    if actor is None:
        raise AuthenticationRequiredError(action)
    return actor
