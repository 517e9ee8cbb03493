"""Authentication helpers and FastAPI security dependency.

`require_token` guards the resource routers. A request without an
`Authorization` header is rejected with 401; a header whose token does not
verify (bad signature, expired, malformed) is rejected with 403. On
success the decoded claims are stored on `request.state.user` and
returned to the route.

The dependency subclasses `HTTPBearer` only so the generated docs declare
the bearer scheme; the header handling itself is done here.
"""

from fastapi import HTTPException, Request
from fastapi.security import HTTPBearer
import jwt

from .config import Settings


def decode_token(token: str, settings: Settings) -> dict:
    """Decode and verify a JWT token.

    Raises `jwt.PyJWTError` on any verification failure.
    """
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])


def token_from_header(header: str) -> str:
    """Return the second space-delimited segment of an Authorization header."""
    parts = header.split(' ')
    return parts[1] if len(parts) > 1 else ''


class BearerAuth(HTTPBearer):
    def __init__(self):
        super().__init__(bearerFormat='JWT', auto_error=False)

    async def __call__(self, request: Request) -> dict:
        header = request.headers.get('Authorization')
        if not header:
            raise HTTPException(status_code=401, detail='Unauthorized', headers={'WWW-Authenticate': 'Bearer'})
        try:
            claims = decode_token(token_from_header(header), request.app.state.settings)
        except jwt.PyJWTError:
            raise HTTPException(status_code=403, detail='Forbidden')
        request.state.user = claims
        return claims


require_token = BearerAuth()
