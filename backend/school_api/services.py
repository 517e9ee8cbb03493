"""Business logic services used by HTTP controllers.

Services are intentionally thin: they coordinate repositories, token
handling and response shaping so the route modules only translate HTTP
parameters.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Type

import jwt
from passlib.context import CryptContext
from sqlmodel import Session

from . import models, repositories
from .config import Settings
from .relations import parse_include, serialize
from .utils.pagination import PageRequest

PWD_CTX = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class AuthService:
    """Authentication related operations (register + authenticate)."""
    def __init__(self, session: Session, settings: Settings):
        self.session = session
        self.settings = settings
        self.user_repo = repositories.UserRepository(session)

    def register(self, name: str, email: str, password: str) -> models.User:
        """Create a new user with a hashed password.

        A duplicate email surfaces as the storage layer's integrity error.
        """
        hashed = PWD_CTX.hash(password)
        u = models.User(name=name, email=email, password_hash=hashed)
        return self.user_repo.create(u)

    def authenticate(self, email: str, password: str) -> Optional[str]:
        """Verify credentials and return a signed JWT token on success.

        Returns `None` if authentication fails.
        """
        user = self.user_repo.get_by_email(email)
        if not user:
            return None
        if not PWD_CTX.verify(password, user.password_hash):
            return None
        return self.issue_token(user)

    def issue_token(self, user: models.User) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "email": user.email,
            "name": user.name,
            "iat": now,
            "exp": now + timedelta(minutes=self.settings.JWT_EXPIRES_MINUTES),
        }
        return jwt.encode(payload, self.settings.JWT_SECRET, algorithm=self.settings.JWT_ALGORITHM)


class ListingService:
    """Paginated, sorted listing of one resource with optional relations."""
    def __init__(
        self,
        repo: repositories.ResourceRepository,
        relation_cls: Type,
        loader: Callable,
        payload: Callable,
    ):
        self.repo = repo
        self.relation_cls = relation_cls
        self.loader = loader
        self.payload = payload

    def list(self, query: PageRequest) -> dict:
        """Run one count + fetch and wrap the rows in the list envelope."""
        relations = parse_include(query.include, self.relation_cls)
        total, rows = self.repo.list_page(
            limit=query.limit,
            offset=query.offset,
            descending=query.descending,
            options=[self.loader(r) for r in relations],
        )
        return {
            'meta': query.meta(total),
            'data': [serialize(row, relations, self.payload) for row in rows],
        }
