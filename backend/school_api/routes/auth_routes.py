from fastapi import APIRouter, Depends, HTTPException, Request
from sqlmodel import Session

from school_api import services
from school_api.auth import require_token
from school_api.database import get_session
from school_api.schemas import LoginIn, RegisterIn, TokenOut

router = APIRouter()


@router.post('/register', status_code=201)
def register(payload: RegisterIn, request: Request, db: Session = Depends(get_session)):
    """Register a new user; the password is stored hashed."""
    auth = services.AuthService(db, request.app.state.settings)
    user = auth.register(payload.name, payload.email, payload.password)
    return {'id': user.id, 'name': user.name, 'email': user.email}


@router.post('/login', response_model=TokenOut)
def login(payload: LoginIn, request: Request, db: Session = Depends(get_session)):
    """Authenticate a user and return a short-lived JWT token."""
    auth = services.AuthService(db, request.app.state.settings)
    token = auth.authenticate(payload.email, payload.password)
    if not token:
        raise HTTPException(status_code=401, detail='invalid credentials')
    return TokenOut(access_token=token)


@router.get('/me')
def me(claims: dict = Depends(require_token)):
    return claims
