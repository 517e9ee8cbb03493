"""Pydantic request/response schemas used by the API.

Schemas keep API input shapes stable and feed the generated docs.
Resource fields are all optional: a create body missing a required column
is left for the database to reject. Updates apply only the fields a client
actually sends.
"""

from pydantic import BaseModel
from typing import Optional


class RegisterIn(BaseModel):
    """Payload for user registration."""
    name: str
    email: str
    password: str


class LoginIn(BaseModel):
    """Payload for the login endpoint."""
    email: str
    password: str


class TokenOut(BaseModel):
    """Authentication response containing an access token."""
    access_token: str
    token_type: str = 'bearer'


class StudentIn(BaseModel):
    name: Optional[str] = None


class StudentUpdate(BaseModel):
    name: Optional[str] = None


class TeacherIn(BaseModel):
    name: Optional[str] = None
    department: Optional[str] = None


class TeacherUpdate(BaseModel):
    name: Optional[str] = None
    department: Optional[str] = None


class CourseIn(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    teacher_id: Optional[int] = None


class CourseUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    teacher_id: Optional[int] = None
