"""SQLModel data models.

This module defines the application's database tables using SQLModel.
Students and courses are linked through the `Enrollment` table; a course
optionally belongs to one teacher.
"""

from typing import List, Optional
from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    """A registered API user.

    Fields:
    - `email`: unique login name
    - `password_hash`: hashed password string (never store plaintext)
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(index=True, nullable=False, unique=True)
    password_hash: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Enrollment(SQLModel, table=True):
    """Link row placing a student in a course."""
    student_id: Optional[int] = Field(default=None, foreign_key='student.id', primary_key=True)
    course_id: Optional[int] = Field(default=None, foreign_key='course.id', primary_key=True)


class Teacher(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    department: str
    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(default_factory=utcnow)
    courses: List['Course'] = Relationship(back_populates='teacher')


class Course(SQLModel, table=True):
    """A course, taught by at most one teacher."""
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    teacher_id: Optional[int] = Field(default=None, foreign_key='teacher.id')
    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(default_factory=utcnow)
    teacher: Optional[Teacher] = Relationship(back_populates='courses')
    students: List['Student'] = Relationship(back_populates='courses', link_model=Enrollment)


class Student(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(default_factory=utcnow)
    courses: List[Course] = Relationship(back_populates='students', link_model=Enrollment)
