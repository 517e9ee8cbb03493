"""Repository classes encapsulating database operations.

Each repository is bound to one request-scoped `Session` and focused on a
single table. Repositories return SQLModel objects and commit/refresh
where appropriate; storage errors propagate to the application's error
handler untouched.
"""

from typing import Iterable, List, Optional, Sequence, Tuple
from sqlmodel import Session, select
from sqlalchemy import asc, desc, func
from . import models


class NotFoundError(LookupError):
    """Raised when a record looked up by primary key does not exist."""


class UserRepository:
    """CRUD operations for `User` objects."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, user: models.User) -> models.User:
        """Persist a new user and return the managed instance."""
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_email(self, email: str) -> Optional[models.User]:
        """Return a `User` by email or `None` if not found."""
        stmt = select(models.User).where(models.User.email == email)
        return self.session.exec(stmt).first()


class ResourceRepository:
    """Shared create/list/get/update/delete for the school resources.

    Subclasses only name their `model`; every table they serve has `id`
    and `created_at` columns, which drive paging order.
    """
    model = None

    def __init__(self, session: Session):
        self.session = session

    def create(self, fields: dict):
        """Insert a record built from `fields` and return it."""
        record = self.model(**fields)
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record

    def list_page(self, *, limit: int, offset: int, descending: bool, options: Sequence = ()) -> Tuple[int, List]:
        """Return `(total, rows)` for one page ordered by creation time."""
        total = self.session.exec(select(func.count()).select_from(self.model)).one()
        direction = desc if descending else asc
        stmt = (
            select(self.model)
            .options(*options)
            .order_by(direction(self.model.created_at), direction(self.model.id))
            .offset(offset)
            .limit(limit)
        )
        return total, self.session.exec(stmt).all()

    def get(self, record_id: int, options: Iterable = ()):
        """Fetch a record by primary key, or `None`."""
        return self.session.get(self.model, record_id, options=list(options))

    def require(self, record_id: int, options: Iterable = ()):
        """Fetch a record by primary key or raise `NotFoundError`."""
        record = self.get(record_id, options)
        if record is None:
            raise NotFoundError(f'{self.model.__name__} {record_id} not found')
        return record

    def update(self, record, fields: dict):
        """Apply every key in `fields` onto `record` and persist it."""
        for key, value in fields.items():
            setattr(record, key, value)
        record.updated_at = models.utcnow()
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record

    def delete(self, record) -> None:
        self.session.delete(record)
        self.session.commit()


class StudentRepository(ResourceRepository):
    model = models.Student

    def enroll(self, student: models.Student, course: models.Course) -> models.Student:
        """Add `course` to the student's courses; a repeat enrollment is a no-op."""
        if all(c.id != course.id for c in student.courses):
            student.courses.append(course)
            self.session.add(student)
            self.session.commit()
            self.session.refresh(student)
        return student

    def unenroll(self, student: models.Student, course: models.Course) -> models.Student:
        """Drop `course` from the student's courses if present."""
        remaining = [c for c in student.courses if c.id != course.id]
        if len(remaining) != len(student.courses):
            student.courses = remaining
            self.session.add(student)
            self.session.commit()
            self.session.refresh(student)
        return student


class TeacherRepository(ResourceRepository):
    model = models.Teacher


class CourseRepository(ResourceRepository):
    model = models.Course
