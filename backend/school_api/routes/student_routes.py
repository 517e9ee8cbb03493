"""Student endpoints, including course enrollment."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from school_api.database import get_session
from school_api.relations import StudentRelation, serialize, student_loader, student_payload
from school_api.repositories import CourseRepository, StudentRepository
from school_api.schemas import StudentIn, StudentUpdate
from school_api.services import ListingService
from school_api.utils.pagination import PageRequest

router = APIRouter()

DETAIL_RELATIONS = [StudentRelation.COURSES]


def _detail(student):
    return serialize(student, DETAIL_RELATIONS, student_payload)


def _load(repo: StudentRepository, student_id: int):
    return repo.require(student_id, [student_loader(r) for r in DETAIL_RELATIONS])


@router.post('', status_code=201)
def create_student(payload: StudentIn, db: Session = Depends(get_session)):
    student = StudentRepository(db).create(payload.model_dump())
    return student.model_dump()


@router.get('')
def list_students(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort: Optional[str] = None,
    include: Optional[str] = None,
    db: Session = Depends(get_session),
):
    """List students a page at a time.

    `sort=asc` orders by creation time ascending, anything else descending.
    `include` takes a comma-separated list of `Courses` and `Teacher`.
    """
    svc = ListingService(StudentRepository(db), StudentRelation, student_loader, student_payload)
    return svc.list(PageRequest.from_query(page, limit, sort, include))


@router.get('/{student_id}')
def get_student(student_id: int, db: Session = Depends(get_session)):
    """Return one student with their courses."""
    return _detail(_load(StudentRepository(db), student_id))


@router.put('/{student_id}')
def update_student(student_id: int, payload: StudentUpdate, db: Session = Depends(get_session)):
    repo = StudentRepository(db)
    student = repo.update(repo.require(student_id), payload.model_dump(exclude_unset=True))
    return student.model_dump()


@router.delete('/{student_id}')
def delete_student(student_id: int, db: Session = Depends(get_session)):
    repo = StudentRepository(db)
    repo.delete(repo.require(student_id))
    return {'message': 'Deleted'}


@router.post('/{student_id}/courses/{course_id}')
def enroll_student(student_id: int, course_id: int, db: Session = Depends(get_session)):
    """Enroll a student in a course; enrolling twice changes nothing."""
    repo = StudentRepository(db)
    student = _load(repo, student_id)
    course = CourseRepository(db).require(course_id)
    return _detail(repo.enroll(student, course))


@router.delete('/{student_id}/courses/{course_id}')
def unenroll_student(student_id: int, course_id: int, db: Session = Depends(get_session)):
    repo = StudentRepository(db)
    student = _load(repo, student_id)
    course = CourseRepository(db).require(course_id)
    return _detail(repo.unenroll(student, course))
