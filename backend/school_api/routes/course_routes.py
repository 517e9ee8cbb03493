from typing import Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from school_api.database import get_session
from school_api.relations import CourseRelation, course_loader, course_payload, serialize
from school_api.repositories import CourseRepository
from school_api.schemas import CourseIn, CourseUpdate
from school_api.services import ListingService
from school_api.utils.pagination import PageRequest

router = APIRouter()


@router.post('', status_code=201)
def create_course(payload: CourseIn, db: Session = Depends(get_session)):
    """Create a course; `teacher_id` assigns it to a teacher."""
    course = CourseRepository(db).create(payload.model_dump())
    return course.model_dump()


@router.get('')
def list_courses(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort: Optional[str] = None,
    include: Optional[str] = None,
    db: Session = Depends(get_session),
):
    """List courses; `include` accepts `Students` and `Teacher`."""
    svc = ListingService(CourseRepository(db), CourseRelation, course_loader, course_payload)
    return svc.list(PageRequest.from_query(page, limit, sort, include))


@router.get('/{course_id}')
def get_course(course_id: int, db: Session = Depends(get_session)):
    """Return one course with its enrolled students and its teacher."""
    relations = [CourseRelation.STUDENTS, CourseRelation.TEACHER]
    course = CourseRepository(db).require(course_id, [course_loader(r) for r in relations])
    return serialize(course, relations, course_payload)


@router.put('/{course_id}')
def update_course(course_id: int, payload: CourseUpdate, db: Session = Depends(get_session)):
    repo = CourseRepository(db)
    course = repo.update(repo.require(course_id), payload.model_dump(exclude_unset=True))
    return course.model_dump()


@router.delete('/{course_id}')
def delete_course(course_id: int, db: Session = Depends(get_session)):
    repo = CourseRepository(db)
    repo.delete(repo.require(course_id))
    return {'message': 'Deleted'}
