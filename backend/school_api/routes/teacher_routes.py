from typing import Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from school_api.database import get_session
from school_api.relations import TeacherRelation, serialize, teacher_loader, teacher_payload
from school_api.repositories import TeacherRepository
from school_api.schemas import TeacherIn, TeacherUpdate
from school_api.services import ListingService
from school_api.utils.pagination import PageRequest

router = APIRouter()


@router.post('', status_code=201)
def create_teacher(payload: TeacherIn, db: Session = Depends(get_session)):
    teacher = TeacherRepository(db).create(payload.model_dump())
    return teacher.model_dump()


@router.get('')
def list_teachers(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort: Optional[str] = None,
    include: Optional[str] = None,
    db: Session = Depends(get_session),
):
    """List teachers; `include` accepts `Courses` and `Students`."""
    svc = ListingService(TeacherRepository(db), TeacherRelation, teacher_loader, teacher_payload)
    return svc.list(PageRequest.from_query(page, limit, sort, include))


@router.get('/{teacher_id}')
def get_teacher(teacher_id: int, db: Session = Depends(get_session)):
    relations = [TeacherRelation.COURSES]
    teacher = TeacherRepository(db).require(teacher_id, [teacher_loader(r) for r in relations])
    return serialize(teacher, relations, teacher_payload)


@router.put('/{teacher_id}')
def update_teacher(teacher_id: int, payload: TeacherUpdate, db: Session = Depends(get_session)):
    repo = TeacherRepository(db)
    teacher = repo.update(repo.require(teacher_id), payload.model_dump(exclude_unset=True))
    return teacher.model_dump()


@router.delete('/{teacher_id}')
def delete_teacher(teacher_id: int, db: Session = Depends(get_session)):
    """Delete a teacher; their courses stay, without a teacher."""
    repo = TeacherRepository(db)
    repo.delete(repo.require(teacher_id))
    return {'message': 'Deleted'}
