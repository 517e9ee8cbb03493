"""Relation inclusion for list and detail responses.

Each resource has a closed set of relations a client may ask for with the
`include` query parameter. For every relation there is one eager-loader
option (so a page is fetched without per-row queries) and one payload
builder that turns the loaded objects into JSON-ready dicts. The JSON key
is the relation's name.
"""

from enum import Enum
from typing import List, Type, TypeVar, assert_never

from sqlalchemy.orm import selectinload

from .models import Course, Student, Teacher

R = TypeVar('R', bound=Enum)


class StudentRelation(Enum):
    COURSES = 'Courses'
    TEACHER = 'Teacher'


class TeacherRelation(Enum):
    COURSES = 'Courses'
    STUDENTS = 'Students'


class CourseRelation(Enum):
    STUDENTS = 'Students'
    TEACHER = 'Teacher'


def parse_include(raw: str, relation_cls: Type[R]) -> List[R]:
    """Map a comma-separated `include` value onto `relation_cls` members.

    Names are trimmed and matched case-sensitively. Unknown names are
    dropped; repeated names are kept in order.
    """
    relations = []
    for name in raw.split(','):
        try:
            relations.append(relation_cls(name.strip()))
        except ValueError:
            continue
    return relations


def course_brief(course: Course) -> dict:
    return {'id': course.id, 'title': course.title, 'description': course.description}


def student_brief(student: Student) -> dict:
    return {'id': student.id, 'name': student.name}


def teacher_brief(teacher: Teacher) -> dict:
    return {'id': teacher.id, 'name': teacher.name, 'department': teacher.department}


def _unique(records) -> list:
    seen = set()
    out = []
    for r in records:
        if r is not None and r.id not in seen:
            seen.add(r.id)
            out.append(r)
    return out


def student_loader(relation: StudentRelation):
    match relation:
        case StudentRelation.COURSES:
            return selectinload(Student.courses)
        case StudentRelation.TEACHER:
            return selectinload(Student.courses).selectinload(Course.teacher)
        case _:
            assert_never(relation)


def student_payload(student: Student, relation: StudentRelation):
    match relation:
        case StudentRelation.COURSES:
            return [course_brief(c) for c in student.courses]
        case StudentRelation.TEACHER:
            # teachers reached through the student's courses
            return [teacher_brief(t) for t in _unique(c.teacher for c in student.courses)]
        case _:
            assert_never(relation)


def teacher_loader(relation: TeacherRelation):
    match relation:
        case TeacherRelation.COURSES:
            return selectinload(Teacher.courses)
        case TeacherRelation.STUDENTS:
            return selectinload(Teacher.courses).selectinload(Course.students)
        case _:
            assert_never(relation)


def teacher_payload(teacher: Teacher, relation: TeacherRelation):
    match relation:
        case TeacherRelation.COURSES:
            return [course_brief(c) for c in teacher.courses]
        case TeacherRelation.STUDENTS:
            return [student_brief(s) for s in _unique(s for c in teacher.courses for s in c.students)]
        case _:
            assert_never(relation)


def course_loader(relation: CourseRelation):
    match relation:
        case CourseRelation.STUDENTS:
            return selectinload(Course.students)
        case CourseRelation.TEACHER:
            return selectinload(Course.teacher)
        case _:
            assert_never(relation)


def course_payload(course: Course, relation: CourseRelation):
    match relation:
        case CourseRelation.STUDENTS:
            return [student_brief(s) for s in course.students]
        case CourseRelation.TEACHER:
            return teacher_brief(course.teacher) if course.teacher is not None else None
        case _:
            assert_never(relation)


def serialize(record, relations, payload) -> dict:
    """Dump `record`'s columns and add one key per requested relation."""
    out = record.model_dump()
    for relation in relations:
        out[relation.value] = payload(record, relation)
    return out
