from school_api.relations import StudentRelation, TeacherRelation, parse_include
from school_api.utils.pagination import PageRequest, parse_int


def test_parse_int():
    assert parse_int(None, 10) == 10
    assert parse_int('25', 10) == 25
    assert parse_int('7items', 10) == 7
    assert parse_int('abc', 10) == 10
    assert parse_int('0', 10) == 10
    # negatives are not clamped
    assert parse_int('-3', 10) == -3
    # only ASCII digits count
    assert parse_int('٣', 10) == 10
    assert parse_int('５', 1) == 1


def test_page_request_offset_and_meta():
    q = PageRequest.from_query('3', '20', 'asc', 'Courses')
    assert q.offset == 40
    meta = q.meta(41)
    assert meta['totalPages'] == 3
    assert meta['sortOrder'] == 'ASC'
    assert meta['includedRelations'] == 'Courses'


def test_total_pages_rounds_up():
    q = PageRequest.from_query(None, '10', None, None)
    assert q.meta(0)['totalPages'] == 0
    assert q.meta(10)['totalPages'] == 1
    assert q.meta(11)['totalPages'] == 2


def test_parse_include_is_case_sensitive_and_keeps_duplicates():
    assert parse_include('Courses,courses, Teacher ,Courses', StudentRelation) == [
        StudentRelation.COURSES,
        StudentRelation.TEACHER,
        StudentRelation.COURSES,
    ]
    assert parse_include('', TeacherRelation) == []
    assert parse_include('Teacher', TeacherRelation) == []
