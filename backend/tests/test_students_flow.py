import pytest


def test_create_get_update_delete_student(client, auth_headers):
    r = client.post('/students', json={'name': 'Ada'}, headers=auth_headers)
    assert r.status_code == 201
    created = r.json()
    assert created['name'] == 'Ada'
    assert isinstance(created['id'], int)
    sid = created['id']

    got = client.get(f'/students/{sid}', headers=auth_headers)
    assert got.status_code == 200
    assert got.json()['name'] == 'Ada'
    assert got.json()['Courses'] == []

    upd = client.put(f'/students/{sid}', json={'name': 'Ada Lovelace'}, headers=auth_headers)
    assert upd.status_code == 200
    assert upd.json()['name'] == 'Ada Lovelace'
    assert upd.json()['id'] == sid

    d = client.delete(f'/students/{sid}', headers=auth_headers)
    assert d.status_code == 200
    assert d.json() == {'message': 'Deleted'}

    gone = client.get(f'/students/{sid}', headers=auth_headers)
    assert gone.status_code == 404
    assert gone.json() == {'message': 'Not found'}


def test_missing_records_are_404(client, auth_headers):
    for resource in ('students', 'teachers', 'courses'):
        assert client.get(f'/{resource}/999', headers=auth_headers).json() == {'message': 'Not found'}
        assert client.put(f'/{resource}/999', json={}, headers=auth_headers).status_code == 404
        assert client.delete(f'/{resource}/999', headers=auth_headers).status_code == 404


def test_update_that_violates_schema_is_500(client, auth_headers):
    sid = client.post('/students', json={'name': 'Ada'}, headers=auth_headers).json()['id']
    r = client.put(f'/students/{sid}', json={'name': None}, headers=auth_headers)
    assert r.status_code == 500
    assert r.json()['error']
    # record unchanged
    assert client.get(f'/students/{sid}', headers=auth_headers).json()['name'] == 'Ada'


def test_enrollment_shows_on_student_and_course(client, auth_headers):
    tid = client.post('/teachers', json={'name': 'Turing', 'department': 'CS'}, headers=auth_headers).json()['id']
    course = client.post(
        '/courses', json={'title': 'Algorithms', 'description': 'Intro', 'teacher_id': tid}, headers=auth_headers
    ).json()
    assert course['teacher_id'] == tid
    sid = client.post('/students', json={'name': 'Ada'}, headers=auth_headers).json()['id']

    r = client.post(f"/students/{sid}/courses/{course['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert [c['title'] for c in r.json()['Courses']] == ['Algorithms']
    # enrolling twice is a no-op
    again = client.post(f"/students/{sid}/courses/{course['id']}", headers=auth_headers)
    assert len(again.json()['Courses']) == 1

    detail = client.get(f"/courses/{course['id']}", headers=auth_headers).json()
    assert detail['Students'] == [{'id': sid, 'name': 'Ada'}]
    assert detail['Teacher'] == {'id': tid, 'name': 'Turing', 'department': 'CS'}

    teacher = client.get(f'/teachers/{tid}', headers=auth_headers).json()
    assert [c['id'] for c in teacher['Courses']] == [course['id']]

    out = client.delete(f"/students/{sid}/courses/{course['id']}", headers=auth_headers)
    assert out.status_code == 200
    assert out.json()['Courses'] == []


def test_enroll_unknown_course_is_404(client, auth_headers):
    sid = client.post('/students', json={'name': 'Ada'}, headers=auth_headers).json()['id']
    r = client.post(f'/students/{sid}/courses/42', headers=auth_headers)
    assert r.status_code == 404


def test_deleting_teacher_keeps_courses(client, auth_headers):
    tid = client.post('/teachers', json={'name': 'Hopper', 'department': 'Navy'}, headers=auth_headers).json()['id']
    cid = client.post('/courses', json={'title': 'COBOL', 'teacher_id': tid}, headers=auth_headers).json()['id']
    assert client.delete(f'/teachers/{tid}', headers=auth_headers).status_code == 200
    course = client.get(f'/courses/{cid}', headers=auth_headers).json()
    assert course['teacher_id'] is None
    assert course['Teacher'] is None


@pytest.mark.parametrize('resource, body', [
    ('students', {}),
    ('teachers', {'name': 'No Department'}),
    ('courses', {'description': 'no title'}),
])
def test_create_missing_column_is_storage_error(client, auth_headers, resource, body):
    r = client.post(f'/{resource}', json=body, headers=auth_headers)
    assert r.status_code == 500
    assert r.json()['error']
    assert client.get(f'/{resource}', headers=auth_headers).json()['meta']['totalItems'] == 0


def test_oversized_ids_are_storage_errors(client, auth_headers):
    huge = '99999999999999999999'
    r = client.get(f'/students/{huge}', headers=auth_headers)
    assert r.status_code == 500
    assert 'error' in r.json()
    r2 = client.get('/students', params={'page': huge}, headers=auth_headers)
    assert r2.status_code == 500
    assert 'error' in r2.json()
    # later requests are unaffected
    assert client.get('/students', headers=auth_headers).status_code == 200


def test_partial_update_keeps_other_fields(client, auth_headers):
    t = client.post('/teachers', json={'name': 'Knuth', 'department': 'Math'}, headers=auth_headers).json()
    r = client.put(f"/teachers/{t['id']}", json={'department': 'CS'}, headers=auth_headers)
    assert r.json()['name'] == 'Knuth'
    assert r.json()['department'] == 'CS'
