import pytest

from caseportal.questions.routes import parse_target_roles


def ask(client, headers, **body):
    body.setdefault('question', '孩子在家常常分心，有什麼建議？')
    return client.post('/api/questions', json=body, headers=headers)


def test_create_question_is_pending(client, headers_for, sheets):
    resp = ask(client, headers_for('parents', username='carol', name='Carol'), target_role='teacher,therapist')

    assert resp.status_code == 200
    question = resp.get_json()['data']
    assert question['id'].startswith('q-')
    assert question['status'] == '待回覆'
    assert question['asker_name'] == 'Carol'
    assert question['asker_role'] == 'parents'
    assert question['target_role'] == 'teacher,therapist'
    assert question['reply'] == '' and question['replier_name'] == ''
    assert sheets.tables['questions'][-1][0] == question['id']


def test_target_role_is_optional(client, headers_for):
    resp = ask(client, headers_for('teacher'))
    assert resp.get_json()['data']['target_role'] == ''


def test_target_role_accepts_list(client, headers_for):
    resp = ask(client, headers_for('teacher'), target_role=['parents', 'therapist', 'parents'])
    assert resp.get_json()['data']['target_role'] == 'parents,therapist'


def test_unknown_target_role_rejected(client, headers_for, sheets):
    resp = ask(client, headers_for('teacher'), target_role='principal')
    assert resp.status_code == 400
    assert len(sheets.tables['questions']) == 1


def test_question_text_required(client, headers_for):
    resp = client.post('/api/questions', json={'target_role': 'teacher'}, headers=headers_for('teacher'))
    assert resp.status_code == 400


def test_reply_marks_answered_and_second_reply_overwrites(client, headers_for):
    question_id = ask(client, headers_for('parents')).get_json()['data']['id']

    first = client.put(f'/api/questions/{question_id}', json={'reply': '建議分段作業'},
                       headers=headers_for('teacher', name='Bob'))
    assert first.status_code == 200
    assert first.get_json()['data']['status'] == '已回覆'
    assert first.get_json()['data']['replier_name'] == 'Bob'

    second = client.put(f'/api/questions/{question_id}', json={'reply': '可搭配計時器'},
                        headers=headers_for('therapist', name='Alice'))
    assert second.status_code == 200

    listed = client.get('/api/questions', headers=headers_for('parents')).get_json()['data']
    assert listed[0]['reply'] == '可搭配計時器'
    assert listed[0]['replier_name'] == 'Alice'
    assert listed[0]['status'] == '已回覆'
    assert listed[0]['question'] == '孩子在家常常分心，有什麼建議？'


def test_reply_unknown_question(client, headers_for):
    resp = client.put('/api/questions/q-404', json={'reply': 'x'}, headers=headers_for('teacher'))
    assert resp.status_code == 404


@pytest.mark.parametrize('value,expected', [
    (None, ''),
    ('', ''),
    ('teacher', 'teacher'),
    (' teacher , parents ,', 'teacher,parents'),
])
def test_parse_target_roles(value, expected):
    assert parse_target_roles(value) == expected


@pytest.mark.parametrize('body', [
    {'question': 42},
    {'question': '?', 'target_role': 5},
    {'question': '?', 'target_role': {'teacher': True}},
])
def test_malformed_question_is_bad_request(client, headers_for, sheets, body):
    resp = client.post('/api/questions', json=body, headers=headers_for('parents'))
    assert resp.status_code == 400
    assert len(sheets.tables['questions']) == 1


def test_non_text_reply_is_bad_request(client, headers_for):
    question_id = ask(client, headers_for('parents')).get_json()['data']['id']
    resp = client.put(f'/api/questions/{question_id}', json={'reply': 1}, headers=headers_for('teacher'))
    assert resp.status_code == 400
