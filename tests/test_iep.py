import io


def pdf_upload(**extra):
    data = {'file': (io.BytesIO(b'%PDF-1.4 iep plan'), '王小明_IEP.pdf', 'application/pdf')}
    data.update(extra)
    return data


def test_teacher_uploads_iep_file(client, headers_for, sheets, drive):
    resp = client.post('/api/iep', data=pdf_upload(comments='期初會議版本'),
                       content_type='multipart/form-data',
                       headers=headers_for('teacher', username='bob', name='Bob'))

    assert resp.status_code == 200
    record = resp.get_json()['data']
    assert drive.uploads[0]['filename'] == '王小明_IEP.pdf'
    assert drive.uploads[0]['data'] == b'%PDF-1.4 iep plan'
    assert drive.uploads[0]['mimetype'] == 'application/pdf'
    assert record['drive_file_id'] == 'drive-1'
    assert record['file_link'] == 'https://drive.google.com/file/d/drive-1/view'
    assert record['uploaded_by'] == 'Bob'
    assert record['role'] == 'teacher'
    assert record['comments'] == '期初會議版本'
    assert sheets.tables['iep_files'][-1][0] == record['id']

    listed = client.get('/api/iep', headers=headers_for('parents')).get_json()['data']
    assert [f['id'] for f in listed] == [record['id']]


def test_upload_without_file(client, headers_for, drive):
    resp = client.post('/api/iep', data={'comments': 'no file'}, content_type='multipart/form-data',
                       headers=headers_for('teacher'))
    assert resp.status_code == 400
    assert resp.get_json()['message'] == '未選擇檔案'
    assert drive.uploads == []


def test_upload_over_size_ceiling(client, headers_for, drive):
    big = {'file': (io.BytesIO(b'x' * (128 * 1024)), 'big.pdf', 'application/pdf')}
    resp = client.post('/api/iep', data=big, content_type='multipart/form-data', headers=headers_for('teacher'))
    assert resp.status_code == 413
    assert resp.get_json()['message'] == '檔案超過大小上限'
    assert drive.uploads == []


def test_drive_failure_records_nothing(client, headers_for, sheets, drive):
    drive.error = RuntimeError('insufficient permissions')
    resp = client.post('/api/iep', data=pdf_upload(), content_type='multipart/form-data',
                       headers=headers_for('teacher'))
    assert resp.status_code == 500
    assert resp.get_json()['message'] == '上傳失敗: insufficient permissions'
    assert len(sheets.tables['iep_files']) == 1
