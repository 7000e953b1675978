# FILE: caseportal/records/routes.py
# 專業紀錄：治療師新增、教師回覆，家長不可查看
from flask import current_app, jsonify
from flask_login import current_user, login_required

from caseportal.auth.decorators import policy_required
from caseportal.models import RECORDS, new_record_id, timestamp_str, today_str
from caseportal.records import bp
from caseportal.services import broadcast_change, get_store
from caseportal.store import RowNotFound
from caseportal.utils import json_body, text_field


@bp.route('', methods=['GET'])
@login_required
@policy_required('records.list')
def list_records():
    data = get_store(RECORDS).read_all()
    return jsonify({'data': data})


@bp.route('', methods=['POST'])
@login_required
@policy_required('records.create')
def create_record():
    data = json_body()
    content = text_field(data, 'content')
    if not content:
        return jsonify({'status': 'error', 'message': '請輸入紀錄內容'}), 400

    new_record = {
        'id': new_record_id('rec'),
        'date': today_str(),
        'therapist_name': current_user.name,
        'content': content,
        'teacher_reply': '',
        'created_at': timestamp_str(),
    }
    try:
        get_store(RECORDS).append(new_record)
    except Exception as e:
        current_app.logger.error(f"Error creating record for {current_user.username}: {e}", exc_info=True)
        return jsonify({'status': 'error', 'message': str(e)}), 500

    broadcast_change('record_update', {'msg': '治療師新增了一筆紀錄'})
    return jsonify({'status': 'success', 'message': '新增成功', 'data': new_record})


@bp.route('/<record_id>', methods=['PUT'])
@login_required
@policy_required('records.reply')
def reply_record(record_id):
    data = json_body()
    reply = text_field(data, 'reply')
    if not reply:
        return jsonify({'status': 'error', 'message': '請輸入回覆內容'}), 400

    try:
        record = get_store(RECORDS).find_and_update(record_id, {'teacher_reply': reply})
    except RowNotFound:
        raise
    except Exception as e:
        current_app.logger.error(f"Error replying to record {record_id}: {e}", exc_info=True)
        return jsonify({'status': 'error', 'message': str(e)}), 500

    broadcast_change('record_update', {'msg': '老師已回覆紀錄'})
    return jsonify({'status': 'success', 'message': '回覆成功', 'data': record})
