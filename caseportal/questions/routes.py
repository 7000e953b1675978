# FILE: caseportal/questions/routes.py
# 問答區：任何角色都可以提問與回覆
from flask import current_app, jsonify
from flask_login import current_user, login_required

from caseportal.models import QUESTIONS, ROLES, STATUS_ANSWERED, STATUS_PENDING, new_record_id, today_str
from caseportal.questions import bp
from caseportal.services import broadcast_change, get_store
from caseportal.store import RowNotFound
from caseportal.utils import json_body, text_field


def parse_target_roles(value):
    """
    'teacher,parents' or ['teacher', 'parents'] -> 'teacher,parents'.
    Duplicates are dropped, order is kept. Raises ValueError on unknown roles.
    """
    if not value:
        return ''
    if isinstance(value, str):
        tags = value.split(',')
    elif isinstance(value, list):
        tags = value
    else:
        raise ValueError('target_role 格式錯誤')
    roles = []
    for tag in tags:
        tag = str(tag).strip()
        if not tag:
            continue
        if tag not in ROLES:
            raise ValueError(f'未知的角色: {tag}')
        if tag not in roles:
            roles.append(tag)
    return ','.join(roles)


@bp.route('', methods=['GET'])
@login_required
def list_questions():
    data = get_store(QUESTIONS).read_all()
    return jsonify({'data': data})


@bp.route('', methods=['POST'])
@login_required
def create_question():
    data = json_body()
    question = text_field(data, 'question')
    if not question:
        return jsonify({'status': 'error', 'message': '請輸入問題內容'}), 400
    try:
        target_role = parse_target_roles(data.get('target_role'))
    except ValueError as e:
        return jsonify({'status': 'error', 'message': str(e)}), 400

    new_question = {
        'id': new_record_id('q'),
        'date': today_str(),
        'asker_name': current_user.name,
        'asker_role': current_user.role,
        'question': question,
        'target_role': target_role,
        'replier_name': '',
        'reply': '',
        'status': STATUS_PENDING,
    }
    try:
        get_store(QUESTIONS).append(new_question)
    except Exception as e:
        current_app.logger.error(f"Error creating question for {current_user.username}: {e}", exc_info=True)
        return jsonify({'status': 'error', 'message': str(e)}), 500

    broadcast_change('question_update', {'msg': f'{current_user.name} 提出了新問題'})
    return jsonify({'status': 'success', 'message': '提問成功', 'data': new_question})


@bp.route('/<question_id>', methods=['PUT'])
@login_required
def reply_question(question_id):
    data = json_body()
    reply = text_field(data, 'reply')
    if not reply:
        return jsonify({'status': 'error', 'message': '請輸入回覆內容'}), 400

    # A later reply overwrites the earlier one; status stays 已回覆
    fields = {'reply': reply, 'replier_name': current_user.name, 'status': STATUS_ANSWERED}
    try:
        question = get_store(QUESTIONS).find_and_update(question_id, fields)
    except RowNotFound:
        raise
    except Exception as e:
        current_app.logger.error(f"Error replying to question {question_id}: {e}", exc_info=True)
        return jsonify({'status': 'error', 'message': str(e)}), 500

    broadcast_change('question_update', {'msg': f'{current_user.name} 回覆了問題'})
    return jsonify({'status': 'success', 'message': '回覆成功', 'data': question})
