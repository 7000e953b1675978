# FILE: caseportal/messages/routes.py
from flask import current_app, jsonify
from flask_login import current_user, login_required

from caseportal.messages import bp
from caseportal.models import MESSAGES, new_record_id, timestamp_str
from caseportal.services import SUMMARY_EMPTY_TEXT, broadcast_change, get_store, summarize_messages
from caseportal.utils import json_body, text_field


@bp.route('', methods=['GET'])
@login_required
def list_messages():
    data = get_store(MESSAGES).read_all()
    return jsonify({'data': data})


@bp.route('', methods=['POST'])
@login_required
def create_message():
    data = json_body()
    text = text_field(data, 'message')
    if not text:
        return jsonify({'status': 'error', 'message': '請輸入留言內容'}), 400

    new_msg = {
        'id': new_record_id('msg'),
        'user_name': current_user.name,
        'role': current_user.role,
        'message': text,
        'timestamp': timestamp_str(),
    }
    try:
        get_store(MESSAGES).append(new_msg)
    except Exception as e:
        current_app.logger.error(f"Error posting message for {current_user.username}: {e}", exc_info=True)
        return jsonify({'status': 'error', 'message': str(e)}), 500

    # 即時廣播整筆留言，前端直接附加到畫面
    broadcast_change('message_update', new_msg)
    return jsonify({'status': 'success', 'message': '留言成功', 'data': new_msg})


@bp.route('/summary')
@login_required
def summary():
    """
    AI summary of the most recent messages (SUMMARY_MESSAGE_COUNT, default 10).
    The model's text is returned as-is.
    """
    count = current_app.config['SUMMARY_MESSAGE_COUNT']
    recent = get_store(MESSAGES).read_all()[-count:]
    if not recent:
        return jsonify({'summary': SUMMARY_EMPTY_TEXT})

    current_app.logger.info(f"Summarising {len(recent)} messages for {current_user.username}")
    try:
        text = summarize_messages(recent)
    except Exception as e:
        current_app.logger.error(f"AI summary failed: {e}", exc_info=True)
        return jsonify({'status': 'error', 'message': 'AI 總結失敗', 'error': str(e)}), 500

    return jsonify({'summary': text})
