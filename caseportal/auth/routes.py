# FILE: caseportal/auth/routes.py
from flask import current_app, jsonify
from flask_login import current_user, login_required

from caseportal.auth import bp
from caseportal.auth.forms import LoginForm, first_error
from caseportal.auth.tokens import issue_token
from caseportal.services import find_user
from caseportal.utils import json_body


@bp.route('/login', methods=['POST'])
def login():
    json_body()
    form = LoginForm()
    if not form.validate_on_submit():
        return jsonify({'status': 'error', 'message': first_error(form)}), 400

    username = form.username.data.strip()
    user = find_user(username, form.password.data)
    if not user:
        current_app.logger.warning(f"Login failed for '{username}'")
        return jsonify({'status': 'error', 'message': '帳號或密碼錯誤'}), 401

    current_app.logger.info(f"Login succeeded: {user['username']} ({user.get('role')})")
    token = issue_token(user)
    return jsonify({'token': token, 'user': {'name': user.get('name', ''), 'role': user.get('role', '')}})


@bp.route('/me')
@login_required
def me():
    return jsonify({'user': current_user.to_claims()})
