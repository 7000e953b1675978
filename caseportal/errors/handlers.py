# FILE: caseportal/errors/handlers.py
from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException

from caseportal.errors import bp
from caseportal.store import RowNotFound, StoreError

# Shown when an HTTP error is raised without its own description
DEFAULT_MESSAGES = {
    400: '請求資料格式錯誤',
    401: '未登入',
    403: '您的權限不足，無法執行此動作',
    404: '找不到資源',
    405: '不支援的請求方法',
    413: '檔案超過大小上限',
}


def error_response(message, status_code, **extra):
    body = {'status': 'error', 'message': message}
    body.update(extra)
    return jsonify(body), status_code


@bp.app_errorhandler(HTTPException)
def handle_http_error(e):
    if e.description != type(e).description:
        message = e.description
    else:
        message = DEFAULT_MESSAGES.get(e.code, e.name)
    return error_response(message, e.code)


@bp.app_errorhandler(RowNotFound)
def handle_row_not_found(e):
    current_app.logger.warning(f"{e.table}: no row with id {e.record_id}")
    return error_response(str(e), 404)


@bp.app_errorhandler(StoreError)
def handle_store_error(e):
    current_app.logger.error(f"Spreadsheet error: {e}", exc_info=True)
    return error_response(str(e), 500)


@bp.app_errorhandler(Exception)
def handle_unexpected_error(e):
    current_app.logger.error(f"Unhandled error: {e}", exc_info=True)
    return error_response(str(e), 500)
