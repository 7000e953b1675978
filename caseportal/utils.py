# FILE: caseportal/utils.py
from flask import abort, request

BAD_BODY_MESSAGE = '請求資料格式錯誤'


def json_body():
    """The request's JSON object. A body that is not an object is a 400."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        abort(400, description=BAD_BODY_MESSAGE)
    return data


def text_field(data, name):
    """Stripped string value of `name`; '' when absent, 400 when not a string."""
    value = data.get(name)
    if value is None:
        return ''
    if not isinstance(value, str):
        abort(400, description=f'欄位格式錯誤: {name}')
    return value.strip()
