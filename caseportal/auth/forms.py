# caseportal/auth/forms.py
from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField
from wtforms.validators import DataRequired, ValidationError


class ApiForm(FlaskForm):
    """Forms posted by the JS client with a bearer token, so no CSRF field."""
    class Meta:
        csrf = False


def text_only(form, field):
    # JSON bodies can carry numbers or lists where a string is expected
    if field.data is not None and not isinstance(field.data, str):
        raise ValidationError(f'欄位格式錯誤: {field.name}')


class LoginForm(ApiForm):
    username = StringField('帳號', validators=[DataRequired(message='請輸入帳號'), text_only])
    password = PasswordField('密碼', validators=[DataRequired(message='請輸入密碼'), text_only])


def first_error(form):
    """First validation message of a form, for the JSON error body."""
    for errors in form.errors.values():
        if errors:
            return errors[0]
    return '資料格式錯誤'
