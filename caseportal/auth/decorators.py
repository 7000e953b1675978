# caseportal/auth/decorators.py

from functools import wraps
from flask import abort
from flask_login import current_user

from caseportal.models import ROLE_TEACHER, ROLE_THERAPIST

DEFAULT_FORBIDDEN_MESSAGE = '您的權限不足，無法執行此動作'

# Which roles may perform each restricted operation.
# Operations not listed here are open to any signed-in identity.
ROLE_POLICY = {
    'records.list': (ROLE_TEACHER, ROLE_THERAPIST),
    'records.create': (ROLE_THERAPIST,),
    'records.reply': (ROLE_TEACHER,),
    'iep.upload': (ROLE_TEACHER,),
}

FORBIDDEN_MESSAGES = {
    'records.list': '家長權限無法查看專業治療紀錄',
}


def role_required(*roles, message=DEFAULT_FORBIDDEN_MESSAGE):
    """
    Allow the request through only when the caller's role is in `roles`.
    Must sit below @login_required so current_user is an Identity.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if not current_user.is_authenticated:
                abort(401)
            if not current_user.has_role(*roles):
                abort(403, description=message)
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def policy_required(operation):
    roles = ROLE_POLICY[operation]
    return role_required(*roles, message=FORBIDDEN_MESSAGES.get(operation, DEFAULT_FORBIDDEN_MESSAGE))
