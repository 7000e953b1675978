# FILE: caseportal/auth/tokens.py
"""
Bearer tokens.

Every API request is verified on its own from a signed HS256 token
carrying username, role and name. There is no server-side session.
"""
from datetime import timedelta

import jwt
from flask import abort, current_app, jsonify

from caseportal import login
from caseportal.models import Identity, utc_now

ALGORITHM = 'HS256'
REQUIRED_CLAIMS = ('username', 'role', 'name')


def issue_token(user):
    """`user` is a users-sheet row or an Identity."""
    claims = user.to_claims() if isinstance(user, Identity) else {k: user.get(k, '') for k in REQUIRED_CLAIMS}
    now = utc_now()
    payload = dict(claims, iat=now, exp=now + timedelta(days=current_app.config['TOKEN_EXPIRES_DAYS']))
    return jwt.encode(payload, current_app.config['JWT_SECRET'], algorithm=ALGORITHM)


def decode_token(token):
    """Return the Identity for `token`; raises jwt.InvalidTokenError."""
    payload = jwt.decode(
        token,
        current_app.config['JWT_SECRET'],
        algorithms=[ALGORITHM],
        options={'require': ['exp']},
    )
    if any(k not in payload for k in REQUIRED_CLAIMS):
        raise jwt.MissingRequiredClaimError('username/role/name')
    return Identity(payload['username'], payload['role'], payload['name'])


def bearer_token(header_value):
    """Token part of 'Bearer <token>', or None."""
    if not header_value:
        return None
    parts = header_value.split()
    if len(parts) != 2 or parts[0].lower() != 'bearer':
        return None
    return parts[1]


def identity_from_token(token):
    """Identity for a token, None when it is invalid or expired."""
    try:
        return decode_token(token)
    except jwt.InvalidTokenError as e:
        current_app.logger.warning(f"Rejected token: {e}")
        return None


@login.request_loader
def load_identity_from_request(request):
    token = bearer_token(request.headers.get('Authorization'))
    if not token:
        return None  # -> unauthorized_handler (401)
    identity = identity_from_token(token)
    if identity is None:
        abort(403, description='憑證無效')
    return identity


@login.user_loader
def load_user(username):
    # API identities never live in the cookie session
    return None


@login.unauthorized_handler
def unauthorized():
    return jsonify({'status': 'error', 'message': '未登入'}), 401
