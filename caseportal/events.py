# FILE: caseportal/events.py
"""Socket.IO connection handling for the live-update channel."""
from flask import current_app, request

from caseportal import socketio
from caseportal.auth.tokens import identity_from_token


@socketio.on('connect')
def handle_connect(auth=None):
    token = auth.get('token') if isinstance(auth, dict) else None
    identity = identity_from_token(token) if token else None
    if identity is None:
        current_app.logger.info(f"Socket connection refused ({request.sid}): missing or invalid token")
        return False
    current_app.logger.info(f"Socket connected: {identity.username} ({request.sid})")


@socketio.on('disconnect')
def handle_disconnect(*args):
    current_app.logger.info(f"Socket disconnected ({request.sid})")
