# FILE: caseportal/models.py
import time
from datetime import datetime, timezone

from flask_login import UserMixin

# --- Roles ---
ROLE_TEACHER = 'teacher'
ROLE_THERAPIST = 'therapist'
ROLE_PARENTS = 'parents'
ROLES = (ROLE_TEACHER, ROLE_THERAPIST, ROLE_PARENTS)

ROLE_LABELS = {
    ROLE_TEACHER: '教師',
    ROLE_THERAPIST: '治療師',
    ROLE_PARENTS: '家長',
}

# --- Question status ---
STATUS_PENDING = '待回覆'
STATUS_ANSWERED = '已回覆'

# --- Tables (one worksheet each), id column first ---
USERS = 'users'
RECORDS = 'records'
MESSAGES = 'messages'
IEP_FILES = 'iep_files'
QUESTIONS = 'questions'

TABLE_HEADERS = {
    USERS: ['username', 'password', 'role', 'name'],
    RECORDS: ['id', 'date', 'therapist_name', 'content', 'teacher_reply', 'created_at'],
    MESSAGES: ['id', 'user_name', 'role', 'message', 'timestamp'],
    IEP_FILES: ['id', 'filename', 'drive_file_id', 'uploaded_by', 'role', 'file_link',
                'upload_date', 'comments'],
    QUESTIONS: ['id', 'date', 'asker_name', 'asker_role', 'question', 'target_role',
                'replier_name', 'reply', 'status'],
}


class Identity(UserMixin):
    """The caller behind a verified bearer token. Never persisted."""

    def __init__(self, username, role, name):
        self.username = username
        self.role = role
        self.name = name

    def get_id(self):
        return self.username

    def has_role(self, *roles):
        return self.role in roles

    def to_claims(self):
        return {'username': self.username, 'role': self.role, 'name': self.name}

    def __repr__(self):
        return f'<Identity {self.username} ({self.role})>'


def new_record_id(prefix):
    """e.g. rec-1718000000000, millisecond resolution."""
    return f"{prefix}-{int(time.time() * 1000)}"


def utc_now():
    return datetime.now(timezone.utc)


def today_str():
    return utc_now().date().isoformat()


def timestamp_str():
    return utc_now().isoformat(timespec='milliseconds').replace('+00:00', 'Z')
