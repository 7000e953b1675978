# FILE: caseportal/services.py
import hmac

from flask import current_app
from openai import OpenAI
from werkzeug.security import check_password_hash

from caseportal import socketio
from caseportal.google_api import get_sheets
from caseportal.store import RecordStore

# Werkzeug hash prefixes; anything else in the users sheet is treated as plaintext
PASSWORD_HASH_METHODS = ('scrypt:', 'pbkdf2:')

SUMMARY_SYSTEM_PROMPT = '你是一位專業的特教個案管理師，負責整理親師與治療師之間的溝通重點。'
SUMMARY_EMPTY_TEXT = '目前沒有留言可總結。'


def get_store(table):
    return RecordStore(get_sheets(), table)


# --- Authentication ---

def is_password_hash(value):
    """Werkzeug hashes look like 'method$salt$hash'."""
    if not value.startswith(PASSWORD_HASH_METHODS):
        return False
    parts = value.split('$')
    return len(parts) == 3 and all(parts)


def verify_password(stored, given):
    """
    Check a login password against the value in the users sheet.
    Rows provisioned with `flask hash-password` hold a Werkzeug hash; older
    rows still hold the plaintext password.
    """
    if not stored or given is None:
        return False
    if is_password_hash(stored):
        return check_password_hash(stored, given)
    return hmac.compare_digest(stored.encode('utf-8'), given.encode('utf-8'))


def find_user(username, password):
    users = get_store('users').read_all()
    for user in users:
        if user.get('username') == username and verify_password(user.get('password'), password):
            return user
    return None


# --- Change notifier ---

def broadcast_change(event, payload):
    """
    Fan out a change to every connected browser session.
    Best effort: no replay for late joiners, no acknowledgement.
    """
    socketio.emit(event, payload)
    current_app.logger.info(f"Broadcast {event}: {payload.get('msg') or payload.get('id', '')}")


# --- AI summary ---

def get_openai_client():
    client = current_app.extensions.get('openai')
    if client is None:
        client = OpenAI(api_key=current_app.config['OPENAI_API_KEY'])
        current_app.extensions['openai'] = client
    return client


def build_summary_prompt(messages):
    lines = "\n".join(f"{m.get('role', '')} {m.get('user_name', '')} 說: {m.get('message', '')}" for m in messages)
    return (
        "請扮演一位專業的特教個案管理師。\n"
        "以下是親師與治療師的最近溝通紀錄：\n"
        "---\n"
        f"{lines}\n"
        "---\n"
        "請幫我用條列式摘要以上溝通的重點 (100字以內)："
    )


def summarize_messages(messages):
    """Ask the LLM for a bullet summary of `messages`; returns its text verbatim."""
    prompt = build_summary_prompt(messages)
    client = get_openai_client()
    response = client.chat.completions.create(
        model=current_app.config['OPENAI_MODEL'],
        messages=[
            {"role": "system", "content": SUMMARY_SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
    )
    return response.choices[0].message.content
