import os
from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, '.env'))

class Config:
    # --- 機密設定一律從 .env 讀取，不寫死在程式裡 ---
    SECRET_KEY = os.environ.get('SECRET_KEY')
    JWT_SECRET = os.environ.get('JWT_SECRET') or SECRET_KEY
    TOKEN_EXPIRES_DAYS = int(os.environ.get('TOKEN_EXPIRES_DAYS') or 7)

    # Google Sheets is the system of record, Drive holds the IEP files
    GOOGLE_SHEET_ID = os.environ.get('GOOGLE_SHEET_ID')
    GOOGLE_CREDENTIALS = os.environ.get('GOOGLE_CREDENTIALS')
    GOOGLE_KEY_FILE = os.environ.get('GOOGLE_KEY_FILE')
    GOOGLE_DRIVE_FOLDER_ID = os.environ.get('GOOGLE_DRIVE_FOLDER_ID')

    OPENAI_API_KEY = os.environ.get('OPENAI_API_KEY')
    OPENAI_MODEL = os.environ.get('OPENAI_MODEL') or 'gpt-4o-mini'
    SUMMARY_MESSAGE_COUNT = int(os.environ.get('SUMMARY_MESSAGE_COUNT') or 10)

    # IEP uploads, 15MB ceiling
    MAX_CONTENT_LENGTH = 15 * 1024 * 1024

    SOCKETIO_CORS_ORIGINS = os.environ.get('SOCKETIO_CORS_ORIGINS') or '*'
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    PORT = int(os.environ.get('PORT') or 5000)


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing-secret-key-not-for-production'
    JWT_SECRET = 'testing-jwt-secret-0123456789abcdef0123456789'
    GOOGLE_SHEET_ID = 'test-sheet'
    GOOGLE_DRIVE_FOLDER_ID = 'test-folder'
    OPENAI_API_KEY = 'test-key'
    OPENAI_MODEL = 'gpt-4o-mini'
    SUMMARY_MESSAGE_COUNT = 10
    TOKEN_EXPIRES_DAYS = 7
    MAX_CONTENT_LENGTH = 64 * 1024
