# FILE: caseportal/google_api.py
"""
Google Sheets and Google Drive clients.

Both are authenticated with one service account. The clients are built on
first use and cached in `app.extensions`, so an app without Google
credentials (tests, `flask hash-password`) still starts.
"""
import io
import json

from flask import current_app
from google.oauth2 import service_account
import googleapiclient.discovery
from googleapiclient.http import MediaIoBaseUpload

from caseportal.store import TabularService

SCOPES = [
    'https://www.googleapis.com/auth/spreadsheets',
    'https://www.googleapis.com/auth/drive',
]


def load_credentials(config):
    """Service account credentials from GOOGLE_CREDENTIALS (JSON text) or GOOGLE_KEY_FILE."""
    if config.get('GOOGLE_CREDENTIALS'):
        info = json.loads(config['GOOGLE_CREDENTIALS'])
        return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
    if config.get('GOOGLE_KEY_FILE'):
        return service_account.Credentials.from_service_account_file(config['GOOGLE_KEY_FILE'], scopes=SCOPES)
    raise RuntimeError('Google credentials are not configured (set GOOGLE_CREDENTIALS or GOOGLE_KEY_FILE)')


class GoogleSheetsService(TabularService):
    """
    TabularService over one spreadsheet; each table is a worksheet tab.
    Writes use RAW input so cell text is stored exactly as sent, never
    parsed as a number, date or formula.
    """

    def __init__(self, sheets_resource, spreadsheet_id):
        self.values = sheets_resource.spreadsheets().values()
        self.spreadsheet_id = spreadsheet_id

    def read_table(self, name):
        result = self.values.get(spreadsheetId=self.spreadsheet_id, range=f'{name}!A:Z').execute()
        return result.get('values', [])

    def read_header(self, name):
        result = self.values.get(spreadsheetId=self.spreadsheet_id, range=f'{name}!1:1').execute()
        rows = result.get('values', [])
        return rows[0] if rows else []

    def append_row(self, name, row):
        self.values.append(
            spreadsheetId=self.spreadsheet_id,
            range=name,
            valueInputOption='RAW',
            body={'values': [row]},
        ).execute()

    def write_row(self, name, row_number, row):
        self.values.update(
            spreadsheetId=self.spreadsheet_id,
            range=f'{name}!A{row_number}',
            valueInputOption='RAW',
            body={'values': [row]},
        ).execute()


class DriveStorage:
    def __init__(self, drive_resource, folder_id):
        self.drive = drive_resource
        self.folder_id = folder_id

    def upload(self, filename, data, mimetype):
        """Upload bytes into the IEP folder. Returns {'id', 'name', 'webViewLink'}."""
        media = MediaIoBaseUpload(io.BytesIO(data), mimetype=mimetype or 'application/octet-stream', resumable=False)
        body = {'name': filename}
        if self.folder_id:
            body['parents'] = [self.folder_id]
        return self.drive.files().create(
            body=body,
            media_body=media,
            fields='id, name, webViewLink',
            supportsAllDrives=True,
        ).execute()


def get_sheets():
    """The app's TabularService, built on first use."""
    service = current_app.extensions.get('sheets')
    if service is None:
        creds = load_credentials(current_app.config)
        resource = googleapiclient.discovery.build('sheets', 'v4', credentials=creds, cache_discovery=False)
        service = GoogleSheetsService(resource, current_app.config['GOOGLE_SHEET_ID'])
        current_app.extensions['sheets'] = service
        current_app.logger.info("Google Sheets client initialised")
    return service


def get_drive():
    storage = current_app.extensions.get('drive')
    if storage is None:
        creds = load_credentials(current_app.config)
        resource = googleapiclient.discovery.build('drive', 'v3', credentials=creds, cache_discovery=False)
        storage = DriveStorage(resource, current_app.config['GOOGLE_DRIVE_FOLDER_ID'])
        current_app.extensions['drive'] = storage
        current_app.logger.info("Google Drive client initialised")
    return storage
