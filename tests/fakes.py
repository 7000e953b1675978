"""In-memory stand-ins for Google Sheets, Google Drive and the OpenAI client."""
from types import SimpleNamespace

from caseportal.store import TabularService


class MemorySheets(TabularService):
    def __init__(self, tables=None):
        self.tables = {name: [list(row) for row in rows] for name, rows in (tables or {}).items()}
        self.fail_reads = False
        self.fail_writes = False
        self.writes = []

    def read_table(self, name):
        if self.fail_reads:
            raise RuntimeError('sheets unavailable')
        return [list(row) for row in self.tables.get(name, [])]

    def append_row(self, name, row):
        if self.fail_writes:
            raise RuntimeError('quota exceeded')
        self.tables.setdefault(name, []).append(list(row))
        self.writes.append(('append', name, list(row)))

    def write_row(self, name, row_number, row):
        if self.fail_writes:
            raise RuntimeError('quota exceeded')
        rows = self.tables.setdefault(name, [])
        while len(rows) < row_number:
            rows.append([])
        rows[row_number - 1] = list(row)
        self.writes.append(('write', name, row_number, list(row)))


class FakeDrive:
    def __init__(self):
        self.uploads = []
        self.error = None

    def upload(self, filename, data, mimetype):
        if self.error:
            raise self.error
        self.uploads.append({'filename': filename, 'data': data, 'mimetype': mimetype})
        file_id = f'drive-{len(self.uploads)}'
        return {'id': file_id, 'name': filename, 'webViewLink': f'https://drive.google.com/file/d/{file_id}/view'}


class FakeCompletions:
    def __init__(self):
        self.calls = []
        self.reply = '- 治療師建議在家練習發音\n- 教師將調整課堂座位'
        self.error = None

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    def __init__(self):
        self.completions = FakeCompletions()
        self.chat = SimpleNamespace(completions=self.completions)
