# FILE: caseportal/store.py
"""
Sheet-backed record store.

Every table lives in the external spreadsheet: row 1 is the header, the
identifier is always column A. The store only talks to a `TabularService`,
so the spreadsheet can be swapped for anything that can read a table,
append a row and overwrite a row in place.

Known limitation: `find_and_update` is read-modify-write without a lock.
Two concurrent updates of the same id can both read the old row and the
later write wins (lost update). Appends from concurrent writers are ordered
by the spreadsheet service, not by this module.
"""
import logging

from caseportal.codec import decode_rows, encode_record

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the tabular service cannot complete a write."""


class RowNotFound(StoreError):
    def __init__(self, table, record_id):
        super().__init__('找不到該筆 ID')
        self.table = table
        self.record_id = record_id


class TabularService:
    """Capability interface over a spreadsheet-like backend.

    Row numbers are 1-based and count the header row, the way a sheet does.
    """

    def read_table(self, name):
        raise NotImplementedError

    def read_header(self, name):
        rows = self.read_table(name)
        return list(rows[0]) if rows else []

    def append_row(self, name, row):
        raise NotImplementedError

    def write_row(self, name, row_number, row):
        raise NotImplementedError


class RecordStore:
    def __init__(self, service, table):
        self.service = service
        self.table = table

    def __repr__(self):
        return f'<RecordStore {self.table}>'

    def read_all(self):
        """All records of the table, or [] if it is empty or unreadable."""
        try:
            rows = self.service.read_table(self.table)
        except Exception as e:
            logger.error(f"讀取 {self.table} 失敗: {e}", exc_info=True)
            return []
        if not rows:
            return []
        return decode_rows(rows[0], rows[1:])

    def append(self, record):
        header = self.service.read_header(self.table)
        if not header:
            raise StoreError(f"資料表 {self.table} 缺少標題列")
        self.service.append_row(self.table, encode_record(header, record))
        logger.info(f"Appended {record.get(header[0], '?')} to {self.table}")
        return record

    def find_and_update(self, record_id, fields):
        rows = self.service.read_table(self.table)
        if not rows:
            raise RowNotFound(self.table, record_id)
        header = rows[0]

        # id is assumed to be in the first column
        for row_number, row in enumerate(rows[1:], start=2):
            if row and row[0] == record_id:
                break
        else:
            raise RowNotFound(self.table, record_id)

        current = decode_rows(header, [row])[0]
        merged = {**current, **fields}
        self.service.write_row(self.table, row_number, encode_record(header, merged))
        logger.info(f"Updated {record_id} in {self.table} (row {row_number}): {sorted(fields)}")
        return merged
