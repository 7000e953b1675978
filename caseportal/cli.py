# FILE: caseportal/cli.py
import click
from werkzeug.security import generate_password_hash

from caseportal.google_api import get_sheets
from caseportal.models import TABLE_HEADERS
from caseportal.store import RecordStore


def register(app):

    @app.cli.command('check-sheets')
    def check_sheets():
        """List each table's header row and any expected columns it is missing."""
        sheets = get_sheets()
        problems = 0
        for table, expected in TABLE_HEADERS.items():
            try:
                header = sheets.read_header(table)
            except Exception as e:
                print(f"!!! {table}: cannot read ({e})")
                problems += 1
                continue
            missing = [c for c in expected if c not in header]
            print(f"{table}: {', '.join(header) or '(empty)'}")
            if not header or header[0] != expected[0]:
                print(f"  !!! first column must be '{expected[0]}'")
                problems += 1
            if missing:
                print(f"  !!! missing columns: {', '.join(missing)}")
                problems += 1
        print(f"\n--- {problems} problem(s) found ---")

    @app.cli.command('init-sheets')
    def init_sheets():
        """Write the expected header row into tables that have none."""
        sheets = get_sheets()
        for table, expected in TABLE_HEADERS.items():
            if sheets.read_header(table):
                print(f"{table}: header already present, skipped")
                continue
            sheets.write_row(table, 1, list(expected))
            print(f"{table}: header written")

    @app.cli.command('show-table')
    @click.argument('table')
    def show_table(table):
        """Print every record of TABLE."""
        records = RecordStore(get_sheets(), table).read_all()
        if not records:
            print(f"!!! {table}: no records")
            return
        for record in records:
            print(" | ".join(f"{k}={v}" for k, v in record.items() if k != 'password'))
        print(f"\n{len(records)} record(s)")

    @app.cli.command('hash-password')
    @click.argument('password')
    def hash_password(password):
        """Print a password hash to paste into the users table."""
        print(generate_password_hash(password))
