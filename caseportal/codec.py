# FILE: caseportal/codec.py
"""
Row <-> record conversion for header-driven tables.

A table is a header row (ordered column names) followed by data rows. Both
functions work purely by position, so they stay compatible as long as the
header order does not change between calls.
"""


def decode_rows(header, rows):
    """
    Zip each data row against the header.

    Short rows are padded with empty strings and cells beyond the header
    length are dropped.
    """
    records = []
    for row in rows:
        record = {}
        for index, name in enumerate(header):
            value = row[index] if index < len(row) else ''
            record[name] = '' if value is None else value
        records.append(record)
    return records


def encode_record(header, record):
    """Return the values of `record` in header order, '' for missing fields."""
    row = []
    for name in header:
        value = record.get(name)
        row.append('' if value is None else value)
    return row
