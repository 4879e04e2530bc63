"""Flattens normalized records into tabular and line-oriented text."""

import csv
import io
from collections.abc import Sequence
from dataclasses import fields

from docextract.records.models import DocumentKind, LineItem, NormalizedRecord
from docextract.schemas.registry import SchemaRegistry

DELIMITER = "; "


def declared_columns(kind: DocumentKind) -> tuple[str, ...]:
    """Field names of *kind* in the order its schema declares them."""
    return SchemaRegistry().schema_for(kind).field_names


def to_csv(records: Sequence[NormalizedRecord], kind: DocumentKind) -> str:
    """Render *records* as CSV: a header row, then one row per record.

    Columns are ``file_name`` followed by the declared fields. Line items are
    rendered as their count; missing values as empty cells.
    """
    columns = declared_columns(kind)
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["file_name", *columns])
    for record in records:
        writer.writerow([record.file_name, *_cells(record, columns)])
    return buffer.getvalue()


def to_delimited_lines(records: Sequence[NormalizedRecord], kind: DocumentKind) -> str:
    """Render *records* one per line, declared fields joined by ``"; "``."""
    columns = declared_columns(kind)
    return "\n".join(DELIMITER.join(_cells(record, columns)) for record in records)


def _cells(record: NormalizedRecord, columns: tuple[str, ...]) -> list[str]:
    values = {f.name: getattr(record, f.name) for f in fields(record)}
    return [_format(values.get(column)) for column in columns]


def _format(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, tuple) and all(isinstance(v, LineItem) for v in value):
        return str(len(value))
    return str(value)
