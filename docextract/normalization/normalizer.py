"""Resolves partial extraction results into complete, stable records.

This is the only place where absent fields become concrete defaults.
Values the model supplied are taken at face value; no plausibility checks.
"""

import uuid
from collections.abc import Callable
from typing import Any, ClassVar

from docextract.extraction.models import ExtractionResult
from docextract.logging.logger import Log
from docextract.records.models import (
    BusinessCardRecord,
    DocumentKind,
    InvoiceRecord,
    LineItem,
    NormalizedRecord,
)

FAILURE_MARKER = "ERROR"
FAILURE_NAME = "Extraction Failed"


def new_record_id() -> str:
    """Return a random 128-bit identifier as 32 hex characters.

    Uniqueness is probabilistic; collisions within a batch are negligible.
    """
    return uuid.uuid4().hex


class RecordNormalizer:
    """Merges parsed model output with per-kind defaults."""

    INVOICE_DEFAULTS: ClassVar[dict[str, Any]] = {
        "invoice_number": None,
        "invoice_date": None,
        "supplier_name": "Unknown Supplier",
        "supplier_tax_id": None,
        "total_amount": 0,
        "currency": "USD",
        "tax_amount": 0,
        "line_items": (),
    }

    BUSINESS_CARD_DEFAULTS: ClassVar[dict[str, Any]] = {
        "full_name": "Unknown",
        "company": None,
        "job_title": None,
        "email": None,
        "phone": None,
        "website": None,
        "address": None,
    }

    def __init__(self, id_factory: Callable[[], str] = new_record_id) -> None:
        self._id_factory = id_factory

    def normalize(
        self, raw: ExtractionResult, kind: DocumentKind, file_name: str
    ) -> NormalizedRecord:
        """Build the complete record for *kind*; never raises."""
        if kind is DocumentKind.INVOICE:
            values = self._merge(raw, self.INVOICE_DEFAULTS)
            values["line_items"] = self._build_line_items(
                raw.get("line_items"), file_name
            )
            return InvoiceRecord(id=self._id_factory(), file_name=file_name, **values)
        values = self._merge(raw, self.BUSINESS_CARD_DEFAULTS)
        return BusinessCardRecord(id=self._id_factory(), file_name=file_name, **values)

    def failure_placeholder(self, kind: DocumentKind, file_name: str) -> NormalizedRecord:
        """Build the sentinel record shown in place of a failed extraction."""
        if kind is DocumentKind.INVOICE:
            return InvoiceRecord(
                id=self._id_factory(),
                file_name=file_name,
                invoice_number=FAILURE_MARKER,
                supplier_name=FAILURE_NAME,
                total_amount=0,
                currency="",
                tax_amount=0,
                line_items=(),
            )
        return BusinessCardRecord(
            id=self._id_factory(),
            file_name=file_name,
            full_name=FAILURE_NAME,
        )

    @staticmethod
    def _merge(raw: ExtractionResult, defaults: dict[str, Any]) -> dict[str, Any]:
        return {name: raw.get(name, default) for name, default in defaults.items()}

    @staticmethod
    def _build_line_items(raw: Any, file_name: str) -> tuple[LineItem, ...]:
        if raw is None:
            return ()
        if not isinstance(raw, list):
            Log.warning(
                f"Dropping line_items for {file_name}: expected a list, "
                f"got {type(raw).__name__}"
            )
            return ()
        items: list[LineItem] = []
        for index, item in enumerate(raw):
            if not isinstance(item, dict):
                Log.warning(
                    f"Dropping line item {index} for {file_name}: not an object"
                )
                continue
            items.append(
                LineItem(
                    description=item.get("description"),
                    quantity=item.get("quantity"),
                    unit_price=item.get("unit_price"),
                    line_total=item.get("line_total"),
                )
            )
        return tuple(items)
