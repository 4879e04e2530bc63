from dataclasses import dataclass, field
from enum import Enum


class DocumentKind(str, Enum):
    """Category of input document; selects schema, instruction and defaults."""

    INVOICE = "invoice"
    BUSINESS_CARD = "business_card"


@dataclass(frozen=True)
class LineItem:
    """Single purchased item on an invoice."""

    description: str | None = None
    quantity: float | None = None
    unit_price: float | None = None
    line_total: float | None = None


@dataclass(frozen=True)
class InvoiceRecord:
    """Normalized invoice, one per processed file."""

    id: str
    file_name: str
    invoice_number: str | None = None
    invoice_date: str | None = None
    supplier_name: str | None = None
    supplier_tax_id: str | None = None
    total_amount: float | None = None
    currency: str | None = None
    tax_amount: float | None = None
    line_items: tuple[LineItem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class BusinessCardRecord:
    """Normalized business card, one per processed file."""

    id: str
    file_name: str
    full_name: str | None = None
    company: str | None = None
    job_title: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    address: str | None = None


NormalizedRecord = InvoiceRecord | BusinessCardRecord


@dataclass(frozen=True)
class ExtractionSuccess:
    """A file whose pipeline completed."""

    record: NormalizedRecord

    @property
    def failed(self) -> bool:
        return False


@dataclass(frozen=True)
class ExtractionFailure:
    """A file whose pipeline failed at some stage.

    ``record`` is the sentinel-valued placeholder shown to consumers;
    ``reason`` keeps the underlying error for diagnostics.
    """

    record: NormalizedRecord
    reason: str

    @property
    def failed(self) -> bool:
        return True


RecordOutcome = ExtractionSuccess | ExtractionFailure
