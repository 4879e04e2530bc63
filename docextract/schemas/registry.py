"""Declared output shapes for every document kind.

Schemas steer the model's response; they are not enforced on the way back.
Downstream code must tolerate missing required fields and extra keys.
"""

from typing import Any, ClassVar

from docextract.records.models import DocumentKind
from docextract.schemas.models import FieldSchema, FieldType, SchemaDefinition

INVOICE_SCHEMA = SchemaDefinition(
    fields=(
        FieldSchema(
            "invoice_number", FieldType.STRING, "The invoice number or identifier"
        ),
        FieldSchema(
            "invoice_date",
            FieldType.STRING,
            "The date of the invoice (YYYY-MM-DD preferred)",
        ),
        FieldSchema(
            "supplier_name",
            FieldType.STRING,
            "Name of the supplier or vendor",
            required=True,
        ),
        FieldSchema(
            "supplier_tax_id",
            FieldType.STRING,
            "Tax ID, VAT ID, or GST number of the supplier",
        ),
        FieldSchema(
            "total_amount",
            FieldType.NUMBER,
            "The total final amount of the invoice",
            required=True,
        ),
        FieldSchema("currency", FieldType.STRING, "Currency code (e.g., USD, EUR)"),
        FieldSchema("tax_amount", FieldType.NUMBER, "Total tax amount (VAT/GST)"),
        FieldSchema(
            "line_items",
            FieldType.ARRAY,
            "List of items purchased",
            items=(
                FieldSchema("description", FieldType.STRING, required=True),
                FieldSchema("quantity", FieldType.NUMBER),
                FieldSchema("unit_price", FieldType.NUMBER),
                FieldSchema("line_total", FieldType.NUMBER, required=True),
            ),
        ),
    )
)

BUSINESS_CARD_SCHEMA = SchemaDefinition(
    fields=(
        FieldSchema(
            "full_name", FieldType.STRING, "Full name of the person", required=True
        ),
        FieldSchema("company", FieldType.STRING, "Company name"),
        FieldSchema("job_title", FieldType.STRING, "Job title or role"),
        FieldSchema("email", FieldType.STRING, "Email address"),
        FieldSchema("phone", FieldType.STRING, "Phone number"),
        FieldSchema("website", FieldType.STRING, "Website URL"),
        FieldSchema("address", FieldType.STRING, "Physical address"),
    )
)


class SchemaRegistry:
    """Maps each document kind to its schema definition."""

    SCHEMAS: ClassVar[dict[DocumentKind, SchemaDefinition]] = {
        DocumentKind.INVOICE: INVOICE_SCHEMA,
        DocumentKind.BUSINESS_CARD: BUSINESS_CARD_SCHEMA,
    }

    def schema_for(self, kind: DocumentKind) -> SchemaDefinition:
        """Return the schema registered for *kind*.

        Raises:
            KeyError: if *kind* has no registered schema.
        """
        return self.SCHEMAS[kind]


def to_json_schema(definition: SchemaDefinition) -> dict[str, Any]:
    """Translate a schema definition into a JSON Schema object.

    The output uses the subset understood by both Gemini ``response_schema``
    and OpenAI ``json_schema`` response formats.
    """
    return _object_schema(definition.fields)


def _object_schema(fields: tuple[FieldSchema, ...]) -> dict[str, Any]:
    schema: dict[str, Any] = {
        "type": "object",
        "properties": {f.name: _field_schema(f) for f in fields},
    }
    required = [f.name for f in fields if f.required]
    if required:
        schema["required"] = required
    return schema


def _field_schema(field: FieldSchema) -> dict[str, Any]:
    if field.type is FieldType.ARRAY:
        schema: dict[str, Any] = {
            "type": "array",
            "items": _object_schema(field.items),
        }
    else:
        schema = {"type": field.type.value}
    if field.description:
        schema["description"] = field.description
    return schema
