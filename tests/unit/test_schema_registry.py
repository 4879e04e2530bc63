"""Tests for the schema registry and its JSON Schema translation."""

import pytest

from docextract.records.models import DocumentKind
from docextract.schemas.models import FieldType
from docextract.schemas.registry import (
    BUSINESS_CARD_SCHEMA,
    INVOICE_SCHEMA,
    SchemaRegistry,
    to_json_schema,
)


class TestSchemaFor:
    @pytest.mark.parametrize("kind", list(DocumentKind))
    def test_every_kind_has_a_schema(self, kind: DocumentKind) -> None:
        assert SchemaRegistry().schema_for(kind).fields

    def test_invoice_field_order(self) -> None:
        schema = SchemaRegistry().schema_for(DocumentKind.INVOICE)
        assert schema.field_names == (
            "invoice_number",
            "invoice_date",
            "supplier_name",
            "supplier_tax_id",
            "total_amount",
            "currency",
            "tax_amount",
            "line_items",
        )

    def test_invoice_required_fields(self) -> None:
        assert INVOICE_SCHEMA.required_field_names == {"supplier_name", "total_amount"}

    def test_invoice_numeric_fields(self) -> None:
        assert INVOICE_SCHEMA.get_field("total_amount").type is FieldType.NUMBER
        assert INVOICE_SCHEMA.get_field("tax_amount").type is FieldType.NUMBER

    def test_line_items_are_objects_with_required_subset(self) -> None:
        line_items = INVOICE_SCHEMA.get_field("line_items")
        assert line_items.type is FieldType.ARRAY
        assert [f.name for f in line_items.items] == [
            "description",
            "quantity",
            "unit_price",
            "line_total",
        ]
        assert {f.name for f in line_items.items if f.required} == {
            "description",
            "line_total",
        }

    def test_business_card_fields(self) -> None:
        schema = SchemaRegistry().schema_for(DocumentKind.BUSINESS_CARD)
        assert schema.field_names == (
            "full_name",
            "company",
            "job_title",
            "email",
            "phone",
            "website",
            "address",
        )
        assert schema.required_field_names == {"full_name"}

    def test_unknown_field_lookup_returns_none(self) -> None:
        assert BUSINESS_CARD_SCHEMA.get_field("fax") is None


class TestToJsonSchema:
    def test_top_level_object(self) -> None:
        schema = to_json_schema(BUSINESS_CARD_SCHEMA)
        assert schema["type"] == "object"
        assert schema["required"] == ["full_name"]
        assert list(schema["properties"]) == list(BUSINESS_CARD_SCHEMA.field_names)

    def test_descriptions_are_carried(self) -> None:
        schema = to_json_schema(INVOICE_SCHEMA)
        assert schema["properties"]["invoice_number"]["description"] == (
            "The invoice number or identifier"
        )

    def test_number_type(self) -> None:
        schema = to_json_schema(INVOICE_SCHEMA)
        assert schema["properties"]["total_amount"]["type"] == "number"

    def test_array_of_objects(self) -> None:
        line_items = to_json_schema(INVOICE_SCHEMA)["properties"]["line_items"]
        assert line_items["type"] == "array"
        assert line_items["items"]["type"] == "object"
        assert line_items["items"]["required"] == ["description", "line_total"]
        assert "description" not in line_items["items"]["properties"]["quantity"]
