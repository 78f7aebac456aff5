"""Unit tests for argument contracts and the contract validator."""
from __future__ import annotations

import pytest

from devrecord.validation import (
    ArgumentField,
    ArgumentKind,
    Contract,
    validate_arguments,
)

CONTRACT = Contract(
    fields=(
        ArgumentField("templateName", ArgumentKind.STRING, "Template name", required=True, min_length=1),
        ArgumentField("limit", ArgumentKind.INTEGER),
        ArgumentField("ratio", ArgumentKind.NUMBER),
        ArgumentField("verbose", ArgumentKind.BOOLEAN),
    )
)


def test_valid_bundle_passes_and_drops_unknown_fields() -> None:
    result = validate_arguments(
        CONTRACT,
        {"templateName": "meeting-record", "limit": 3, "ratio": 0.5, "verbose": True, "extra": "x"},
    )

    assert result.ok
    assert result.values == {"templateName": "meeting-record", "limit": 3, "ratio": 0.5, "verbose": True}


def test_missing_required_field_is_reported() -> None:
    result = validate_arguments(CONTRACT, {})

    assert not result.ok
    assert result.violated_fields == ["templateName"]
    assert result.violations[0].reason == "missing"


def test_none_bundle_is_treated_as_empty() -> None:
    result = validate_arguments(CONTRACT, None)

    assert result.violated_fields == ["templateName"]


def test_null_required_value_counts_as_missing() -> None:
    result = validate_arguments(CONTRACT, {"templateName": None})

    assert result.violations[0].reason == "missing"


def test_empty_string_violates_min_length() -> None:
    result = validate_arguments(CONTRACT, {"templateName": ""})

    assert result.violated_fields == ["templateName"]
    assert result.violations[0].reason == "min_length"
    assert result.violations[0].received_value == ""


def test_every_violation_is_reported() -> None:
    result = validate_arguments(CONTRACT, {"limit": "3", "ratio": "half", "verbose": "yes"})

    assert result.violated_fields == ["templateName", "limit", "ratio", "verbose"]


@pytest.mark.parametrize(
    "field_name, value",
    [("limit", True), ("ratio", False), ("limit", 1.5), ("templateName", 42)],
)
def test_kind_mismatches(field_name: str, value: object) -> None:
    bundle = {"templateName": "meeting-record", field_name: value}

    result = validate_arguments(CONTRACT, bundle)

    assert result.violated_fields == [field_name]
    assert result.violations[0].reason == "type"


def test_non_object_bundle_is_rejected() -> None:
    result = validate_arguments(CONTRACT, ["meeting-record"])

    assert not result.ok
    assert result.violations[0].field == "arguments"
    assert result.violations[0].reason == "not_an_object"


def test_contract_json_schema_projection() -> None:
    assert CONTRACT.to_json_schema() == {
        "type": "object",
        "properties": {
            "templateName": {"type": "string", "description": "Template name", "minLength": 1},
            "limit": {"type": "integer"},
            "ratio": {"type": "number"},
            "verbose": {"type": "boolean"},
        },
        "required": ["templateName"],
    }


def test_contract_without_required_fields_omits_required_key() -> None:
    contract = Contract(fields=(ArgumentField("dummy", ArgumentKind.STRING),))

    assert "required" not in contract.to_json_schema()
    assert validate_arguments(contract, {}).ok
