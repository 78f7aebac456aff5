"""Contract validation for tool argument bundles."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from devrecord.validation.contracts import ArgumentField, ArgumentKind, Contract
from devrecord.validation.error import ArgumentViolation


@dataclass
class ValidationResult:
    """Outcome of validating one argument bundle against a contract."""

    values: Dict[str, Any] = field(default_factory=dict)
    violations: List[ArgumentViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def violated_fields(self) -> List[str]:
        return [v.field for v in self.violations]


def _matches_kind(value: Any, kind: ArgumentKind) -> bool:
    # bool is a subclass of int and must not satisfy numeric kinds
    if kind is ArgumentKind.STRING:
        return isinstance(value, str)
    if kind is ArgumentKind.BOOLEAN:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if kind is ArgumentKind.INTEGER:
        return isinstance(value, int) or (isinstance(value, float) and value.is_integer())
    return isinstance(value, (int, float))


def _check_field(argument: ArgumentField, value: Any) -> Optional[ArgumentViolation]:
    if not _matches_kind(value, argument.kind):
        return ArgumentViolation(
            field=argument.name,
            reason="type",
            message=f"{argument.name} must be of type {argument.kind.value}, got {type(value).__name__}",
            received_value=value,
            expected=argument.kind.value,
        )
    if (
        argument.kind is ArgumentKind.STRING
        and argument.min_length is not None
        and len(value) < argument.min_length
    ):
        return ArgumentViolation(
            field=argument.name,
            reason="min_length",
            message=f"{argument.name} must be at least {argument.min_length} character(s) long",
            received_value=value,
            expected="non-empty string" if argument.min_length == 1 else f"string of length >= {argument.min_length}",
        )
    return None


def validate_arguments(contract: Contract, arguments: Any) -> ValidationResult:
    """Validate ``arguments`` against ``contract``.

    A missing bundle (None) is treated as an empty object. Every violated
    field is reported, not just the first one.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        return ValidationResult(
            violations=[
                ArgumentViolation(
                    field="arguments",
                    reason="not_an_object",
                    message=f"arguments must be an object, got {type(arguments).__name__}",
                    received_value=repr(arguments),
                    expected="object",
                )
            ]
        )

    result = ValidationResult()
    for argument in contract.fields:
        if argument.name not in arguments or arguments[argument.name] is None:
            if argument.required:
                result.violations.append(
                    ArgumentViolation(
                        field=argument.name,
                        reason="missing",
                        message=f"{argument.name} is required",
                        expected=argument.kind.value,
                    )
                )
            continue

        value = arguments[argument.name]
        violation = _check_field(argument, value)
        if violation is not None:
            result.violations.append(violation)
        else:
            result.values[argument.name] = value
    return result
