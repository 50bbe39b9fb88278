from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, List, Optional

from fireeye.data_containers.interfaces import FieldAccessor, InputType, MessageDisplay
from fireeye.validators.kind import ValidatorKind
from fireeye.validators.result import TestResult
from fireeye.validators.validator import Validator

logger = logging.getLogger(__name__)

_INPUT_TYPE_HINTS = {
    ValidatorKind.EMAIL: InputType.EMAIL,
    ValidatorKind.MOBILE: InputType.PHONE,
    ValidatorKind.PHONE: InputType.PHONE,
    ValidatorKind.NUMERIC: InputType.NUMBER,
    ValidatorKind.DIGITS: InputType.NUMBER,
    ValidatorKind.ID_CARD: InputType.NUMBER,
    ValidatorKind.CREDIT_CARD: InputType.NUMBER,
    ValidatorKind.DATE: InputType.DATETIME,
    ValidatorKind.URL: InputType.URI,
}


class FieldBinding:
    """Ordered validators for one field plus the field's last tested value and result."""

    def __init__(
        self,
        field_id: Hashable,
        field: Any,
        validators: Iterable[Validator] = (),
        display: Optional[MessageDisplay] = None,
    ):
        self.field_id = field_id
        self.field = field
        self.display = display
        self._validators: List[Validator] = list(validators)
        self.last_value: str = ""
        self.last_result: Optional[TestResult] = None

    @property
    def validators(self) -> List[Validator]:
        return list(self._validators)

    def add(self, validator: Validator) -> None:
        self._validators.append(validator)

    def evaluate(self, value: str) -> TestResult:
        """Run validators in registration order, stopping at the first failure."""
        result = TestResult(passed=True, value=value)
        for validator in self._validators:
            passed, error = validator.check(value)
            if not passed:
                result = TestResult(passed=False, message=validator.message, error=error, value=value)
                break
        self.last_value = value
        self.last_result = result
        if self.display is not None:
            if result.passed:
                self.display.dismiss(self.field)
            else:
                self.display.show(self.field, result.message)
        return result

    def perform_test(self, accessor: FieldAccessor) -> TestResult:
        return self.evaluate(accessor.get_text(self.field))

    def input_type(self) -> InputType:
        for validator in self._validators:
            hint = _INPUT_TYPE_HINTS.get(validator.kind)
            if hint is not None:
                return hint
        return InputType.TEXT

    def apply_input_type(self, accessor: FieldAccessor) -> InputType:
        hint = self.input_type()
        logger.debug("Input type for field %r: %s", self.field_id, hint.value)
        accessor.set_input_type(self.field, hint)
        return hint

    def __repr__(self) -> str:
        kinds = ", ".join(validator.kind.value for validator in self._validators)
        return f"FieldBinding({self.field_id!r}, [{kinds}])"
