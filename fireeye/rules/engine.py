from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
import logging
from types import MappingProxyType
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Union

from fireeye.data_containers.interfaces import (
    FieldAccessor,
    InputType,
    MessageDisplay,
    SimpleMessageDisplay,
)
from fireeye.errors import EmptyValidatorList, MissingFieldId, NotATextField, UnresolvedField
from fireeye.validators.kind import ValidatorKind
from fireeye.validators.result import TestResult
from fireeye.validators.validator import Validator

from .binding import FieldBinding
from .registry import ValidatorFactory

logger = logging.getLogger(__name__)

Rule = Union[Validator, ValidatorKind, str]


class AggregateMode(str, Enum):
    """Which field's message the aggregate result of a full test carries."""

    LAST_EVALUATED = "LAST_EVALUATED"
    FIRST_FAILURE = "FIRST_FAILURE"


@dataclass(frozen=True)
class ValidationConfig:
    debug: bool = False
    aggregate: AggregateMode = AggregateMode.LAST_EVALUATED


class ValidationSet:
    """
    Validators bound to the fields of one form session.

    Registration appends to a field's ordered validator list. `test()` runs
    each binding in registration order and folds the per-field results into
    one TestResult. Not safe for concurrent registration and testing.
    """

    def __init__(
        self,
        accessor: FieldAccessor,
        display: Optional[MessageDisplay] = None,
        config: Optional[ValidationConfig] = None,
        factory: Optional[ValidatorFactory] = None,
    ):
        self._accessor = accessor
        self._display = display if display is not None else SimpleMessageDisplay(accessor)
        self.config = config or ValidationConfig()
        self._factory = factory or ValidatorFactory()
        self._bindings: Dict[Hashable, FieldBinding] = {}
        self._hint_bindings: Dict[Hashable, FieldBinding] = {}
        self._values: Dict[Hashable, Optional[str]] = {}
        self._results: Dict[Hashable, TestResult] = {}

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, field_id: Hashable) -> bool:
        return field_id in self._bindings

    def bindings(self) -> List[FieldBinding]:
        return list(self._bindings.values())

    @property
    def results(self) -> Mapping[Hashable, TestResult]:
        """Latest per-field results, as recorded by the most recent `test()`."""
        return MappingProxyType(self._results)

    def add(self, field_id: Hashable, *rules: Rule) -> None:
        """Bind validators (or kinds, built with default parameters) to the field with this identifier."""
        if not rules:
            raise EmptyValidatorList(field_id)
        if _is_empty_id(field_id):
            raise MissingFieldId(field_id)
        validators = self._resolve(rules)
        binding = self._bindings.get(field_id)
        if binding is None:
            field = self._accessor.find_field(field_id)
            if field is None:
                raise UnresolvedField(field_id)
            self._bind(field_id, field, validators)
            return
        self._extend(binding, validators)

    def add_field(self, field: Any, *rules: Rule) -> None:
        """Bind validators to a field handle, keyed by the handle's own identifier."""
        if not rules:
            raise EmptyValidatorList(None)
        field_id = self._accessor.field_id(field)
        if _is_empty_id(field_id):
            raise MissingFieldId(field)
        validators = self._resolve(rules)
        binding = self._bindings.get(field_id)
        if binding is None:
            self._bind(field_id, field, validators)
            return
        self._extend(binding, validators)

    def test(self, continuous: bool = True) -> TestResult:
        """
        Validate every bound field in registration order.

        With `continuous=False` the pass stops at the first failing field and
        later fields keep their previously recorded values.
        """
        if not self._bindings:
            return TestResult.no_configurations()
        passed = True
        last: Optional[TestResult] = None
        first_failure: Optional[TestResult] = None
        for field_id, binding in self._bindings.items():
            result = binding.perform_test(self._accessor)
            if self.config.debug:
                logger.info("[>] Field tested: %r %s", field_id, result)
            self._values[field_id] = result.value
            self._results[field_id] = result
            passed = passed and result.passed
            last = result
            if not result.passed and first_failure is None:
                first_failure = result
            if not passed and not continuous:
                break
        if self.config.aggregate is AggregateMode.FIRST_FAILURE and first_failure is not None:
            return first_failure
        return TestResult(
            passed=passed,
            message=None if passed else last.message,
            error=last.error,
            value=last.value,
        )

    def get_value(self, field_id: Hashable) -> Optional[str]:
        """Value recorded by the most recent `test()`, not the live field content."""
        return self._values.get(field_id)

    def get_extra_value(self, field_id: Hashable) -> str:
        """Live text of a field, bound or not."""
        field = self._accessor.find_field(field_id)
        if field is None:
            raise UnresolvedField(field_id)
        return self._accessor.get_text(field)

    def get_field(self, field_id: Hashable) -> Optional[Any]:
        binding = self._bindings.get(field_id)
        return binding.field if binding is not None else None

    def apply_input_type_hints(self, *exclude_ids: Hashable) -> Dict[Hashable, InputType]:
        """Drop the excluded fields from hinting for good, then hint the rest."""
        for field_id in exclude_ids:
            self._hint_bindings.pop(field_id, None)
        return {
            field_id: binding.apply_input_type(self._accessor)
            for field_id, binding in self._hint_bindings.items()
        }

    def set_debug(self, enabled: bool) -> None:
        self.config = replace(self.config, debug=enabled)

    def _resolve(self, rules: Iterable[Rule]) -> List[Validator]:
        return [rule if isinstance(rule, Validator) else self._factory.build(rule) for rule in rules]

    def _bind(self, field_id: Hashable, field: Any, validators: List[Validator]) -> FieldBinding:
        if not self._accessor.is_text_field(field):
            raise NotATextField(field_id, field)
        binding = FieldBinding(field_id, field, validators, self._display)
        self._bindings[field_id] = binding
        self._hint_bindings[field_id] = binding
        self._values[field_id] = ""
        logger.debug("Bound %r", binding)
        return binding

    @staticmethod
    def _extend(binding: FieldBinding, validators: List[Validator]) -> None:
        for validator in validators:
            binding.add(validator)
        logger.debug("Extended %r", binding)


def test_field(
    accessor: FieldAccessor,
    field: Any,
    kind: Rule,
    display: Optional[MessageDisplay] = None,
) -> TestResult:
    """Validate one field against one rule without a ValidationSet."""
    if field is None:
        raise UnresolvedField(None)
    field_id = accessor.field_id(field)
    if not accessor.is_text_field(field):
        raise NotATextField(field_id, field)
    validator = kind if isinstance(kind, Validator) else ValidatorFactory().build(kind)
    binding = FieldBinding(
        field_id,
        field,
        [validator],
        display if display is not None else SimpleMessageDisplay(accessor),
    )
    return binding.perform_test(accessor)


def _is_empty_id(field_id: Optional[Hashable]) -> bool:
    return field_id is None or field_id == 0 or field_id == ""
