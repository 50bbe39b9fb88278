import logging

from .data_containers import BaseForm, FieldAccessor, InputType, MessageDisplay, SimpleMessageDisplay, TextField
from .errors import (
    ConfigurationError,
    EmptyValidatorList,
    InvalidParameters,
    MissingFieldId,
    NotATextField,
    UnresolvedField,
    UnsupportedKind,
)
from .rules import (
    AggregateMode,
    FieldBinding,
    ValidationConfig,
    ValidationSet,
    ValidatorFactory,
    build,
    test_field,
)
from .validators import NO_TEST_CONFIGURATIONS, TestResult, Validator, ValidatorKind, custom, is_valid_id_card

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AggregateMode",
    "BaseForm",
    "ConfigurationError",
    "EmptyValidatorList",
    "FieldAccessor",
    "FieldBinding",
    "InputType",
    "InvalidParameters",
    "MessageDisplay",
    "MissingFieldId",
    "NO_TEST_CONFIGURATIONS",
    "NotATextField",
    "SimpleMessageDisplay",
    "TestResult",
    "TextField",
    "UnresolvedField",
    "UnsupportedKind",
    "ValidationConfig",
    "ValidationSet",
    "Validator",
    "ValidatorFactory",
    "ValidatorKind",
    "build",
    "custom",
    "is_valid_id_card",
    "test_field",
]
