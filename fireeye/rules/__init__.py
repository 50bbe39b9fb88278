from .binding import FieldBinding
from .engine import AggregateMode, ValidationConfig, ValidationSet, test_field
from .registry import KindRule, ValidatorFactory, build, resolve_kind

__all__ = [
    "AggregateMode",
    "FieldBinding",
    "KindRule",
    "ValidationConfig",
    "ValidationSet",
    "ValidatorFactory",
    "build",
    "resolve_kind",
    "test_field",
]
