from __future__ import annotations

from typing import Any, Hashable, Optional


class ConfigurationError(ValueError):
    """Base class for setup mistakes surfaced when rules are registered or built."""


class EmptyValidatorList(ConfigurationError):
    def __init__(self, field_id: Optional[Hashable] = None):
        super().__init__(f"Required 1 or more validators for field {field_id!r}")
        self.field_id = field_id


class MissingFieldId(ConfigurationError):
    """Raised when a field has no usable identifier."""

    def __init__(self, field: Any = None):
        super().__init__(f"Field {field!r} must have a non-empty identifier")
        self.field = field


class UnresolvedField(ConfigurationError):
    def __init__(self, field_id: Hashable):
        super().__init__(f"No field found for identifier {field_id!r}")
        self.field_id = field_id


class NotATextField(ConfigurationError):
    def __init__(self, field_id: Hashable, field: Any = None):
        super().__init__(
            f"Field {field_id!r} ({type(field).__name__}) is not a text field"
        )
        self.field_id = field_id
        self.field = field


class UnsupportedKind(ConfigurationError):
    def __init__(self, kind: Any):
        super().__init__(f"Unsupported validator kind: {kind!r}")
        self.kind = kind


class InvalidParameters(ConfigurationError):
    def __init__(self, kind: Any, reason: str):
        super().__init__(f"Invalid parameters for {kind}: {reason}")
        self.kind = kind
        self.reason = reason
