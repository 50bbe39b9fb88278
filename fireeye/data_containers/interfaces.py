from __future__ import annotations

from enum import Enum
from typing import Any, Hashable, Optional, Protocol


class InputType(str, Enum):
    TEXT = "TEXT"
    NUMBER = "NUMBER"
    PHONE = "PHONE"
    EMAIL = "EMAIL"
    URI = "URI"
    DATETIME = "DATETIME"


class FieldAccessor(Protocol):
    """
    Boundary to whatever owns the input fields.
    - `find_field` resolves an identifier to a handle, or None when unknown.
    - `get_text` must never return None; absent content is "".
    """

    def find_field(self, field_id: Hashable) -> Optional[Any]: ...

    def field_id(self, field: Any) -> Optional[Hashable]: ...

    def is_text_field(self, field: Any) -> bool: ...

    def get_text(self, field: Any) -> str: ...

    def set_error(self, field: Any, message: Optional[str]) -> None: ...

    def set_input_type(self, field: Any, input_type: InputType) -> None: ...


class MessageDisplay(Protocol):
    def show(self, field: Any, message: str) -> None: ...

    def dismiss(self, field: Any) -> None: ...


class SimpleMessageDisplay:
    """Default display: hands the message to the accessor's own error decoration."""

    def __init__(self, accessor: FieldAccessor):
        self._accessor = accessor

    def show(self, field: Any, message: str) -> None:
        self._accessor.set_error(field, message)

    def dismiss(self, field: Any) -> None:
        self._accessor.set_error(field, None)
