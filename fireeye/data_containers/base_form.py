from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Optional

from .interfaces import InputType


@dataclass
class TextField:
    """
    Minimal field handle.
    - `text_capable=False` models widgets that cannot hold text (buttons, images).
    - `error` and `input_type` record what a display or hint pass pushed to it.
    """
    field_id: Optional[Hashable]
    text: str = ""
    text_capable: bool = True
    error: Optional[str] = None
    input_type: InputType = InputType.TEXT


@dataclass
class BaseForm:
    """
    In-memory form implementing the field accessor interface.
    Fields are keyed by their identifier; handles are TextField instances.
    """
    form_id: str = "form"
    fields: Dict[Hashable, TextField] = field(default_factory=dict)

    def add(self, text_field: TextField) -> TextField:
        self.fields[text_field.field_id] = text_field
        return text_field

    def set(self, field_id: Hashable, value: str) -> None:
        text_field = self.fields.get(field_id)
        if text_field is None:
            self.fields[field_id] = TextField(field_id=field_id, text=value)
        else:
            text_field.text = value

    # FieldAccessor

    def find_field(self, field_id: Hashable) -> Optional[TextField]:
        return self.fields.get(field_id)

    def field_id(self, text_field: TextField) -> Optional[Hashable]:
        return text_field.field_id

    def is_text_field(self, text_field: Any) -> bool:
        return isinstance(text_field, TextField) and text_field.text_capable

    def get_text(self, text_field: TextField) -> str:
        return text_field.text or ""

    def set_error(self, text_field: TextField, message: Optional[str]) -> None:
        text_field.error = message

    def set_input_type(self, text_field: TextField, input_type: InputType) -> None:
        text_field.input_type = input_type
