from .base_form import BaseForm, TextField
from .interfaces import FieldAccessor, InputType, MessageDisplay, SimpleMessageDisplay

__all__ = [
    "BaseForm",
    "FieldAccessor",
    "InputType",
    "MessageDisplay",
    "SimpleMessageDisplay",
    "TextField",
]
