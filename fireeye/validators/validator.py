from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Any, Callable, Optional, Tuple

from .kind import ValidatorKind

logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]


@dataclass(frozen=True)
class Validator:
    """
    A single rule over a field's text.
    - `kind` tags the variant; `params` keeps the construction parameters as sorted pairs.
    - `predicate` does the actual check and may raise; `check` turns that into a failure.
    """
    kind: ValidatorKind
    message: str
    predicate: Predicate = field(compare=False, repr=False)
    params: Tuple[Tuple[str, Any], ...] = ()

    def param(self, name: str, default: Any = None) -> Any:
        for key, value in self.params:
            if key == name:
                return value
        return default

    def check(self, value: str) -> Tuple[bool, Optional[str]]:
        """Return (passed, diagnostic). The diagnostic is set only when the predicate raised."""
        try:
            return bool(self.predicate(value)), None
        except Exception as exc:  # pylint: disable=broad-except
            logger.debug("Validator %s raised on %r: %s", self.kind.value, value, exc)
            return False, f"{type(exc).__name__}: {exc}"

    def is_valid(self, value: str) -> bool:
        passed, _ = self.check(value)
        return passed


def custom(predicate: Predicate, message: str) -> Validator:
    """Wrap a caller-supplied predicate. It should be deterministic and side-effect free."""
    if not callable(predicate):
        raise TypeError("predicate must be callable")
    return Validator(
        kind=ValidatorKind.CUSTOM,
        message=message,
        predicate=predicate,
        params=(("predicate", predicate),),
    )
