from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
import re
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Tuple, Union

from fireeye.errors import InvalidParameters, UnsupportedKind
from fireeye.validators.idcard import is_valid_id_card
from fireeye.validators.kind import ValidatorKind
from fireeye.validators.validator import Predicate, Validator

from . import predicates

KindToken = Union[ValidatorKind, str]
Builder = Callable[[Dict[str, Any]], Tuple[Predicate, Dict[str, Any]]]

_DATE_SAMPLE = datetime(2000, 1, 31, 12, 30, 45)


@dataclass(frozen=True)
class KindRule:
    """How to construct one validator kind."""

    builder: Builder
    parameters: FrozenSet[str]
    message: Union[str, Callable[[Dict[str, Any]], str]]


class ValidatorFactory:
    """Map a kind token and its parameters to a Validator."""

    def __init__(self, rules: Optional[Mapping[ValidatorKind, KindRule]] = None):
        self._rules = MappingProxyType(dict(rules if rules is not None else DEFAULT_RULES))

    def kinds(self) -> List[ValidatorKind]:
        return list(self._rules)

    def build(self, kind: KindToken, message: Optional[str] = None, **params: Any) -> Validator:
        resolved = resolve_kind(kind)
        rule = self._rules.get(resolved)
        if rule is None:
            raise UnsupportedKind(kind)
        unknown = set(params) - rule.parameters
        if unknown:
            raise InvalidParameters(resolved.value, f"unknown parameters {sorted(unknown)}")
        predicate, normalized = rule.builder(dict(params))
        if message is None:
            template = rule.message(normalized) if callable(rule.message) else rule.message
            message = _format_message(template, normalized)
        return Validator(
            kind=resolved,
            message=message,
            predicate=predicate,
            params=tuple(sorted(normalized.items())),
        )


def resolve_kind(kind: KindToken) -> ValidatorKind:
    if isinstance(kind, ValidatorKind):
        return kind
    if isinstance(kind, str):
        token = kind.strip().upper()
        try:
            return ValidatorKind(token)
        except ValueError:
            pass
    raise UnsupportedKind(kind)


def _format_message(template: str, params: Dict[str, Any]) -> str:
    try:
        return template.format(**params)
    except (KeyError, IndexError, ValueError, AttributeError):
        return template


def _no_params(check: Predicate) -> Builder:
    def builder(params: Dict[str, Any]) -> Tuple[Predicate, Dict[str, Any]]:
        return check, {}

    return builder


def _pattern_check(pattern: re.Pattern) -> Predicate:
    return lambda value: predicates.matches(pattern, value)


def _as_length(kind: str, name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameters(kind, f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidParameters(kind, f"{name} must not be negative")
    return value


def _as_bound(kind: str, name: str, value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidParameters(kind, f"{name} must be a number, got {value!r}")
    try:
        bound = Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidParameters(kind, f"{name} must be a number, got {value!r}") from exc
    if not bound.is_finite():
        raise InvalidParameters(kind, f"{name} must be finite")
    return bound


def _build_length(params: Dict[str, Any]) -> Tuple[Predicate, Dict[str, Any]]:
    min_length = _as_length("LENGTH", "min", params.get("min", 0))
    max_length = params.get("max")
    if max_length is not None:
        max_length = _as_length("LENGTH", "max", max_length)
        if min_length > max_length:
            raise InvalidParameters("LENGTH", f"min ({min_length}) > max ({max_length})")
    check = lambda value: predicates.has_length(value, min_length, max_length)
    return check, {"min": min_length, "max": max_length}


def _length_message(params: Dict[str, Any]) -> str:
    if params["max"] is None:
        return "Must be at least {min} characters"
    return "Must be between {min} and {max} characters"


def _build_pattern(params: Dict[str, Any]) -> Tuple[Predicate, Dict[str, Any]]:
    if "regex" not in params:
        raise InvalidParameters("PATTERN", "missing required parameter 'regex'")
    regex = params["regex"]
    if isinstance(regex, str):
        try:
            regex = re.compile(regex)
        except re.error as exc:
            raise InvalidParameters("PATTERN", f"bad regular expression: {exc}") from exc
    elif not isinstance(regex, re.Pattern):
        raise InvalidParameters("PATTERN", f"regex must be a string or compiled pattern, got {regex!r}")
    return _pattern_check(regex), {"regex": regex}


def _build_numeric(params: Dict[str, Any]) -> Tuple[Predicate, Dict[str, Any]]:
    minimum = _as_bound("NUMERIC", "min", params.get("min"))
    maximum = _as_bound("NUMERIC", "max", params.get("max"))
    if minimum is not None and maximum is not None and minimum > maximum:
        raise InvalidParameters("NUMERIC", f"min ({minimum}) > max ({maximum})")
    check = lambda value: predicates.in_range(value, minimum, maximum)
    return check, {"min": minimum, "max": maximum}


def _numeric_message(params: Dict[str, Any]) -> str:
    if params["min"] is not None and params["max"] is not None:
        return "Must be a number between {min} and {max}"
    if params["min"] is not None:
        return "Must be a number not less than {min}"
    if params["max"] is not None:
        return "Must be a number not greater than {max}"
    return "Must be a number"


def _build_date(params: Dict[str, Any]) -> Tuple[Predicate, Dict[str, Any]]:
    date_format = params.get("format", "%Y-%m-%d")
    if not isinstance(date_format, str) or not date_format:
        raise InvalidParameters("DATE", f"format must be a non-empty string, got {date_format!r}")
    try:
        datetime.strptime(_DATE_SAMPLE.strftime(date_format), date_format)
    except ValueError as exc:
        raise InvalidParameters("DATE", f"bad date format {date_format!r}: {exc}") from exc
    return (lambda value: predicates.is_date(value, date_format)), {"format": date_format}


def _build_custom(params: Dict[str, Any]) -> Tuple[Predicate, Dict[str, Any]]:
    predicate = params.get("predicate")
    if not callable(predicate):
        raise InvalidParameters("CUSTOM", "predicate must be callable")
    return predicate, {"predicate": predicate}


DEFAULT_RULES: Mapping[ValidatorKind, KindRule] = MappingProxyType({
    ValidatorKind.REQUIRED: KindRule(_no_params(predicates.is_not_blank), frozenset(), "This field is required"),
    ValidatorKind.LENGTH: KindRule(_build_length, frozenset({"min", "max"}), _length_message),
    ValidatorKind.PATTERN: KindRule(_build_pattern, frozenset({"regex"}), "Invalid format"),
    ValidatorKind.NUMERIC: KindRule(_build_numeric, frozenset({"min", "max"}), _numeric_message),
    ValidatorKind.DIGITS: KindRule(_no_params(_pattern_check(predicates.DIGITS_PATTERN)), frozenset(), "Must contain only digits"),
    ValidatorKind.DATE: KindRule(_build_date, frozenset({"format"}), "Must be a date in the format {format}"),
    ValidatorKind.EMAIL: KindRule(_no_params(_pattern_check(predicates.EMAIL_PATTERN)), frozenset(), "Invalid email address"),
    ValidatorKind.MOBILE: KindRule(_no_params(_pattern_check(predicates.MOBILE_PATTERN)), frozenset(), "Invalid mobile number"),
    ValidatorKind.PHONE: KindRule(_no_params(_pattern_check(predicates.PHONE_PATTERN)), frozenset(), "Invalid phone number"),
    ValidatorKind.URL: KindRule(_no_params(_pattern_check(predicates.URL_PATTERN)), frozenset(), "Invalid URL"),
    ValidatorKind.IPV4: KindRule(_no_params(_pattern_check(predicates.IPV4_PATTERN)), frozenset(), "Invalid IPv4 address"),
    ValidatorKind.CREDIT_CARD: KindRule(_no_params(predicates.passes_luhn), frozenset(), "Invalid credit card number"),
    ValidatorKind.ID_CARD: KindRule(_no_params(is_valid_id_card), frozenset(), "Invalid ID card number"),
    ValidatorKind.CUSTOM: KindRule(_build_custom, frozenset({"predicate"}), "Invalid value"),
})


_default_factory: ValidatorFactory | None = None


def build(kind: KindToken, message: Optional[str] = None, **params: Any) -> Validator:
    """Convenience access to the default factory without managing an instance."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ValidatorFactory()
    return _default_factory.build(kind, message, **params)
