from .idcard import is_new_cn_id_card, is_old_cn_id_card, is_valid_id_card
from .kind import ValidatorKind
from .result import NO_TEST_CONFIGURATIONS, TestResult
from .validator import Predicate, Validator, custom

__all__ = [
    "NO_TEST_CONFIGURATIONS",
    "Predicate",
    "TestResult",
    "Validator",
    "ValidatorKind",
    "custom",
    "is_new_cn_id_card",
    "is_old_cn_id_card",
    "is_valid_id_card",
]
