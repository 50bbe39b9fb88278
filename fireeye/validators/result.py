from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

NO_TEST_CONFIGURATIONS = "NO_TEST_CONFIGURATIONS"


@dataclass(frozen=True)
class TestResult:
    """Outcome of validating one field, or the aggregate of a full form test."""

    __test__ = False

    passed: bool
    message: Optional[str] = None
    error: Optional[str] = None
    value: Optional[str] = None

    @classmethod
    def no_configurations(cls) -> "TestResult":
        return cls(passed=False, message=NO_TEST_CONFIGURATIONS)
