"""
Enumerations for the assessment service
"""
from enum import Enum


class ChecklistGroup(Enum):
    """Readiness checklist groups, in prompt order"""
    ENTREPRENEUR = "entrepreneur"
    BUSINESS_OPERATIONS = "businessOperations"
    COMPANY = "company"
    FUTURE_PROSPECTS = "futureProspects"


class Glyph(Enum):
    """Traffic light markers of the readiness assessment"""
    AFFIRMATIVE = "🟢"  # ready & positive
    ATTENTION = "🔴"  # needs attention & improvement

    @classmethod
    def for_answer(cls, answer: bool) -> "Glyph":
        return cls.AFFIRMATIVE if answer else cls.ATTENTION


class SubmissionState(str, Enum):
    """Lifecycle of a single submission"""
    IDLE = "idle"
    DISPATCHED = "dispatched"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (SubmissionState.SUCCEEDED, SubmissionState.FAILED)
