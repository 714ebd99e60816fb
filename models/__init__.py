"""
Data models of the assessment service
"""
from .assessment import (
    NOT_PROVIDED,
    AssessmentRequest,
    AssessmentResponse,
    AssessmentSubmission,
    BasicInfo,
)
from .checklist import CHECKLIST_TAXONOMY, TAXONOMY_VERSION, ChecklistAnswers, Indicator
from .enums import ChecklistGroup, Glyph, SubmissionState
from .errors import (
    AssessmentError,
    ConfigurationError,
    InvalidSubmissionError,
    MissingIndicatorError,
    ServiceError,
    SubmissionStateError,
    TemplateError,
)
from .sde import Amount, SdeInputs, SdeResult

__all__ = [
    "NOT_PROVIDED",
    "AssessmentRequest",
    "AssessmentResponse",
    "AssessmentSubmission",
    "BasicInfo",
    "CHECKLIST_TAXONOMY",
    "TAXONOMY_VERSION",
    "ChecklistAnswers",
    "Indicator",
    "ChecklistGroup",
    "Glyph",
    "SubmissionState",
    "AssessmentError",
    "ConfigurationError",
    "InvalidSubmissionError",
    "MissingIndicatorError",
    "ServiceError",
    "SubmissionStateError",
    "TemplateError",
    "Amount",
    "SdeInputs",
    "SdeResult",
]
