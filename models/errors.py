"""
Exceptions of the assessment pipeline
"""
from typing import Optional


class AssessmentError(Exception):
    """Base class for pipeline errors"""


class ConfigurationError(AssessmentError):
    """Required configuration (API credential) is missing"""


class InvalidSubmissionError(AssessmentError):
    """Submitted questionnaire cannot be turned into a request"""


class MissingIndicatorError(InvalidSubmissionError):
    """A fixed checklist indicator is absent from the submission"""

    def __init__(self, group: str, key: Optional[str] = None):
        self.group = group
        self.key = key
        if key is None:
            message = f"Checklist group '{group}' is missing"
        else:
            message = f"Checklist indicator '{group}.{key}' is missing"
        super().__init__(message)


class ServiceError(AssessmentError):
    """The LLM service call failed"""

    def __init__(self, message: str, status: Optional[int] = None):
        self.message = message
        self.status = status
        super().__init__(message)

    def __str__(self) -> str:
        if self.status is not None:
            return f"[{self.status}] {self.message}"
        return self.message


class TemplateError(AssessmentError):
    """Prompt template file is missing or malformed"""


class SubmissionStateError(RuntimeError):
    """Illegal state transition of an assessment submission"""
