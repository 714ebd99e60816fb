from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from models.checklist import ChecklistAnswers
from models.enums import SubmissionState
from models.errors import InvalidSubmissionError, SubmissionStateError
from models.sde import SdeResult
from utils.formatters import iso_timestamp, json_number

NOT_PROVIDED = "Not provided"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class BasicInfo:
    business_type: str
    sale_time: str
    location: str = NOT_PROVIDED
    website: str = NOT_PROVIDED
    presentation: str = NOT_PROVIDED
    operation_period: str = NOT_PROVIDED

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BasicInfo":
        """Build from the questionnaire's camelCase fields"""
        business_type = _text(data.get("businessType"))
        sale_time = _text(data.get("saleTime"))
        if not business_type:
            raise InvalidSubmissionError("basicInfo.businessType is required")
        if not sale_time:
            raise InvalidSubmissionError("basicInfo.saleTime is required")

        return cls(
            business_type=business_type,
            sale_time=sale_time,
            location=_text(data.get("location")) or NOT_PROVIDED,
            website=_text(data.get("website")) or NOT_PROVIDED,
            presentation=_text(data.get("presentation")) or NOT_PROVIDED,
            operation_period=_text(data.get("operationPeriod")) or NOT_PROVIDED,
        )


@dataclass(frozen=True)
class AssessmentRequest:
    basic_info: BasicInfo
    sde: SdeResult
    checklist: ChecklistAnswers


@dataclass(frozen=True)
class AssessmentResponse:
    success: bool
    sde_total: float
    assessment_text: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Optional[str] = None
    timestamp: datetime = field(default_factory=utcnow)

    @classmethod
    def succeeded(cls, text: str, sde_total: float) -> "AssessmentResponse":
        return cls(success=True, sde_total=sde_total, assessment_text=text)

    @classmethod
    def failed(cls, message: str, sde_total: float, details: Optional[str] = None) -> "AssessmentResponse":
        return cls(
            success=False,
            sde_total=sde_total,
            error_message=message,
            error_details=details,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape of the assess endpoint"""
        if self.success:
            return {
                "success": True,
                "assessment": self.assessment_text,
                "sdeTotal": json_number(self.sde_total),
                "timestamp": iso_timestamp(self.timestamp),
            }

        data: Dict[str, Any] = {
            "success": False,
            "error": self.error_message,
        }
        if self.error_details:
            data["details"] = self.error_details
        data["timestamp"] = iso_timestamp(self.timestamp)
        return data


@dataclass
class AssessmentSubmission:
    """One pass of a request through the LLM service.

    IDLE -> DISPATCHED -> SUCCEEDED | FAILED; terminal states are final.
    """
    request: AssessmentRequest
    state: SubmissionState = SubmissionState.IDLE
    dispatched_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    response: Optional[AssessmentResponse] = None

    def _move(self, expected: SubmissionState, target: SubmissionState) -> None:
        if self.state.is_terminal:
            raise SubmissionStateError(f"submission is already {self.state.value}")
        if self.state is not expected:
            raise SubmissionStateError(
                f"cannot move submission from {self.state.value} to {target.value}"
            )
        self.state = target

    def dispatch(self) -> None:
        self._move(SubmissionState.IDLE, SubmissionState.DISPATCHED)
        self.dispatched_at = utcnow()

    def succeed(self, text: str) -> AssessmentResponse:
        self._move(SubmissionState.DISPATCHED, SubmissionState.SUCCEEDED)
        self.finished_at = utcnow()
        self.response = AssessmentResponse.succeeded(text, self.request.sde.total)
        return self.response

    def fail(self, message: str, details: Optional[str] = None) -> AssessmentResponse:
        self._move(SubmissionState.DISPATCHED, SubmissionState.FAILED)
        self.finished_at = utcnow()
        self.response = AssessmentResponse.failed(message, self.request.sde.total, details)
        return self.response

    @property
    def duration(self) -> Optional[float]:
        if self.dispatched_at is None or self.finished_at is None:
            return None
        return (self.finished_at - self.dispatched_at).total_seconds()
