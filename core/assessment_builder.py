"""
Turns the questionnaire JSON body into an AssessmentRequest
"""
import logging
import math
from typing import Any, Mapping

from core.checklist_normalizer import normalize_checklist
from core.sde_calculator import calculate_sde, parse_amount, parse_sde_inputs
from models.assessment import AssessmentRequest, BasicInfo
from models.errors import InvalidSubmissionError

logger = logging.getLogger(__name__)


def _section(payload: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = payload.get(name)
    if value is None:
        raise InvalidSubmissionError(f"'{name}' is required")
    if not isinstance(value, Mapping):
        raise InvalidSubmissionError(f"'{name}' must be an object")
    return value


def build_request(payload: Any) -> AssessmentRequest:
    """
    Build the request from `basicInfo`, `sdeCalculation` and
    `assessmentChecklist`. The SDE total is always recomputed; a total sent
    by the client is only compared and logged.
    """
    if not isinstance(payload, Mapping):
        raise InvalidSubmissionError("Request body must be a JSON object")

    basic_info = BasicInfo.from_dict(_section(payload, "basicInfo"))

    sde_data = payload.get("sdeCalculation") or {}
    if not isinstance(sde_data, Mapping):
        raise InvalidSubmissionError("'sdeCalculation' must be an object")
    sde = calculate_sde(parse_sde_inputs(sde_data))
    if not math.isfinite(sde.total):
        raise InvalidSubmissionError("SDE total is too large to represent")

    client_total = parse_amount(sde_data.get("total"))
    if client_total.provided and client_total.value != sde.total:
        logger.warning(
            f"⚠️ Client SDE total {client_total.value} differs from computed {sde.total}, using computed"
        )

    checklist = normalize_checklist(_section(payload, "assessmentChecklist"))

    return AssessmentRequest(basic_info=basic_info, sde=sde, checklist=checklist)
