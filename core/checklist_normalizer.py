"""
Validation of the readiness checklist against the fixed indicator taxonomy
"""
from types import MappingProxyType
from typing import Any, Mapping

from models.checklist import CHECKLIST_TAXONOMY, ChecklistAnswers
from models.enums import ChecklistGroup
from models.errors import InvalidSubmissionError, MissingIndicatorError


def normalize_checklist(raw: Any) -> ChecklistAnswers:
    """
    Check that every group and every one of its indicators is present and
    boolean. Unknown groups or keys are rejected, the key set is closed.

    Raises:
        MissingIndicatorError: a group or an indicator is absent
        InvalidSubmissionError: wrong types or unknown keys
    """
    if not isinstance(raw, Mapping):
        raise InvalidSubmissionError("assessmentChecklist must be an object")

    known_groups = {group.value for group in ChecklistGroup}
    unknown_groups = sorted(set(raw) - known_groups)
    if unknown_groups:
        raise InvalidSubmissionError(f"Unknown checklist groups: {', '.join(unknown_groups)}")

    answers = {}
    for group in ChecklistGroup:
        if group.value not in raw:
            raise MissingIndicatorError(group.value)
        values = raw[group.value]
        if not isinstance(values, Mapping):
            raise InvalidSubmissionError(f"Checklist group '{group.value}' must be an object")

        expected = [indicator.key for indicator in CHECKLIST_TAXONOMY[group]]
        unknown_keys = sorted(set(values) - set(expected))
        if unknown_keys:
            raise InvalidSubmissionError(
                f"Unknown indicators in '{group.value}': {', '.join(unknown_keys)}"
            )

        group_answers = {}
        for key in expected:
            if key not in values:
                raise MissingIndicatorError(group.value, key)
            value = values[key]
            if not isinstance(value, bool):
                raise InvalidSubmissionError(
                    f"Checklist indicator '{group.value}.{key}' must be true or false"
                )
            group_answers[key] = value
        answers[group] = MappingProxyType(group_answers)

    return ChecklistAnswers(answers=MappingProxyType(answers))
