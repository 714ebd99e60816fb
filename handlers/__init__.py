"""HTTP handlers"""
from .questionnaire import assess_questionnaire
from .prompt import probe_prompt

__all__ = [
    "assess_questionnaire",
    "probe_prompt",
]
