"""
Composition of the analysis request sent to the LLM.

The request is rendered from a YAML template whose sections must match
SECTION_IDS exactly, in order. Each section is a str.format template over
the context built in `build_context`; sections are joined with a blank line.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from models.assessment import AssessmentRequest, BasicInfo
from models.checklist import TAXONOMY_VERSION, ChecklistAnswers, indicator_count
from models.enums import ChecklistGroup
from models.errors import TemplateError
from models.sde import SdeResult
from utils.formatters import format_currency

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "assessment_request"
SECTION_SEPARATOR = "\n\n"
MAX_RESPONSE_WORDS = 2500

SECTION_IDS: Tuple[str, ...] = (
    "role",
    "context",
    "basic_information",
    "financial_health",
    "traffic_light_key",
    "entrepreneur_readiness",
    "business_operations",
    "company_fundamentals",
    "future_prospects",
    "language_notice",
    "analysis_heading",
    "disclaimer",
    "salesfit_score",
    "valuation_range",
    "critical_strengths",
    "attention_areas",
    "improvement_roadmap",
    "buyer_strategy",
    "benchmarking",
    "final_recommendation",
    "next_steps",
    "response_guidelines",
    "closing_reminder",
)

GROUP_PLACEHOLDERS = {
    ChecklistGroup.ENTREPRENEUR: "entrepreneur_indicators",
    ChecklistGroup.BUSINESS_OPERATIONS: "business_operations_indicators",
    ChecklistGroup.COMPANY: "company_indicators",
    ChecklistGroup.FUTURE_PROSPECTS: "future_prospects_indicators",
}


@dataclass(frozen=True)
class TemplateSection:
    id: str
    text: str


@dataclass(frozen=True)
class PromptTemplate:
    version: str
    sections: Tuple[TemplateSection, ...]

    @classmethod
    def from_dict(cls, data: Any) -> "PromptTemplate":
        if not isinstance(data, dict):
            raise TemplateError("Prompt template must be a mapping")

        raw_sections = data.get("sections")
        if not isinstance(raw_sections, list):
            raise TemplateError("Prompt template has no 'sections' list")

        sections = []
        for raw in raw_sections:
            if not isinstance(raw, dict) or "id" not in raw or "text" not in raw:
                raise TemplateError(f"Malformed template section: {raw!r}")
            sections.append(TemplateSection(id=str(raw["id"]), text=str(raw["text"])))

        ids = tuple(section.id for section in sections)
        if ids != SECTION_IDS:
            raise TemplateError(
                f"Template sections do not match the fixed layout: expected {len(SECTION_IDS)} "
                f"sections {SECTION_IDS}, got {len(ids)} sections {ids}"
            )

        return cls(version=str(data.get("version", "")), sections=tuple(sections))

    @classmethod
    def load(cls, path: Path) -> "PromptTemplate":
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise TemplateError(f"Prompt template not found: {path}") from e
        except yaml.YAMLError as e:
            raise TemplateError(f"Prompt template is not valid YAML: {path}: {e}") from e

        template = cls.from_dict(data)
        logger.info(
            f"📄 Prompt template loaded: {path.name} v{template.version}, "
            f"checklist taxonomy v{TAXONOMY_VERSION} ({indicator_count()} indicators)"
        )
        return template


def build_context(
    basic_info: BasicInfo,
    sde: SdeResult,
    checklist: ChecklistAnswers,
    language: str = "English",
    max_words: int = MAX_RESPONSE_WORDS,
) -> Dict[str, str]:
    """Placeholder values of the template, all already formatted as text"""
    context = {
        "business_type": basic_info.business_type,
        "location": basic_info.location,
        "website": basic_info.website,
        "presentation": basic_info.presentation,
        "operation_period": basic_info.operation_period,
        "sale_time": basic_info.sale_time,
        "net_profit": format_currency(sde.net_profit),
        "owner_salary": format_currency(sde.owner_salary),
        "personal_expenses": format_currency(sde.personal_expenses),
        "unusual_expenses": format_currency(sde.unusual_expenses),
        "interest": format_currency(sde.interest),
        "depreciation": format_currency(sde.depreciation),
        "sde_total": format_currency(sde.total),
        "language": language,
        "language_upper": language.upper(),
        "max_words": str(max_words),
    }
    for group, placeholder in GROUP_PLACEHOLDERS.items():
        context[placeholder] = checklist.render_group(group)
    return context


class PromptComposer:
    """Renders an assessment request into the analysis prompt"""

    def __init__(self, template: PromptTemplate, language: str = "English"):
        self.template = template
        self.language = language

    @classmethod
    def from_directory(cls, prompts_dir: Path, language: str = "English") -> "PromptComposer":
        return cls(PromptTemplate.load(Path(prompts_dir) / f"{TEMPLATE_NAME}.yaml"), language)

    @property
    def template_version(self) -> str:
        return self.template.version

    def render_sections(
        self,
        basic_info: BasicInfo,
        sde: SdeResult,
        checklist: ChecklistAnswers,
    ) -> List[str]:
        context = build_context(basic_info, sde, checklist, language=self.language)
        rendered = []
        for section in self.template.sections:
            try:
                rendered.append(section.text.format_map(context))
            except (KeyError, IndexError, ValueError) as e:
                raise TemplateError(f"Cannot render template section '{section.id}': {e}") from e
        return rendered

    def compose(
        self,
        basic_info: BasicInfo,
        sde: SdeResult,
        checklist: ChecklistAnswers,
    ) -> str:
        return SECTION_SEPARATOR.join(self.render_sections(basic_info, sde, checklist))

    def compose_request(self, request: AssessmentRequest) -> str:
        return self.compose(request.basic_info, request.sde, request.checklist)
