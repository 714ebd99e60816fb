"""
Readiness checklist taxonomy and answers.

The indicator table below is the contract between the questionnaire form and
the analysis prompt: every key maps to exactly one label. Changing a key or a
label changes the prompt and requires bumping TAXONOMY_VERSION.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple

from models.enums import ChecklistGroup, Glyph

TAXONOMY_VERSION = "1"


@dataclass(frozen=True)
class Indicator:
    group: ChecklistGroup
    key: str
    label: str


def _indicators(group: ChecklistGroup, *pairs: Tuple[str, str]) -> Tuple[Indicator, ...]:
    return tuple(Indicator(group=group, key=key, label=label) for key, label in pairs)


CHECKLIST_TAXONOMY: Mapping[ChecklistGroup, Tuple[Indicator, ...]] = MappingProxyType({
    ChecklistGroup.ENTREPRENEUR: _indicators(
        ChecklistGroup.ENTREPRENEUR,
        ("unanimousDecision", "Owner commitment to sale decision"),
        ("replaceableRole", "Owner replaceability in operations"),
    ),
    ChecklistGroup.BUSINESS_OPERATIONS: _indicators(
        ChecklistGroup.BUSINESS_OPERATIONS,
        ("upToDateProducts", "Product/service modernization"),
        ("suitableCustomers", "Customer base diversification"),
        ("suitableSuppliers", "Supplier diversity"),
        ("replaceableSubcontractors", "Subcontractor flexibility"),
        ("customerAwareness", "Market awareness & visibility"),
        ("positiveBrand", "Brand value & reputation"),
    ),
    ChecklistGroup.COMPANY: _indicators(
        ChecklistGroup.COMPANY,
        ("increasedTurnover", "Revenue growth trajectory"),
        ("profitable", "Profitability track record"),
        ("positiveEquity", "Equity position strength"),
        ("goodLiquidity", "Short-term debt management"),
        ("currentReceivables", "Receivables currency"),
        ("managedDebtRepayments", "Long-term debt servicing"),
        ("goodStaffNumber", "Staff optimization"),
        ("competentPersonnel", "Workforce competency"),
        ("goodContracts", "Contract documentation quality"),
        ("upToDateEmploymentContracts", "Employment contract compliance"),
        ("productionControlSystem", "Production management systems"),
        ("crmSystem", "Customer relationship systems"),
        ("systematicDevelopment", "Business development approach"),
    ),
    ChecklistGroup.FUTURE_PROSPECTS: _indicators(
        ChecklistGroup.FUTURE_PROSPECTS,
        ("goodBusinessProspects", "Business growth potential"),
        ("goodIndustryProspects", "Industry outlook"),
        ("goodEnvironmentProspects", "Operating environment stability"),
    ),
})


def iter_indicators() -> Iterator[Indicator]:
    """All indicators in prompt order"""
    for group in ChecklistGroup:
        yield from CHECKLIST_TAXONOMY[group]


def indicator_count() -> int:
    return sum(len(indicators) for indicators in CHECKLIST_TAXONOMY.values())


@dataclass(frozen=True)
class ChecklistAnswers:
    """Validated answers, one boolean per indicator of the taxonomy"""
    answers: Mapping[ChecklistGroup, Mapping[str, bool]]

    def answer(self, group: ChecklistGroup, key: str) -> bool:
        return self.answers[group][key]

    def render_group(self, group: ChecklistGroup) -> str:
        """One '<glyph> <label>' line per indicator of the group"""
        lines = []
        for indicator in CHECKLIST_TAXONOMY[group]:
            glyph = Glyph.for_answer(self.answer(group, indicator.key))
            lines.append(f"{glyph.value} {indicator.label}")
        return "\n".join(lines)

    def count(self, answer: bool) -> int:
        return sum(
            1 for indicator in iter_indicators()
            if self.answer(indicator.group, indicator.key) is answer
        )
