"""
Payload builders shared by the tests
"""
from types import SimpleNamespace

from models.checklist import CHECKLIST_TAXONOMY
from models.enums import ChecklistGroup

ASSESSMENT_TEXT = "## ⚠️ AI-GENERATED ASSESSMENT DISCLAIMER\n\nSalesfit Score: 78/100"


def make_checklist(value: bool = True) -> dict:
    return {
        group.value: {indicator.key: value for indicator in CHECKLIST_TAXONOMY[group]}
        for group in ChecklistGroup
    }


def make_payload(**overrides) -> dict:
    payload = {
        "basicInfo": {
            "businessType": "Pizzeria",
            "location": "Jyväskylä",
            "website": "",
            "presentation": "",
            "operationPeriod": "12 years",
            "saleTime": "1-2 years",
        },
        "sdeCalculation": {
            "netProfit": 30000,
            "ownerSalary": 10000,
            "personalExpenses": 0,
            "unusualExpenses": 0,
            "interest": 0,
            "depreciation": 2000,
            "total": 42000,
        },
        "assessmentChecklist": make_checklist(True),
    }
    payload.update(overrides)
    return payload


def completion(content):
    """Shape of a chat completions response"""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])
