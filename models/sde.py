"""
Seller's Discretionary Earnings (SDE) data
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

# wire name -> attribute name, in summation order
SDE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("netProfit", "net_profit"),
    ("ownerSalary", "owner_salary"),
    ("personalExpenses", "personal_expenses"),
    ("unusualExpenses", "unusual_expenses"),
    ("interest", "interest"),
    ("depreciation", "depreciation"),
)


@dataclass(frozen=True)
class Amount:
    """Monetary input that was either provided or left absent (counts as 0)"""
    value: float = 0.0
    provided: bool = False

    @classmethod
    def of(cls, value: float) -> "Amount":
        return cls(value=float(value), provided=True)

    @classmethod
    def absent(cls) -> "Amount":
        return cls()


@dataclass(frozen=True)
class SdeInputs:
    net_profit: Amount = Amount()
    owner_salary: Amount = Amount()
    personal_expenses: Amount = Amount()
    unusual_expenses: Amount = Amount()
    interest: Amount = Amount()
    depreciation: Amount = Amount()


@dataclass(frozen=True)
class SdeResult:
    """The six line items; the total is always derived from them"""
    net_profit: float
    owner_salary: float
    personal_expenses: float
    unusual_expenses: float
    interest: float
    depreciation: float

    @property
    def total(self) -> float:
        return (
            self.net_profit
            + self.owner_salary
            + self.personal_expenses
            + self.unusual_expenses
            + self.interest
            + self.depreciation
        )

    def to_dict(self) -> Dict[str, float]:
        data = {wire: getattr(self, attr) for wire, attr in SDE_FIELDS}
        data["total"] = self.total
        return data
