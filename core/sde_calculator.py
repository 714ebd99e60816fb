"""
Seller's Discretionary Earnings calculation.

Inputs are lenient on purpose: anything missing, empty or not a number is an
absent amount and counts as zero. Nothing here raises on bad input.
"""
import math
from typing import Any, Mapping, Optional

from models.sde import SDE_FIELDS, Amount, SdeInputs, SdeResult


def parse_amount(raw: Any) -> Amount:
    """Turn one form value into a provided or absent amount"""
    if raw is None or isinstance(raw, bool):
        return Amount.absent()

    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return Amount.absent()
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return Amount.absent()
        try:
            value = float(text)
        except ValueError:
            return Amount.absent()
    else:
        return Amount.absent()

    if not math.isfinite(value):
        return Amount.absent()
    return Amount.of(value)


def parse_sde_inputs(data: Optional[Mapping[str, Any]]) -> SdeInputs:
    """Read the six line items from their camelCase form fields"""
    data = data or {}
    return SdeInputs(**{attr: parse_amount(data.get(wire)) for wire, attr in SDE_FIELDS})


def calculate_sde(inputs: SdeInputs) -> SdeResult:
    return SdeResult(
        net_profit=inputs.net_profit.value,
        owner_salary=inputs.owner_salary.value,
        personal_expenses=inputs.personal_expenses.value,
        unusual_expenses=inputs.unusual_expenses.value,
        interest=inputs.interest.value,
        depreciation=inputs.depreciation.value,
    )
