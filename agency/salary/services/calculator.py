"""Salary arithmetic.

gross = base salary + bonus + allowance
net   = gross - sum(deductions)

All amounts are Decimals rounded to centavos. Net pay may go negative when
deductions (e.g. a cash advance) exceed gross pay; it is reported as-is.
"""
from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List

from core.utils.validators import require_int, to_money, clean_str, MONEY_LIMIT

PAYMENT_STATUSES = ('paid', 'unpaid')

ZERO = Decimal('0.00')


@dataclass(frozen=True)
class DeductionLine:
    deduction_id: int
    amount: Decimal


@dataclass
class SalaryInput:
    """A validated /api/salary/calculate payload."""
    personnel_id: int
    base_salary: Decimal
    base_bonus: Decimal = ZERO
    base_allowance: Decimal = ZERO
    payment_status: str = 'unpaid'
    deductions: List[DeductionLine] = field(default_factory=list)


@dataclass(frozen=True)
class SalaryBreakdown:
    gross_salary: Decimal
    total_deductions: Decimal
    net_salary: Decimal


def _merge_deductions(lines: List[DeductionLine]) -> List[DeductionLine]:
    """Collapse repeated deduction types into one line, keeping first-seen order."""
    merged: Dict[int, Decimal] = OrderedDict()
    for line in lines:
        merged[line.deduction_id] = merged.get(line.deduction_id, ZERO) + line.amount
    return [DeductionLine(deduction_id, amount) for deduction_id, amount in merged.items()]


def parse_salary_input(data: Dict[str, Any]) -> SalaryInput:
    """Validate a salary calculation payload.

    Raises:
        ValueError: on missing personnel/base salary, non-numeric or negative
                    amounts, an unknown payment status or a malformed
                    deductions list
    """
    payment_status = (clean_str(data.get('payment_status')) or 'unpaid').lower()
    if payment_status not in PAYMENT_STATUSES:
        raise ValueError(f"Payment status must be one of: {', '.join(PAYMENT_STATUSES)}")

    raw_deductions = data.get('deductions') or []
    if not isinstance(raw_deductions, list):
        raise ValueError('Deductions must be a list')

    lines = []
    for index, item in enumerate(raw_deductions, start=1):
        if not isinstance(item, dict):
            raise ValueError(f'Deduction #{index} must be an object')
        lines.append(DeductionLine(
            deduction_id=require_int(item.get('deduction_id'), f'Deduction #{index} type'),
            amount=to_money(item.get('amount'), f'Deduction #{index} amount', default=ZERO),
        ))

    return SalaryInput(
        personnel_id=require_int(data.get('personnel_id'), 'Personnel'),
        base_salary=to_money(data.get('base_salary'), 'Base salary'),
        base_bonus=to_money(data.get('base_bonus'), 'Bonus', default=ZERO),
        base_allowance=to_money(data.get('base_allowance'), 'Allowance', default=ZERO),
        payment_status=payment_status,
        deductions=_merge_deductions(lines),
    )


def calculate_salary(salary: SalaryInput) -> SalaryBreakdown:
    """Raises ValueError when a total would not fit the salary columns."""
    gross = salary.base_salary + salary.base_bonus + salary.base_allowance
    total_deductions = sum((line.amount for line in salary.deductions), ZERO)
    if gross >= MONEY_LIMIT:
        raise ValueError(f'Gross salary must be less than {MONEY_LIMIT:,}')
    if total_deductions >= MONEY_LIMIT:
        raise ValueError(f'Total deductions must be less than {MONEY_LIMIT:,}')
    return SalaryBreakdown(
        gross_salary=gross,
        total_deductions=total_deductions,
        net_salary=gross - total_deductions,
    )
