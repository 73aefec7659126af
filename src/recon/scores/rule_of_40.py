"""Rule of 40 for SaaS and growth companies.

A healthy growth company's revenue growth rate plus profit margin should equal
or exceed 40%. Operating margin is used as the profitability measure.
"""

from __future__ import annotations

from recon.core.constants import RULE_OF_40_THRESHOLD
from recon.scores.models import FinancialData, RuleOf40Result


def calculate_rule_of_40(current: FinancialData) -> RuleOf40Result:
    """Single-period Rule of 40. Growth needs a prior period, so it is 0 here."""
    return _result(revenue_growth=0.0, profit_margin=_profit_margin(current))


def calculate_rule_of_40_with_growth(
    current: FinancialData,
    previous: FinancialData,
) -> RuleOf40Result:
    """Rule of 40 with year-over-year revenue growth against ``previous``."""
    revenue_growth = 0.0
    if previous.revenue > 0:
        revenue_growth = (current.revenue - previous.revenue) / previous.revenue * 100

    return _result(revenue_growth=revenue_growth, profit_margin=_profit_margin(current))


def _profit_margin(data: FinancialData) -> float:
    if data.revenue == 0:
        return 0.0
    return data.operating_income / data.revenue * 100


def _result(revenue_growth: float, profit_margin: float) -> RuleOf40Result:
    score = revenue_growth + profit_margin
    return RuleOf40Result(
        score=score,
        revenue_growth_percent=revenue_growth,
        profit_margin_percent=profit_margin,
        passed=score >= RULE_OF_40_THRESHOLD,
    )
