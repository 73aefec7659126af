"""Financial health score endpoints."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from recon.scores import (
    AltmanZResult,
    FinancialData,
    RuleOf40Result,
    calculate_altman_z_score,
    calculate_rule_of_40,
    calculate_rule_of_40_with_growth,
)

router = APIRouter()


class RuleOf40Request(BaseModel):
    current: FinancialData
    previous: FinancialData | None = None


@router.post("/altman-z")
async def altman_z(data: FinancialData) -> AltmanZResult:
    """Altman Z-Score with safe/gray/distress zone."""
    return calculate_altman_z_score(data)


@router.post("/rule-of-40")
async def rule_of_40(body: RuleOf40Request) -> RuleOf40Result:
    """Rule of 40; revenue growth is 0 unless a previous period is supplied."""
    if body.previous is None:
        return calculate_rule_of_40(body.current)
    return calculate_rule_of_40_with_growth(body.current, body.previous)
