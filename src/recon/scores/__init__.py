"""Financial health scores: Altman Z-Score and Rule of 40."""

from recon.scores.altman_z import calculate_altman_z_score, determine_zone
from recon.scores.models import (
    AltmanZComponents,
    AltmanZone,
    AltmanZResult,
    FinancialData,
    PiotroskiResult,
    RuleOf40Result,
)
from recon.scores.rule_of_40 import calculate_rule_of_40, calculate_rule_of_40_with_growth

__all__ = [
    "AltmanZComponents",
    "AltmanZResult",
    "AltmanZone",
    "FinancialData",
    "PiotroskiResult",
    "RuleOf40Result",
    "calculate_altman_z_score",
    "calculate_rule_of_40",
    "calculate_rule_of_40_with_growth",
    "determine_zone",
]
