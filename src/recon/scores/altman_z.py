"""Altman Z-Score for bankruptcy prediction.

The Z-Score combines five financial ratios to predict the probability of a
company going bankrupt within two years:

    Z = 1.2A + 1.4B + 3.3C + 0.6D + 1.0E

    A = Working Capital / Total Assets
    B = Retained Earnings / Total Assets
    C = EBIT / Total Assets
    D = Market Value of Equity / Total Liabilities
    E = Sales / Total Assets

Zones:
    Z > 2.99          safe (low probability of bankruptcy)
    1.81 <= Z <= 2.99 gray (uncertain)
    Z < 1.81          distress (high probability of bankruptcy)
"""

from __future__ import annotations

from recon.core.constants import ALTMAN_Z_DISTRESS_THRESHOLD, ALTMAN_Z_SAFE_THRESHOLD
from recon.scores.models import AltmanZComponents, AltmanZone, AltmanZResult, FinancialData

# Coefficients for the original manufacturing formula
COEFF_WORKING_CAPITAL = 1.2
COEFF_RETAINED_EARNINGS = 1.4
COEFF_EBIT = 3.3
COEFF_MARKET_CAP = 0.6
COEFF_SALES = 1.0


def calculate_altman_z_score(data: FinancialData) -> AltmanZResult:
    """Compute the Altman Z-Score and classify it into a risk zone.

    Ratios with a zero denominator contribute 0, so a company with no assets
    and no liabilities scores 0 and lands in the distress zone.
    """
    components = _calculate_components(data)
    score = _apply_formula(components)
    return AltmanZResult(score=score, zone=determine_zone(score), components=components)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


def _calculate_components(data: FinancialData) -> AltmanZComponents:
    working_capital = data.current_assets - data.current_liabilities
    return AltmanZComponents(
        working_capital_to_assets=_ratio(working_capital, data.total_assets),
        retained_earnings_to_assets=_ratio(data.retained_earnings, data.total_assets),
        ebit_to_assets=_ratio(data.ebit, data.total_assets),
        market_cap_to_liabilities=_ratio(data.market_cap, data.total_liabilities),
        sales_to_assets=_ratio(data.revenue, data.total_assets),
    )


def _apply_formula(c: AltmanZComponents) -> float:
    return (
        COEFF_WORKING_CAPITAL * c.working_capital_to_assets
        + COEFF_RETAINED_EARNINGS * c.retained_earnings_to_assets
        + COEFF_EBIT * c.ebit_to_assets
        + COEFF_MARKET_CAP * c.market_cap_to_liabilities
        + COEFF_SALES * c.sales_to_assets
    )


def determine_zone(score: float) -> AltmanZone:
    """Classify a Z-Score. Both thresholds themselves fall in the gray zone."""
    if score > ALTMAN_Z_SAFE_THRESHOLD:
        return AltmanZone.safe
    if score < ALTMAN_Z_DISTRESS_THRESHOLD:
        return AltmanZone.distress
    return AltmanZone.gray
