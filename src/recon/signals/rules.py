"""Signal rule catalog.

Each rule is a plain function ``(RuleContext) -> Signal | None``. Rules only
read the fields they need, return None when those fields are missing, and
never depend on each other's output. Type, category and priority are fixed
per rule.
"""

from __future__ import annotations

from collections.abc import Callable

from recon.scores.models import AltmanZone
from recon.signals.models import RuleContext, Signal, SignalCategory, SignalType

Rule = Callable[[RuleContext], Signal | None]


# ─────────────────────────────────────────────────────────────
# Thresholds
# ─────────────────────────────────────────────────────────────
PIOTROSKI_HIGH = 7
PIOTROSKI_LOW = 3
ALTMAN_STRONG_SCORE = 4.0

INSIDER_BUY_MIN_COUNT = 3
INSIDER_BUY_MIN_NET_VALUE = 100_000
INSIDER_SELL_MIN_COUNT = 5
INSIDER_SELL_MAX_NET_VALUE = -500_000

HIGH_GROWTH_PERCENT = 20.0
HIGH_DEBT_TO_EQUITY = 2.0
STRONG_ROIC_PERCENT = 20.0

SHORT_FLOAT_LOW = 5.0
SHORT_FLOAT_ELEVATED = 10.0
SHORT_FLOAT_VERY_HIGH = 20.0
DAYS_TO_COVER_LOW = 2.0
DAYS_TO_COVER_MODERATE = 5.0
DAYS_TO_COVER_HIGH = 10.0


# ─────────────────────────────────────────────────────────────
# Scores
# ─────────────────────────────────────────────────────────────


def high_piotroski(ctx: RuleContext) -> Signal | None:
    if ctx.piotroski is None or ctx.piotroski.score < PIOTROSKI_HIGH:
        return None
    score = ctx.piotroski.score
    return Signal(
        type=SignalType.bullish,
        category=SignalCategory.fundamental,
        message=f"Strong Piotroski F-Score of {score} indicates solid fundamentals",
        priority=4,
        data={"score": score},
    )


def low_piotroski(ctx: RuleContext) -> Signal | None:
    if ctx.piotroski is None or ctx.piotroski.score > PIOTROSKI_LOW:
        return None
    score = ctx.piotroski.score
    return Signal(
        type=SignalType.bearish,
        category=SignalCategory.fundamental,
        message=f"Weak Piotroski F-Score of {score} suggests fundamental concerns",
        priority=4,
        data={"score": score},
    )


def altman_distress(ctx: RuleContext) -> Signal | None:
    if ctx.altman_z is None or ctx.altman_z.zone != AltmanZone.distress:
        return None
    score = ctx.altman_z.score
    return Signal(
        type=SignalType.warning,
        category=SignalCategory.fundamental,
        message=f"Altman Z-Score of {score:.2f} indicates elevated bankruptcy risk",
        priority=5,
        data={"score": score, "zone": ctx.altman_z.zone.value},
    )


def altman_safe(ctx: RuleContext) -> Signal | None:
    if ctx.altman_z is None:
        return None
    if ctx.altman_z.zone != AltmanZone.safe or ctx.altman_z.score <= ALTMAN_STRONG_SCORE:
        return None
    score = ctx.altman_z.score
    return Signal(
        type=SignalType.bullish,
        category=SignalCategory.fundamental,
        message=f"Strong Altman Z-Score of {score:.2f} indicates excellent financial health",
        priority=3,
        data={"score": score},
    )


# ─────────────────────────────────────────────────────────────
# Insider activity
# ─────────────────────────────────────────────────────────────


def insider_buying(ctx: RuleContext) -> Signal | None:
    activity = ctx.insider_activity
    if activity is None:
        return None
    if (
        activity.buy_count_90d < INSIDER_BUY_MIN_COUNT
        or activity.net_value_90d <= INSIDER_BUY_MIN_NET_VALUE
    ):
        return None
    return Signal(
        type=SignalType.bullish,
        category=SignalCategory.insider,
        message=(
            f"{activity.buy_count_90d} insider purchases in the last 90 days "
            f"(net ${activity.net_value_90d:,.0f})"
        ),
        priority=4,
        data={"buy_count": activity.buy_count_90d, "net_value": activity.net_value_90d},
    )


def insider_selling(ctx: RuleContext) -> Signal | None:
    activity = ctx.insider_activity
    if activity is None:
        return None
    if (
        activity.sell_count_90d < INSIDER_SELL_MIN_COUNT
        or activity.net_value_90d >= INSIDER_SELL_MAX_NET_VALUE
    ):
        return None
    return Signal(
        type=SignalType.warning,
        category=SignalCategory.insider,
        message=(
            f"{activity.sell_count_90d} insider sales in the last 90 days "
            f"(net -${abs(activity.net_value_90d):,.0f})"
        ),
        priority=3,
        data={"sell_count": activity.sell_count_90d, "net_value": activity.net_value_90d},
    )


# ─────────────────────────────────────────────────────────────
# Financials
# ─────────────────────────────────────────────────────────────


def high_growth(ctx: RuleContext) -> Signal | None:
    if ctx.financials is None or ctx.financials.revenue_growth_yoy <= HIGH_GROWTH_PERCENT:
        return None
    growth = ctx.financials.revenue_growth_yoy
    return Signal(
        type=SignalType.bullish,
        category=SignalCategory.fundamental,
        message=f"Revenue grew {growth:.1f}% year over year",
        priority=3,
        data={"revenue_growth_yoy": growth},
    )


def negative_margins(ctx: RuleContext) -> Signal | None:
    if ctx.financials is None or ctx.financials.operating_margin >= 0:
        return None
    margin = ctx.financials.operating_margin
    return Signal(
        type=SignalType.warning,
        category=SignalCategory.fundamental,
        message=f"Negative operating margin of {margin:.1f}%",
        priority=4,
        data={"operating_margin": margin},
    )


def high_debt(ctx: RuleContext) -> Signal | None:
    if ctx.financials is None or ctx.financials.debt_to_equity <= HIGH_DEBT_TO_EQUITY:
        return None
    ratio = ctx.financials.debt_to_equity
    return Signal(
        type=SignalType.warning,
        category=SignalCategory.fundamental,
        message=f"Elevated debt-to-equity ratio of {ratio:.2f}",
        priority=3,
        data={"debt_to_equity": ratio},
    )


def strong_roic(ctx: RuleContext) -> Signal | None:
    if ctx.financials is None or ctx.financials.roic <= STRONG_ROIC_PERCENT:
        return None
    roic = ctx.financials.roic
    return Signal(
        type=SignalType.bullish,
        category=SignalCategory.fundamental,
        message=f"Strong return on invested capital of {roic:.1f}%",
        priority=3,
        data={"roic": roic},
    )


# ─────────────────────────────────────────────────────────────
# Short interest
# ─────────────────────────────────────────────────────────────


def low_short_interest(ctx: RuleContext) -> Signal | None:
    if ctx.short_interest is None:
        return None
    pct = ctx.short_interest.short_percent_float
    if not 0 < pct < SHORT_FLOAT_LOW:
        return None
    return Signal(
        type=SignalType.bullish,
        category=SignalCategory.technical,
        message=f"Low short interest at {pct:.1f}% of float",
        priority=2,
        data={"short_percent_float": pct},
    )


def elevated_short_interest(ctx: RuleContext) -> Signal | None:
    if ctx.short_interest is None:
        return None
    pct = ctx.short_interest.short_percent_float
    if not SHORT_FLOAT_ELEVATED <= pct < SHORT_FLOAT_VERY_HIGH:
        return None
    return Signal(
        type=SignalType.bearish,
        category=SignalCategory.technical,
        message=f"Elevated short interest at {pct:.1f}% of float",
        priority=3,
        data={"short_percent_float": pct},
    )


def very_high_short_interest(ctx: RuleContext) -> Signal | None:
    if ctx.short_interest is None:
        return None
    pct = ctx.short_interest.short_percent_float
    if pct < SHORT_FLOAT_VERY_HIGH:
        return None
    return Signal(
        type=SignalType.warning,
        category=SignalCategory.technical,
        message=f"Very high short interest at {pct:.1f}% of float",
        priority=4,
        data={"short_percent_float": pct},
    )


def low_days_to_cover(ctx: RuleContext) -> Signal | None:
    if ctx.short_interest is None:
        return None
    days = ctx.short_interest.days_to_cover
    if not 0 < days < DAYS_TO_COVER_LOW:
        return None
    return Signal(
        type=SignalType.bullish,
        category=SignalCategory.technical,
        message=f"Shorts could cover in {days:.1f} days",
        priority=2,
        data={"days_to_cover": days},
    )


def moderate_days_to_cover(ctx: RuleContext) -> Signal | None:
    if ctx.short_interest is None:
        return None
    days = ctx.short_interest.days_to_cover
    if not DAYS_TO_COVER_MODERATE <= days < DAYS_TO_COVER_HIGH:
        return None
    return Signal(
        type=SignalType.bearish,
        category=SignalCategory.technical,
        message=f"{days:.1f} days to cover short positions",
        priority=3,
        data={"days_to_cover": days},
    )


def high_days_to_cover(ctx: RuleContext) -> Signal | None:
    if ctx.short_interest is None:
        return None
    days = ctx.short_interest.days_to_cover
    if days < DAYS_TO_COVER_HIGH:
        return None
    return Signal(
        type=SignalType.warning,
        category=SignalCategory.technical,
        message=f"{days:.1f} days to cover; squeeze risk is high",
        priority=4,
        data={"days_to_cover": days},
    )


# Order matters: it breaks priority ties in the generator output
DEFAULT_RULES: tuple[Rule, ...] = (
    high_piotroski,
    low_piotroski,
    altman_distress,
    altman_safe,
    insider_buying,
    insider_selling,
    high_growth,
    negative_margins,
    high_debt,
    strong_roic,
    low_short_interest,
    elevated_short_interest,
    very_high_short_interest,
    low_days_to_cover,
    moderate_days_to_cover,
    high_days_to_cover,
)
