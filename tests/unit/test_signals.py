"""Tests for signal rules and the signal generator."""

from __future__ import annotations

from typing import Any

import pytest

from recon.scores import AltmanZone, AltmanZResult, PiotroskiResult
from recon.signals import (
    Company,
    Financials,
    InsiderActivity,
    RuleContext,
    ShortInterest,
    Signal,
    SignalCategory,
    SignalGenerator,
    SignalType,
)
from recon.signals import rules


def _ctx(**fields: Any) -> RuleContext:
    return RuleContext(company=Company(ticker="TEST"), **fields)


def _altman(score: float, zone: AltmanZone) -> AltmanZResult:
    return AltmanZResult(score=score, zone=zone)


# ---------------------------------------------------------------------------
# Score rules
# ---------------------------------------------------------------------------


class TestPiotroskiRules:
    @pytest.mark.parametrize("score", [7, 8, 9])
    def test_high_fires(self, score: int) -> None:
        signal = rules.high_piotroski(_ctx(piotroski=PiotroskiResult(score=score)))

        assert signal is not None
        assert signal.type == SignalType.bullish
        assert signal.category == SignalCategory.fundamental
        assert signal.priority == 4
        assert signal.data == {"score": score}

    @pytest.mark.parametrize("score", [0, 1, 3])
    def test_low_fires(self, score: int) -> None:
        signal = rules.low_piotroski(_ctx(piotroski=PiotroskiResult(score=score)))

        assert signal is not None
        assert signal.type == SignalType.bearish
        assert signal.priority == 4

    @pytest.mark.parametrize("score", [4, 5, 6])
    def test_middle_scores_are_silent(self, score: int) -> None:
        ctx = _ctx(piotroski=PiotroskiResult(score=score))
        assert rules.high_piotroski(ctx) is None
        assert rules.low_piotroski(ctx) is None

    def test_missing_score_is_silent(self) -> None:
        assert rules.high_piotroski(_ctx()) is None
        assert rules.low_piotroski(_ctx()) is None


class TestAltmanRules:
    def test_distress_warning(self) -> None:
        signal = rules.altman_distress(_ctx(altman_z=_altman(1.2, AltmanZone.distress)))

        assert signal is not None
        assert signal.type == SignalType.warning
        assert signal.priority == 5
        assert signal.data == {"score": 1.2, "zone": "distress"}
        assert "1.20" in signal.message

    def test_safe_above_four(self) -> None:
        signal = rules.altman_safe(_ctx(altman_z=_altman(4.5, AltmanZone.safe)))

        assert signal is not None
        assert signal.type == SignalType.bullish
        assert signal.priority == 3

    def test_safe_at_or_below_four_is_silent(self) -> None:
        assert rules.altman_safe(_ctx(altman_z=_altman(4.0, AltmanZone.safe))) is None
        assert rules.altman_safe(_ctx(altman_z=_altman(3.5, AltmanZone.safe))) is None

    def test_gray_zone_is_silent(self) -> None:
        ctx = _ctx(altman_z=_altman(2.5, AltmanZone.gray))
        assert rules.altman_distress(ctx) is None
        assert rules.altman_safe(ctx) is None

    def test_missing_result_is_silent(self) -> None:
        assert rules.altman_distress(_ctx()) is None
        assert rules.altman_safe(_ctx()) is None


# ---------------------------------------------------------------------------
# Insider rules
# ---------------------------------------------------------------------------


class TestInsiderRules:
    def test_buying(self) -> None:
        activity = InsiderActivity(buy_count_90d=3, net_value_90d=150_000)
        signal = rules.insider_buying(_ctx(insider_activity=activity))

        assert signal is not None
        assert signal.type == SignalType.bullish
        assert signal.category == SignalCategory.insider
        assert signal.priority == 4

    @pytest.mark.parametrize(
        ("buys", "net"),
        [(2, 1_000_000), (3, 100_000), (10, -50_000)],
    )
    def test_buying_below_thresholds(self, buys: int, net: float) -> None:
        activity = InsiderActivity(buy_count_90d=buys, net_value_90d=net)
        assert rules.insider_buying(_ctx(insider_activity=activity)) is None

    def test_selling(self) -> None:
        activity = InsiderActivity(sell_count_90d=5, net_value_90d=-600_000)
        signal = rules.insider_selling(_ctx(insider_activity=activity))

        assert signal is not None
        assert signal.type == SignalType.warning
        assert signal.category == SignalCategory.insider
        assert signal.priority == 3

    @pytest.mark.parametrize(
        ("sells", "net"),
        [(4, -5_000_000), (5, -500_000), (8, 0)],
    )
    def test_selling_below_thresholds(self, sells: int, net: float) -> None:
        activity = InsiderActivity(sell_count_90d=sells, net_value_90d=net)
        assert rules.insider_selling(_ctx(insider_activity=activity)) is None

    def test_missing_activity_is_silent(self) -> None:
        assert rules.insider_buying(_ctx()) is None
        assert rules.insider_selling(_ctx()) is None


# ---------------------------------------------------------------------------
# Financials rules
# ---------------------------------------------------------------------------


class TestFinancialsRules:
    def test_high_growth(self) -> None:
        signal = rules.high_growth(_ctx(financials=Financials(revenue_growth_yoy=25.0)))
        assert signal is not None
        assert signal.type == SignalType.bullish
        assert signal.data == {"revenue_growth_yoy": 25.0}

    def test_growth_at_threshold_is_silent(self) -> None:
        assert rules.high_growth(_ctx(financials=Financials(revenue_growth_yoy=20.0))) is None

    def test_negative_margins(self) -> None:
        signal = rules.negative_margins(_ctx(financials=Financials(operating_margin=-5.0)))
        assert signal is not None
        assert signal.type == SignalType.warning
        assert signal.priority == 4

    def test_high_debt(self) -> None:
        signal = rules.high_debt(_ctx(financials=Financials(debt_to_equity=2.5)))
        assert signal is not None
        assert signal.type == SignalType.warning
        assert signal.priority == 3
        assert rules.high_debt(_ctx(financials=Financials(debt_to_equity=2.0))) is None

    def test_strong_roic(self) -> None:
        signal = rules.strong_roic(_ctx(financials=Financials(roic=25.0)))
        assert signal is not None
        assert signal.type == SignalType.bullish
        assert rules.strong_roic(_ctx(financials=Financials(roic=20.0))) is None

    def test_neutral_financials_are_silent(self) -> None:
        ctx = _ctx(financials=Financials())
        for rule in (rules.high_growth, rules.negative_margins, rules.high_debt, rules.strong_roic):
            assert rule(ctx) is None

    def test_missing_financials_are_silent(self) -> None:
        ctx = _ctx()
        for rule in (rules.high_growth, rules.negative_margins, rules.high_debt, rules.strong_roic):
            assert rule(ctx) is None


# ---------------------------------------------------------------------------
# Short interest rules
# ---------------------------------------------------------------------------


def _short_signals(**fields: float) -> list[Signal]:
    ctx = _ctx(short_interest=ShortInterest(**fields))
    short_rules = (
        rules.low_short_interest,
        rules.elevated_short_interest,
        rules.very_high_short_interest,
        rules.low_days_to_cover,
        rules.moderate_days_to_cover,
        rules.high_days_to_cover,
    )
    return [s for rule in short_rules if (s := rule(ctx)) is not None]


class TestShortInterestRules:
    @pytest.mark.parametrize(
        ("pct", "expected"),
        [
            (0.0, None),
            (3.0, (SignalType.bullish, 2)),
            (5.0, None),
            (9.9, None),
            (10.0, (SignalType.bearish, 3)),
            (19.9, (SignalType.bearish, 3)),
            (20.0, (SignalType.warning, 4)),
            (45.0, (SignalType.warning, 4)),
        ],
    )
    def test_short_percent_float_bands(
        self, pct: float, expected: tuple[SignalType, int] | None
    ) -> None:
        signals = _short_signals(short_percent_float=pct)

        if expected is None:
            assert signals == []
        else:
            assert len(signals) == 1
            assert (signals[0].type, signals[0].priority) == expected
            assert signals[0].data == {"short_percent_float": pct}

    @pytest.mark.parametrize(
        ("days", "expected"),
        [
            (0.0, None),
            (1.5, (SignalType.bullish, 2)),
            (2.0, None),
            (4.9, None),
            (5.0, (SignalType.bearish, 3)),
            (9.9, (SignalType.bearish, 3)),
            (10.0, (SignalType.warning, 4)),
        ],
    )
    def test_days_to_cover_bands(
        self, days: float, expected: tuple[SignalType, int] | None
    ) -> None:
        signals = _short_signals(days_to_cover=days)

        if expected is None:
            assert signals == []
        else:
            assert len(signals) == 1
            assert (signals[0].type, signals[0].priority) == expected

    def test_missing_short_interest_is_silent(self) -> None:
        assert rules.very_high_short_interest(_ctx()) is None
        assert rules.high_days_to_cover(_ctx()) is None


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class TestSignalGenerator:
    def test_empty_context_yields_nothing(self) -> None:
        assert SignalGenerator().generate_all(RuleContext()) == []

    def test_high_piotroski_only(self) -> None:
        signals = SignalGenerator().generate_all(_ctx(piotroski=PiotroskiResult(score=8)))

        assert len(signals) == 1
        assert signals[0].category == SignalCategory.fundamental
        assert signals[0].type == SignalType.bullish
        assert signals[0].data["score"] == 8

    def test_sorted_by_priority(self) -> None:
        ctx = _ctx(
            piotroski=PiotroskiResult(score=8),
            altman_z=_altman(4.5, AltmanZone.safe),
        )
        signals = SignalGenerator().generate_all(ctx)

        assert [s.priority for s in signals] == [4, 3]
        assert "Piotroski" in signals[0].message
        assert "Altman" in signals[1].message

    def test_ties_keep_catalog_order(self) -> None:
        ctx = _ctx(
            piotroski=PiotroskiResult(score=9),
            altman_z=_altman(0.5, AltmanZone.distress),
            insider_activity=InsiderActivity(buy_count_90d=4, net_value_90d=250_000),
            financials=Financials(operating_margin=-12.0, roic=30.0, debt_to_equity=3.0),
            short_interest=ShortInterest(short_percent_float=25.0, days_to_cover=1.0),
        )
        signals = SignalGenerator().generate_all(ctx)

        assert [(s.category, s.priority) for s in signals] == [
            (SignalCategory.fundamental, 5),  # altman distress
            (SignalCategory.fundamental, 4),  # high piotroski
            (SignalCategory.insider, 4),  # insider buying
            (SignalCategory.fundamental, 4),  # negative margins
            (SignalCategory.technical, 4),  # very high short interest
            (SignalCategory.fundamental, 3),  # high debt
            (SignalCategory.fundamental, 3),  # strong roic
            (SignalCategory.technical, 2),  # low days to cover
        ]

    def test_stable_sort_with_custom_rules(self) -> None:
        def make_rule(message: str, priority: int) -> rules.Rule:
            def rule(ctx: RuleContext) -> Signal | None:
                return Signal(
                    type=SignalType.bullish,
                    category=SignalCategory.technical,
                    message=message,
                    priority=priority,
                )

            return rule

        generator = SignalGenerator(
            rules=[make_rule("a", 3), make_rule("b", 5), make_rule("c", 3), make_rule("d", 1)]
        )
        signals = generator.generate_all(RuleContext())

        assert [s.message for s in signals] == ["b", "a", "c", "d"]

    def test_idempotent(self) -> None:
        ctx = _ctx(
            piotroski=PiotroskiResult(score=2),
            financials=Financials(revenue_growth_yoy=35.0, operating_margin=-1.0),
            short_interest=ShortInterest(short_percent_float=12.0, days_to_cover=6.0),
        )
        generator = SignalGenerator()

        assert generator.generate_all(ctx) == generator.generate_all(ctx)

    def test_default_catalog(self) -> None:
        assert SignalGenerator().rules == rules.DEFAULT_RULES
        assert len(rules.DEFAULT_RULES) == 16
