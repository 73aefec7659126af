"""Signal generator: runs the rule catalog and orders the results."""

from __future__ import annotations

from collections.abc import Sequence

from recon.signals.models import RuleContext, Signal
from recon.signals.rules import DEFAULT_RULES, Rule


class SignalGenerator:
    """Evaluates an ordered list of rules against a RuleContext.

    The generator holds no per-call state, so one instance can serve any number
    of concurrent requests.

    Usage:
        generator = SignalGenerator()
        signals = generator.generate_all(RuleContext(piotroski=PiotroskiResult(score=8)))
    """

    def __init__(self, rules: Sequence[Rule] | None = None) -> None:
        self._rules: tuple[Rule, ...] = tuple(rules) if rules is not None else DEFAULT_RULES

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def generate_all(self, ctx: RuleContext) -> list[Signal]:
        """Run every rule and return the signals, highest priority first.

        The sort is stable: signals with equal priority keep catalog order.
        """
        signals = [signal for rule in self._rules if (signal := rule(ctx)) is not None]
        return sorted(signals, key=lambda s: s.priority, reverse=True)
