"""Rule-based signal generation for stock analysis."""

from recon.signals.generator import SignalGenerator
from recon.signals.models import (
    Company,
    Financials,
    Holdings,
    InsiderActivity,
    InsiderTrade,
    InstitutionalHolder,
    Quote,
    RuleContext,
    ShortInterest,
    Signal,
    SignalCategory,
    SignalType,
)
from recon.signals.rules import DEFAULT_RULES, Rule

__all__ = [
    "DEFAULT_RULES",
    "Company",
    "Financials",
    "Holdings",
    "InsiderActivity",
    "InsiderTrade",
    "InstitutionalHolder",
    "Quote",
    "Rule",
    "RuleContext",
    "Signal",
    "SignalCategory",
    "SignalGenerator",
    "SignalType",
    "ShortInterest",
]
