"""Keyword based service intent classifier."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

Intent = Literal[
    "pension",
    "samman",
    "banking",
    "aadhaar",
    "pan",
    "passport",
    "pm_schemes",
    "bills",
    "generic",
]

# Order is match priority: the first intent with a hit wins.
# Plain substring matching, so "pan" also fires inside "japan".
KEYWORD_TABLE: Tuple[Tuple[Intent, Tuple[str, ...]], ...] = (
    ("pension", ("pension", "life certificate", "dlc", "jeevan pramaan", "sparsh")),
    ("samman", ("samman", "sambhal")),
    ("banking", ("bank", "account", "withdraw", "deposit", "bc", "loan")),
    ("aadhaar", ("aadhaar", "aadhar")),
    ("pan", ("pan", "p.a.n")),
    ("passport", ("passport",)),
    ("pm_schemes", ("pm", "pradhan mantri", "yojana", "scheme", "mudra", "kisan")),
    ("bills", ("bill", "bijli", "electricity", "gas", "water", "recharge")),
)

INTENTS: Tuple[Intent, ...] = tuple(intent for intent, _ in KEYWORD_TABLE) + ("generic",)


@dataclass(frozen=True, slots=True)
class IntentMatch:
    intent: Intent
    keyword: Optional[str] = None


def normalize(text: str) -> str:
    return (text or "").strip().lower()


def match_intent(normalized: str) -> IntentMatch:
    """Return the first intent whose keywords occur in ``normalized``.

    The text must already be normalized; nothing is lowercased here.
    """
    for intent, keywords in KEYWORD_TABLE:
        for keyword in keywords:
            if keyword in normalized:
                return IntentMatch(intent, keyword)
    return IntentMatch("generic")


def classify(normalized: str) -> Intent:
    return match_intent(normalized).intent
