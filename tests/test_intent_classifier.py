# mypy: ignore-errors
import pytest

from dialogue.intents import INTENTS, KEYWORD_TABLE, classify, match_intent, normalize


def test_earlier_intent_wins() -> None:
    text = normalize("I need a bank loan and a pension life certificate")
    assert classify(text) == "pension"


def test_aadhaar() -> None:
    assert classify("aadhaar card update kaise karu") == "aadhaar"


def test_generic_fallback() -> None:
    match = match_intent("mujhe kal milna hai")
    assert match.intent == "generic"
    assert match.keyword is None


def test_substring_over_match() -> None:
    assert classify("trip to japan") == "pan"


def test_does_not_lowercase() -> None:
    assert classify("PASSPORT") == "generic"
    assert classify(normalize("  PASSPORT  ")) == "passport"


@pytest.mark.parametrize(
    "text, intent",
    [
        ("jeevan pramaan banwana hai", "pension"),
        ("sambhal card chahiye", "samman"),
        ("paise withdraw karne hai", "banking"),
        ("aadhar link", "aadhaar"),
        ("p.a.n correction", "pan"),
        ("passport renewal", "passport"),
        ("pradhan mantri awas", "pm_schemes"),
        ("mobile recharge", "bills"),
    ],
)
def test_each_intent(text, intent) -> None:
    assert classify(text) == intent


def test_matched_keyword_reported() -> None:
    assert match_intent("bijli ka bill").keyword == "bill"


def test_table_order() -> None:
    assert [intent for intent, _ in KEYWORD_TABLE] == [
        "pension", "samman", "banking", "aadhaar", "pan", "passport", "pm_schemes", "bills",
    ]
    assert INTENTS[-1] == "generic"
