# dialogue/extractors.py
import re

# Self-introduction phrasings, English and Hinglish. Tried in order, first hit wins.
# No word boundaries: "main" inside another word still triggers, and the capture
# runs on over trailing words ("Ravi hai").
# Only the trigger words ignore case, ASCII folding only: "ſ" or the Kelvin sign
# must not pass for Latin letters.
NAME_PATTERNS = [
    re.compile(r"(?ai:my name is|mera naam|meri naam|I am|main)\s+([A-Za-z\s]{2,40})"),
]

MULTI_SPACE_RE = re.compile(r"\s{2,}")


def extract_name(text: str) -> str:
    for rx in NAME_PATTERNS:
        m = rx.search(text or "")
        if m:
            return MULTI_SPACE_RE.sub(" ", m.group(1).strip())
    return ""
