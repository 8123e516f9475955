import re


_TOKEN_PATTERN = re.compile(r"\w+", re.UNICODE)


def tokenize(text: str) -> list[str]:
    """Lower-case text and return its maximal runs of word characters."""
    return _TOKEN_PATTERN.findall((text or "").lower())


def distinct_tokens(text: str) -> list[str]:
    """Distinct tokens of text, in first-occurrence order."""
    return list(dict.fromkeys(tokenize(text)))
