"""
Token counting for prompt budgeting.

Uses tiktoken's cl100k_base encoding as an approximation for the hosted
chat model, so the retrieved context can be trimmed before sending.
"""

from functools import lru_cache

import tiktoken


@lru_cache(maxsize=1)
def _get_encoder() -> tiktoken.Encoding:
    return tiktoken.get_encoding("cl100k_base")


def count_tokens(text: str) -> int:
    if not text:
        return 0
    return len(_get_encoder().encode(text))


def truncate_to_tokens(text: str, max_tokens: int) -> str:
    """Return the longest prefix of text that fits in max_tokens."""
    if max_tokens <= 0 or not text:
        return ""
    encoder = _get_encoder()
    tokens = encoder.encode(text)
    if len(tokens) <= max_tokens:
        return text
    return encoder.decode(tokens[:max_tokens])
