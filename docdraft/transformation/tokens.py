import math

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Heuristic token count: one token per four characters, rounded up."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)
