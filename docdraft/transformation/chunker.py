import re

from docdraft.transformation.models import Chunk
from docdraft.transformation.tokens import estimate_tokens

DEFAULT_MAX_TOKENS_PER_CHUNK = 3000

# A sentence is a run of non-terminators with any terminators around it; a bare
# terminator run still counts so no character is dropped.
_SENTENCE_RE = re.compile(r"[.!?]*[^.!?]+[.!?]*|[.!?]+")


def split_sentences(text: str) -> list[str]:
    """Split *text* into sentence-like units, keeping terminators and spacing."""
    return [s for s in _SENTENCE_RE.findall(text) if s.strip()]


class ContentChunker:
    """Splits oversized text into ordered chunks on sentence boundaries.

    Sentences are accumulated greedily while the running chunk stays within
    ``max_tokens_per_chunk``. A sentence that alone exceeds the budget is
    emitted whole as its own chunk; content is never truncated.
    """

    def __init__(self, max_tokens_per_chunk: int = DEFAULT_MAX_TOKENS_PER_CHUNK) -> None:
        if max_tokens_per_chunk < 1:
            raise ValueError("max_tokens_per_chunk must be positive")
        self._max_tokens = max_tokens_per_chunk

    @property
    def max_tokens_per_chunk(self) -> int:
        return self._max_tokens

    def split(self, text: str) -> list[Chunk]:
        texts: list[str] = []
        current = ""
        for sentence in split_sentences(text):
            candidate = current + sentence
            if estimate_tokens(candidate.strip()) > self._max_tokens and current.strip():
                texts.append(current.strip())
                current = sentence
            else:
                current = candidate
        if current.strip():
            texts.append(current.strip())
        return [Chunk(index=i, text=chunk_text) for i, chunk_text in enumerate(texts)]
