import pytest

from docdraft.transformation.chunker import ContentChunker, split_sentences
from docdraft.transformation.tokens import estimate_tokens


def _sentences(count: int, words: int = 12) -> str:
    return " ".join(
        f"Sentence {i} " + " ".join(["word"] * words) + "." for i in range(count)
    )


class TestSplitSentences:
    def test_splits_on_all_terminators(self) -> None:
        assert split_sentences("One. Two! Three? Four") == ["One.", " Two!", " Three?", " Four"]

    def test_keeps_terminator_runs_together(self) -> None:
        assert split_sentences("Wait... What?!") == ["Wait...", " What?!"]

    def test_discards_empty_fragments(self) -> None:
        assert split_sentences("One.   ") == ["One."]
        assert split_sentences("") == []

    def test_keeps_leading_terminators(self) -> None:
        assert split_sentences("...Hello world. Bye.") == ["...Hello world.", " Bye."]

    def test_keeps_bare_terminator_runs(self) -> None:
        assert split_sentences("?!") == ["?!"]


class TestContentChunker:
    def test_empty_text_yields_no_chunks(self) -> None:
        assert ContentChunker(10).split("   ") == []

    def test_small_text_is_single_chunk(self) -> None:
        chunks = ContentChunker(3000).split("Hello world. This is a test.")
        assert len(chunks) == 1
        assert chunks[0].index == 0
        assert chunks[0].text == "Hello world. This is a test."

    def test_indices_are_contiguous(self) -> None:
        chunks = ContentChunker(50).split(_sentences(40))
        assert [c.index for c in chunks] == list(range(len(chunks)))
        assert len(chunks) > 1

    def test_chunks_preserve_textual_order_and_content(self) -> None:
        text = _sentences(40)
        chunks = ContentChunker(50).split(text)
        assert " ".join(c.text for c in chunks) == text

    @pytest.mark.parametrize(
        "text",
        [
            "...Hello world. Bye.",
            "!!! Alarm. Calm down?! ...",
            "No terminators at all",
            "?",
        ],
    )
    @pytest.mark.parametrize("budget", [1, 5, 3000])
    def test_no_characters_are_dropped(self, text: str, budget: int) -> None:
        chunks = ContentChunker(budget).split(text)
        joined = "".join(c.text for c in chunks)
        assert "".join(joined.split()) == "".join(text.split())

    def test_chunks_respect_budget(self) -> None:
        chunks = ContentChunker(50).split(_sentences(40))
        assert all(estimate_tokens(c.text) <= 50 for c in chunks)

    def test_oversized_sentence_is_emitted_whole(self) -> None:
        giant = "G" * 400 + "."
        text = f"Short one. {giant} Short two."
        chunks = ContentChunker(20).split(text)
        assert [c.text for c in chunks] == ["Short one.", giant, "Short two."]
        assert estimate_tokens(chunks[1].text) > 20

    def test_oversized_text_without_terminators_is_not_truncated(self) -> None:
        text = "a" * 1000
        chunks = ContentChunker(10).split(text)
        assert [c.text for c in chunks] == [text]

    def test_chunking_is_idempotent(self) -> None:
        text = _sentences(60)
        chunker = ContentChunker(75)
        assert chunker.split(text) == chunker.split(text)

    def test_ten_thousand_tokens_yields_at_least_three_chunks(self) -> None:
        text = _sentences(800, words=8)
        text = text[: 40_000]
        assert estimate_tokens(text) == 10_000
        chunks = ContentChunker(3000).split(text)
        assert len(chunks) >= 3

    def test_rejects_non_positive_budget(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            ContentChunker(0)
