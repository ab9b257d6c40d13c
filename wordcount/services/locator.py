from __future__ import annotations

from collections.abc import Sequence

from wordcount.services.text import Sentence


def find_last_sentence(sentences: Sequence[Sentence], word: str | None) -> str | None:
    if word is None:
        return None
    return next(
        (
            sentence.text
            for sentence in reversed(sentences)
            if word in sentence.text.lower()
        ),
        None,
    )
