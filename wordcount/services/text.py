from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

NON_LETTER_PATTERN = re.compile(r"[^a-z]")
TOKEN_SEPARATOR = " "
SENTENCE_TERMINATOR = "."


def normalize_word(raw: str) -> str:
    return NON_LETTER_PATTERN.sub("", raw.lower())


def split_tokens(line: str) -> list[str]:
    # Empty pieces are tokens too, e.g. from an empty line.
    return line.split(TOKEN_SEPARATOR)


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from split_tokens(line)


@dataclass(frozen=True)
class Sentence:
    tokens: tuple[str, ...]

    @property
    def text(self) -> str:
        return TOKEN_SEPARATOR.join(self.tokens)

    @property
    def terminated(self) -> bool:
        return self.tokens[-1].endswith(SENTENCE_TERMINATOR)


@dataclass
class SentenceSegmenter:
    """Groups raw tokens into sentences as they arrive.

    A sentence is sealed by a token ending in a period. Tokens left over when
    the input ends form a final, unterminated sentence once ``finish`` runs.
    """

    sentences: list[Sentence] = field(default_factory=list)
    _pending: list[str] = field(default_factory=list, init=False, repr=False)

    def feed(self, token: str) -> None:
        self._pending.append(token)
        if token.endswith(SENTENCE_TERMINATOR):
            self._seal()

    def finish(self) -> list[Sentence]:
        if self._pending:
            self._seal()
        return self.sentences

    def _seal(self) -> None:
        self.sentences.append(Sentence(tokens=tuple(self._pending)))
        self._pending = []
