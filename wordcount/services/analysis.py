from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from wordcount.schemas import PassageReport
from wordcount.services.counting import DEFAULT_TOP_K, FrequencyTable
from wordcount.services.locator import find_last_sentence
from wordcount.services.reader import open_passage
from wordcount.services.text import SentenceSegmenter, iter_tokens, normalize_word

logger = logging.getLogger(__name__)


@dataclass
class PassageAnalyzer:
    top_k: int = DEFAULT_TOP_K

    def analyze(self, lines: Iterable[str], source: str = "<lines>") -> PassageReport:
        table = FrequencyTable()
        segmenter = SentenceSegmenter()
        for token in iter_tokens(lines):
            segmenter.feed(token)
            table.add(normalize_word(token))
        sentences = segmenter.finish()
        logger.debug(
            "Read %s words, %s distinct, %s sentences from %s",
            table.total,
            len(table),
            len(sentences),
            source,
        )
        if sentences and not sentences[-1].terminated:
            logger.debug("Passage %s ends with an unterminated sentence", source)

        top_words = table.top(self.top_k)
        top_word = top_words[0].word if top_words else None
        last_sentence = find_last_sentence(sentences, top_word)
        if top_word is not None and last_sentence is None:
            logger.debug("No sentence contains top word %r", top_word)

        return PassageReport(
            source=source,
            total_words=table.total,
            sentence_count=len(sentences),
            top_words=top_words,
            last_sentence=last_sentence,
        )

    def analyze_file(self, path: str | Path, encoding: str = "utf-8") -> PassageReport:
        with open_passage(path, encoding=encoding) as lines:
            return self.analyze(lines, source=str(path))
