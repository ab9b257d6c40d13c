class WordCountError(Exception):
    """Base class for errors raised by the word count pipeline."""


class PassageUnreadableError(WordCountError):
    def __init__(self, source: str) -> None:
        super().__init__(f"Could not read file: {source}")
        self.source = source
