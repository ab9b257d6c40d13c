from pydantic import BaseModel, Field


class WordCount(BaseModel):
    word: str
    count: int = Field(ge=1)


class PassageReport(BaseModel):
    source: str
    total_words: int = Field(ge=0)
    sentence_count: int = Field(ge=0)
    top_words: list[WordCount] = Field(default_factory=list)
    last_sentence: str | None = None

    @property
    def top_word(self) -> str | None:
        if not self.top_words:
            return None
        return self.top_words[0].word
