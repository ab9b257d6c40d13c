import pytest

from wordcount.errors import PassageUnreadableError, WordCountError
from wordcount.services.reader import open_passage, read_lines


def test_lines_are_trimmed(tmp_path) -> None:
    passage = tmp_path / "passage.txt"
    passage.write_text("  The cat sat.  \n\tThe cat ran.\n", encoding="utf-8")

    assert list(read_lines(passage)) == ["The cat sat.", "The cat ran."]


def test_empty_file_has_no_lines(tmp_path) -> None:
    passage = tmp_path / "passage.txt"
    passage.write_text("", encoding="utf-8")

    assert list(read_lines(passage)) == []


def test_missing_file_raises_before_reading(tmp_path) -> None:
    missing = tmp_path / "passage.txt"

    with pytest.raises(PassageUnreadableError) as excinfo:
        with open_passage(missing):
            pytest.fail("block should not run")

    assert excinfo.value.source == str(missing)
    assert str(excinfo.value) == f"Could not read file: {missing}"
    assert isinstance(excinfo.value, WordCountError)


def test_directory_is_unreadable(tmp_path) -> None:
    with pytest.raises(PassageUnreadableError):
        with open_passage(tmp_path):
            pass


def test_handle_is_closed_after_error_during_consumption(tmp_path, monkeypatch) -> None:
    passage = tmp_path / "passage.txt"
    passage.write_text("one\ntwo\n", encoding="utf-8")
    opened = []

    def tracking_open(*args, **kwargs):
        handle = open(*args, **kwargs)
        opened.append(handle)
        return handle

    monkeypatch.setattr("wordcount.services.reader.open", tracking_open, raising=False)

    with pytest.raises(RuntimeError):
        with open_passage(passage) as lines:
            assert next(lines) == "one"
            raise RuntimeError("boom")

    assert len(opened) == 1
    assert opened[0].closed


def test_malformed_bytes_are_replaced(tmp_path) -> None:
    passage = tmp_path / "passage.txt"
    passage.write_bytes(b"caf\xe9 au lait\n")

    assert list(read_lines(passage, encoding="utf-8")) == ["caf\ufffd au lait"]
