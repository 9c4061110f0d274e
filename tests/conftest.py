import pytest

from words import DEFAULT_WORDS, load_words


@pytest.fixture(scope="session")
def bundled_words():
    return load_words(DEFAULT_WORDS)


@pytest.fixture
def word_file(tmp_path):
    """Write WORDS to a newline-terminated word list and return its path."""
    def _write(*words):
        path = tmp_path / "words.txt"
        path.write_text("".join(f"{w}\n" for w in words), encoding="utf-8")
        return path
    return _write
