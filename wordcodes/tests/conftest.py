import pytest

from wordcodes.services import alphabet
from wordcodes.services.codec import Codec


@pytest.fixture
def fixed_codec():
    """Fixed-length codec for [0, 10_000_000]."""
    return Codec.for_range(0, 10_000_000)


@pytest.fixture
def variable_codec():
    """Variable-length codec for any non-negative integer."""
    return Codec.unbounded()


@pytest.fixture
def fresh_reverse_index(monkeypatch):
    """Puts the shared reverse index back into its never-built state."""
    monkeypatch.setattr(alphabet, "_reverse_index", None)
    yield
    # monkeypatch restores the previously built index


@pytest.fixture
def wordlist_file(tmp_path):
    def _write(text: str):
        path = tmp_path / "wordlist.txt"
        path.write_text(text, encoding="utf-8")
        return path
    return _write
