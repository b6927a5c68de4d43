"""The word alphabet: the ordered digit set shared by every Codec.

The list is loaded once at import and never changes afterwards. The reverse
index (word -> position) is only needed for decoding, so it is built lazily on
first use and then shared for the life of the process.
"""
import logging
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from wordcodes.core.config import settings
from wordcodes.core.errors import AlphabetError

logger = logging.getLogger(__name__)

PACKAGED_WORDLIST = Path(__file__).resolve().parent.parent / "data" / "wordlist.txt"


def normalize_word(word: str) -> str:
    """Normalize a word to the form stored in the alphabet."""
    return word.strip().lower()


def parse_wordlist(lines) -> Tuple[str, ...]:
    words = []
    seen = set()
    for line in lines:
        word = normalize_word(line)
        if not word or word.startswith("#"):
            continue
        if word in seen:
            raise AlphabetError(f"Duplicate word in wordlist: {word!r}")
        seen.add(word)
        words.append(word)

    if len(words) < 2:
        raise AlphabetError(f"A wordlist needs at least 2 words, got {len(words)}")
    return tuple(words)


def load_wordlist(path: Optional[Union[str, Path]] = None) -> Tuple[str, ...]:
    """
    Load an alphabet from a newline-separated file.

    Args:
        path: Wordlist file. The packaged list is used when omitted.

    Returns:
        Tuple of distinct, normalized words in file order

    Raises:
        AlphabetError: If the list has fewer than 2 words or repeats a word
    """
    path = Path(path) if path else PACKAGED_WORDLIST
    words = parse_wordlist(path.read_text(encoding="utf-8").splitlines())
    logger.info("Loaded %d words from %s", len(words), path)
    return words


WORDS = load_wordlist(settings.WORDLIST_PATH)
LIST_SIZE = len(WORDS)

_reverse_index: Optional[Mapping[str, int]] = None
_reverse_lock = threading.Lock()


def word_at(position: int) -> str:
    return WORDS[position]


def _build_reverse_index(words: Tuple[str, ...]) -> Mapping[str, int]:
    index = {word: position for position, word in enumerate(words)}
    logger.info("Reverse index built for %d words", len(index))
    return MappingProxyType(index)


def get_reverse_index() -> Mapping[str, int]:
    """Return the shared word -> position map, building it on first call."""
    global _reverse_index
    index = _reverse_index
    if index is None:
        with _reverse_lock:
            if _reverse_index is None:
                _reverse_index = _build_reverse_index(WORDS)
            index = _reverse_index
    return index
