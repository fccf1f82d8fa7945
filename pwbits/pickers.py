# pickers
# (uniform choice from a candidate set)
#

import logging
import string
from threading import Lock

from .entropy import EntropyValue, Generator, bits_entropy
from .errors import EmptyCandidateSetError
from .secrand import get_random
from .wordlist import load_wordlist

log = logging.getLogger(__name__)

SHIFT_SYMBOLS = '!@#$%^&*()'


def char_range(first: str, last: str) -> str:
    """Characters from `first` to `last`, inclusive."""
    return ''.join(chr(c) for c in range(ord(first), ord(last) + 1))


PRINTABLE = char_range(' ', '~')


def unique(items) -> tuple:
    """Drop duplicates from `items`, keeping the first occurrence."""
    return tuple(dict.fromkeys(items))


class Picker(Generator):

    """Picks one element of a candidate set, uniformly at random.

    Subclasses provide `_build_candidates`. The candidate set is built
    on first use and cached as an immutable tuple.

    """

    def __init__(self, rng=None):
        self._rng = rng
        self._candidates = None
        self._lock = Lock()

    def _build_candidates(self):
        raise NotImplementedError

    def candidate_set(self) -> tuple:
        if self._candidates is None:
            with self._lock:
                if self._candidates is None:
                    candidates = tuple(self._build_candidates())
                    if not candidates:
                        raise EmptyCandidateSetError(
                            f"{self.__class__.__name__} has nothing to pick from")
                    self._candidates = candidates
        return self._candidates

    @property
    def rng(self):
        return self._rng or get_random()

    def entropy(self) -> float:
        return bits_entropy(len(self.candidate_set()))

    def generate(self) -> EntropyValue:
        candidates = self.candidate_set()
        return EntropyValue(self.rng.choice(candidates), self.entropy())


class WordListPicker(Picker):

    """Picks a random word from a word list.

    :param words: Iterable of words, or a callable returning one.
                  It's called only once, when the words are first needed.
                  Default is the word list from `pwbits.wordlist`.
    :param fold_case: Keep only the first of words differing just in case.

    """

    def __init__(self, words=None, fold_case=False, rng=None):
        Picker.__init__(self, rng)
        self._words = words
        self._fold_case = fold_case

    def _build_candidates(self):
        words = self._words
        if words is None:
            words = load_wordlist
        if callable(words):
            words = words()
        words = unique(w.strip() for w in words)
        words = tuple(w for w in words if w)
        if self._fold_case:
            folded = {}
            for w in words:
                folded.setdefault(w.casefold(), w)
            words = tuple(folded.values())
        log.debug("Picking from %d words", len(words))
        return words

    words = Picker.candidate_set


class CharPicker(Picker):

    """Picks a random character.

    :param ranges: Character ranges to pick from (strings or iterables
                   of characters). Default is printable ASCII incl. space.
    :param exclusions: Character ranges removed from the candidates.

    """

    def __init__(self, ranges=None, exclusions=None, rng=None):
        Picker.__init__(self, rng)
        if isinstance(ranges, str):
            ranges = [ranges]
        self._ranges = list(ranges) if ranges is not None else [PRINTABLE]
        self._exclusions = list(exclusions or ())

    def _build_candidates(self):
        chars = unique(c for r in self._ranges for c in r)
        excluded = set(c for r in self._exclusions for c in r)
        return tuple(c for c in chars if c not in excluded)

    characters = Picker.candidate_set

    @classmethod
    def upper(cls, rng=None):
        return cls([string.ascii_uppercase], rng=rng)

    @classmethod
    def lower(cls, rng=None):
        return cls([string.ascii_lowercase], rng=rng)

    @classmethod
    def number(cls, rng=None):
        return cls([string.digits], rng=rng)

    @classmethod
    def shiftnumber(cls, rng=None):
        """Digits and the symbols sharing their keys (with Shift)."""
        return cls([string.digits, SHIFT_SYMBOLS], rng=rng)

    @classmethod
    def symbol(cls, rng=None):
        """Printable ASCII symbols, no letters, digits or space."""
        return cls([char_range('!', '~')],
                   [string.digits, string.ascii_uppercase, string.ascii_lowercase],
                   rng=rng)

    @classmethod
    def printable(cls, rng=None):
        return cls([PRINTABLE], rng=rng)


class CasePicker(Picker):

    """Picks lowercase or uppercase variant of `text`.

    Collapses to a single candidate when `text` has no case.

    """

    def __init__(self, text: str, rng=None):
        Picker.__init__(self, rng)
        self._text = text

    def _build_candidates(self):
        return unique((self._text.lower(), self._text.upper()))
