# catalog
# (named password schemes)
#

import logging
import string
from threading import Lock
from typing import NamedTuple, Union

from .entropy import Generator
from .errors import ConfigurationError
from .pickers import CharPicker, WordListPicker, PRINTABLE
from .composite import CapitalizeGenerator

log = logging.getLogger(__name__)

SCHEME_NAMES = (
    'words',
    'words_numbers',
    'words_shiftnumbers',
    'words_symbols',
    'words_cases',
    'words_cases_numbers',
    'words_cases_shiftnumbers',
    'ascii',
    'ascii_lower',
    'lower_number',
)


class Scheme(NamedTuple):
    name: str
    generator: Generator
    separator: Union[str, Generator]


class GeneratorCatalog:

    """Read-only mapping of scheme name to `Scheme`.

    Schemes are built on first lookup. All word schemes share
    one `WordListPicker`, so the word list is loaded only once.

    :param words: Word list (or callable returning it) for word schemes.
                  Default is `pwbits.wordlist.load_wordlist`.
    :param rng: Secure random source passed to all pickers.

    """

    def __init__(self, words=None, rng=None):
        self._words = words
        self._rng = rng
        self._schemes = None
        self._lock = Lock()

    def _build(self) -> dict:
        rng = self._rng
        words = WordListPicker(self._words, rng=rng)
        # case variants of one word would repeat outputs of CapitalizeGenerator
        cased_words = CapitalizeGenerator(
            WordListPicker(words.words, fold_case=True, rng=rng), rng=rng)
        schemes = [
            Scheme('words', words, ' '),
            Scheme('words_numbers', words, CharPicker.number(rng)),
            Scheme('words_shiftnumbers', words, CharPicker.shiftnumber(rng)),
            Scheme('words_symbols', words, CharPicker.symbol(rng)),
            Scheme('words_cases', cased_words, ' '),
            Scheme('words_cases_numbers', cased_words, CharPicker.number(rng)),
            Scheme('words_cases_shiftnumbers', cased_words, CharPicker.shiftnumber(rng)),
            Scheme('ascii', CharPicker.printable(rng), ''),
            Scheme('ascii_lower', CharPicker([PRINTABLE], [string.ascii_uppercase], rng=rng), ''),
            Scheme('lower_number', CharPicker([string.ascii_lowercase, string.digits], rng=rng), ''),
        ]
        log.debug("Built %d schemes", len(schemes))
        return {scheme.name: scheme for scheme in schemes}

    @property
    def schemes(self) -> dict:
        if self._schemes is None:
            with self._lock:
                if self._schemes is None:
                    self._schemes = self._build()
        return self._schemes

    def names(self) -> tuple:
        return tuple(self.schemes)

    def get(self, name: str) -> Scheme:
        """Return scheme `name`, raise ConfigurationError if unknown."""
        try:
            return self.schemes[name]
        except KeyError:
            raise ConfigurationError(
                f"Unknown scheme {name!r}, choose one of: {', '.join(self.names())}") from None

    __getitem__ = get

    def __contains__(self, name):
        return name in self.schemes

    def __iter__(self):
        return iter(self.schemes)

    def __len__(self):
        return len(self.schemes)


_default_catalog = None
_default_catalog_lock = Lock()


def default_catalog() -> GeneratorCatalog:
    """Process-wide catalog using the default word list."""
    global _default_catalog
    if _default_catalog is None:
        with _default_catalog_lock:
            if _default_catalog is None:
                _default_catalog = GeneratorCatalog()
    return _default_catalog
