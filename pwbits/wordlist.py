# wordlist
# (word list provider for word schemes)
#

import functools
import logging
from pathlib import Path

from .errors import ConfigurationError

log = logging.getLogger(__name__)

# Prefer system wordlist, fallback to cached web download
# See: https://en.wikipedia.org/wiki/Words_(Unix)
WORDLIST_SYSTEM_PATH = Path('/usr/share/dict/words')
WORDLIST_CACHE_PATH = Path('~/.pwbits/words').expanduser()
WORDLIST_WEB_URL = 'https://users.cs.duke.edu/~ola/ap/linuxwords'


def filter_wordlist(words) -> tuple:
    """Strip words, drop empty ones, duplicates and words containing "'"."""
    words = (w.strip() for w in words)
    return tuple(dict.fromkeys(w for w in words if w and "'" not in w))


def _read_words(path: Path) -> tuple:
    """Read word list file `path`.

    FileNotFoundError propagates, so the caller can try another source.
    A file which exists but can't be read or decoded is a ConfigurationError.

    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except FileNotFoundError:
        raise
    except (OSError, UnicodeError) as e:
        raise ConfigurationError(f"Cannot read word list {str(path)!r}: {e}") from e
    words = filter_wordlist(lines)
    log.debug("Loaded %d words from %s", len(words), path)
    return words


def _download_words() -> tuple:
    import urllib.request
    log.debug("Downloading word list from %s", WORDLIST_WEB_URL)
    try:
        with urllib.request.urlopen(WORDLIST_WEB_URL) as f:
            content = f.read()
        words = content.decode('utf-8').splitlines()
    except (OSError, UnicodeError) as e:
        raise ConfigurationError(f"Cannot download word list {WORDLIST_WEB_URL!r}: {e}") from e
    try:
        WORDLIST_CACHE_PATH.parent.mkdir(0o700, parents=True, exist_ok=True)
        with open(WORDLIST_CACHE_PATH, 'wb') as f:
            f.write(content)
    except OSError as e:
        raise ConfigurationError(f"Cannot write word list cache {str(WORDLIST_CACHE_PATH)!r}: {e}") from e
    return filter_wordlist(words)


@functools.lru_cache(maxsize=None)
def load_wordlist(path=None) -> tuple:
    """Load and return a word list.

    :param path: Read words from this file, one per line.
                 When not given, try system dictionary, then local cache,
                 then download the list from the web and cache it.
    :raises ConfigurationError: The word list can't be read, decoded
                                or downloaded.

    """
    if path is not None:
        path = Path(path).expanduser()
        try:
            return _read_words(path)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Word list {str(path)!r} not found") from e
    # Try system dict/words
    try:
        return _read_words(WORDLIST_SYSTEM_PATH)
    except FileNotFoundError:
        pass
    # Try cached downloaded words
    try:
        return _read_words(WORDLIST_CACHE_PATH)
    except FileNotFoundError:
        pass
    # Try web download
    return _download_words()
