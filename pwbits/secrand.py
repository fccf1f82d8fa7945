# secrand
# (secure uniform random integers)
#

from . import backend
from .errors import RandomnessUnavailable


class SecureRandom:

    """Uniform random integers drawn from the secure `randombytes` backend.

    Holds no state between draws, so one instance can be shared freely.

    """

    def __init__(self, randombytes=None):
        #: Override the byte source (tests). Default is the backend one.
        self._randombytes = randombytes

    def _bytes(self, size: int) -> bytes:
        try:
            randombytes = self._randombytes or backend.randombytes
            data = randombytes(size)
        except (OSError, NotImplementedError, backend.MissingError) as e:
            raise RandomnessUnavailable(f"Secure random source failed: {e}") from e
        if len(data) != size:
            raise RandomnessUnavailable(
                f"Secure random source returned {len(data)} bytes, expected {size}")
        return data

    def next_index(self, n: int) -> int:
        """Return random integer in range [0, n).

        Uses rejection sampling on the smallest power-of-two range
        covering `n`, so there is no modulo bias.

        """
        if n < 1:
            raise ValueError(f"next_index() requires positive n, got {n!r}")
        if n == 1:
            return 0
        nbits = (n - 1).bit_length()
        nbytes = (nbits + 7) // 8
        mask = (1 << nbits) - 1
        while True:
            value = int.from_bytes(self._bytes(nbytes), 'big') & mask
            if value < n:
                return value

    def choice(self, seq):
        """Return uniformly chosen element of non-empty sequence `seq`."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.next_index(len(seq))]


_default_random = SecureRandom()


def get_random() -> SecureRandom:
    """Get the process-wide secure random source."""
    return _default_random
