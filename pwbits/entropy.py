# entropy
# (text fragments with tracked entropy)
#

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


def bits_entropy(number: int) -> float:
    """Entropy in bits of a uniform choice among `number` outcomes."""
    return math.log2(number)


@dataclass(frozen=True)
class EntropyValue:

    """Generated `text` together with the `bits` of entropy used to get it.

    Adding two values concatenates the texts and sums the bits.
    A plain string can be added too, it carries no entropy.

    """

    text: str = ''
    bits: float = 0.0

    def __add__(self, other):
        if isinstance(other, EntropyValue):
            return EntropyValue(self.text + other.text, self.bits + other.bits)
        if isinstance(other, str):
            return EntropyValue(self.text + other, self.bits)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, str):
            return EntropyValue(other + self.text, self.bits)
        return NotImplemented

    def __str__(self):
        return self.text

    def __len__(self):
        return len(self.text)


def concat(a: EntropyValue, b: EntropyValue) -> EntropyValue:
    return a + b


class Generator(ABC):

    """Produces pieces of a password and knows how much entropy they carry."""

    @abstractmethod
    def generate(self) -> EntropyValue:
        """Produce one random fragment."""

    @abstractmethod
    def entropy(self) -> float:
        """Bits of entropy yielded by one `generate()` call.

        Must not consume randomness or depend on previous outcomes.

        """
