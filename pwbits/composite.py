# composite
# (generators built from other generators)
#

from .entropy import EntropyValue, Generator
from .pickers import CasePicker


class AppendGenerator(Generator):

    """Appends output of other generators together.

    The `separator` (a string, or a generator itself) is inserted
    between non-empty pieces only. It's not counted in `entropy()`,
    though the bits of a generated separator are carried
    in the generated value.

    """

    def __init__(self, generators, separator=''):
        self._generators = list(generators)
        self._separator = separator

    def _separate(self):
        if isinstance(self._separator, Generator):
            return self._separator.generate()
        return EntropyValue(self._separator)

    def generate(self) -> EntropyValue:
        value = EntropyValue()
        for gen in self._generators:
            piece = gen.generate()
            if value.text and piece.text:
                value += self._separate()
            value += piece
        return value

    def entropy(self) -> float:
        return sum((gen.entropy() for gen in self._generators), 0.0)


class CapitalizeGenerator(Generator):

    """Randomizes case of the first and last character of inner output.

    A one-character piece gets its only character randomized.
    Pieces without cased characters are passed through unchanged,
    as are characters whose other case has a different length.

    The bits count every case draw, which overstates the strength when
    the inner word list has words differing only in case. The catalog
    wraps a case-folded word list for this reason.

    The case bits are a bonus: `entropy()` reports only the inner
    generator's entropy, while `generate()` carries the real sum.

    """

    def __init__(self, generator, rng=None):
        self._generator = generator
        self._rng = rng

    def _pick_case(self, char: str) -> EntropyValue:
        if len(char.lower()) != 1 or len(char.upper()) != 1:
            # e.g. German sharp s, upper case would change the length
            return EntropyValue(char)
        return CasePicker(char, rng=self._rng).generate()

    def generate(self) -> EntropyValue:
        piece = self._generator.generate()
        text = piece.text
        if text.lower() == text.upper():
            return piece
        if len(text) == 1:
            return EntropyValue('', piece.bits) + self._pick_case(text)
        first = self._pick_case(text[0])
        last = self._pick_case(text[-1])
        return EntropyValue('', piece.bits) + first + text[1:-1] + last

    def entropy(self) -> float:
        return self._generator.entropy()
