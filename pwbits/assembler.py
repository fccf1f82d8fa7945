# assembler
# (compose password up to target entropy)
#

import logging
import math
from collections import deque
from typing import NamedTuple

from .entropy import EntropyValue, Generator
from .errors import ConfigurationError
from .catalog import default_catalog

log = logging.getLogger(__name__)


class Password(NamedTuple):
    text: str
    bits: float
    length: int


class Literal(NamedTuple):

    """Rotation slot with fixed text, zero entropy."""

    text: str

    def produce(self) -> EntropyValue:
        return EntropyValue(self.text)

    def entropy(self) -> float:
        return 0.0


class Generated(NamedTuple):

    """Rotation slot drawing a fresh fragment from `generator`."""

    generator: Generator

    def produce(self) -> EntropyValue:
        return self.generator.generate()

    def entropy(self) -> float:
        return self.generator.entropy()


def make_slot(part):
    """Wrap generator or literal string `part` as a rotation slot."""
    if isinstance(part, Generator):
        return Generated(part)
    if isinstance(part, str):
        return Literal(part)
    raise ConfigurationError(f"Expected generator or string, got {part!r}")


def check_bits(bits) -> float:
    try:
        bits = float(bits)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Target bits must be a number, got {bits!r}") from None
    if not math.isfinite(bits) or bits <= 0:
        raise ConfigurationError(f"Target bits must be positive, got {bits!r}")
    return bits


class PasswordAssembler:

    """Appends fragments from a scheme until target entropy is reached.

    Slots `generator` and `separator` take turns, starting with
    the generator, so the password never starts or ends with a separator.

    Use once: construct, call `assemble()` or `password()`, throw away.

    """

    def __init__(self, scheme, bits):
        self._scheme = scheme
        self._bits = check_bits(bits)
        self._rotation = deque([make_slot(scheme.generator), make_slot(scheme.separator)])
        if not any(slot.entropy() > 0 for slot in self._rotation):
            raise ConfigurationError(
                f"Scheme {scheme.name!r} has no entropy, cannot reach {self._bits:g} bits")

    @property
    def bits(self) -> float:
        return self._bits

    def assemble(self) -> EntropyValue:
        value = EntropyValue()
        fragments = 0
        while value.bits < self._bits:
            # rotate: the front slot becomes active and moves to the back
            self._rotation.rotate(-1)
            slot = self._rotation[-1]
            value += slot.produce()
            fragments += 1
        log.debug("Scheme %r: %d fragments, %.2f bits (target %g)",
                  self._scheme.name, fragments, value.bits, self._bits)
        return value

    def password(self) -> Password:
        value = self.assemble()
        return Password(value.text, value.bits, len(value.text))

    @classmethod
    def run(cls, scheme_name: str, target_bits, catalog=None) -> Password:
        """Generate a password of scheme `scheme_name` with at least `target_bits`.

        :param catalog: GeneratorCatalog to look up the scheme. Default is
                        the process-wide catalog.
        :returns: Password(text, bits, length)
        :raises ConfigurationError: Unknown scheme or invalid `target_bits`.

        """
        target_bits = check_bits(target_bits)
        if catalog is None:
            catalog = default_catalog()
        scheme = catalog.get(scheme_name)
        return cls(scheme, target_bits).password()
