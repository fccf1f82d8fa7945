# errors
# (exceptions raised by password generation)
#


class ConfigurationError(ValueError):

    """Invalid generator setup: unknown scheme, bad target bits etc.

    Never retried, the caller has to fix its input.

    """


class EmptyCandidateSetError(ConfigurationError):

    """Candidate set of a picker turned out empty (e.g. everything excluded)."""


class RandomnessUnavailable(RuntimeError):

    """Secure random source failed. This is fatal, there is no fallback."""
