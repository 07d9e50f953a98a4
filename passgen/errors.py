"""
passgen.errors
Exceptions raised by the generator core.
"""


class PassGenError(Exception):
    """Base class for every error the core reports to its caller."""


class InvalidConfigurationError(PassGenError, ValueError):
    """No character source selected, a non-positive length, or a length
    too small for the requested per-group characters."""


class EmptyPoolError(PassGenError, ValueError):
    """The exclusion set removed every candidate character."""

    def __init__(self, excluded: str = ""):
        self.excluded = excluded
        super().__init__("No candidate characters remain after exclusion")
