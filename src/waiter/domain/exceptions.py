"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class MalformedAmount(ValidationError):
    """Text could not be read as a money amount.

    ``offset`` is the position in ``text`` where parsing gave up. The
    codec does not track positions, so it is always 0.
    """

    def __init__(self, text: str, offset: int = 0) -> None:
        super().__init__(f"Unparseable money amount: {text!r}")
        self.text = text
        self.offset = offset
