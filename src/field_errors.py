"""Exceptions raised by the field parameter searches."""


class FieldGenerationError(ValueError):
    """Base class for every failure of a field generation request."""


class InvalidSpec(FieldGenerationError):
    """The requested field shape cannot exist (raised before any search)."""


class SearchExhausted(FieldGenerationError):
    """No prime modulus was found within the candidate range or trial bound."""


class NoRootFound(FieldGenerationError):
    """No root of unity of the requested order was found within the trial bound."""


class NoPolynomialFound(FieldGenerationError):
    """No irreducible polynomial of the searched shape was found within the trial bound."""
