"""Exception types raised by the generation core."""


class GeneratorError(Exception):
    """Base class for all generation-core errors."""


class NotFoundError(GeneratorError):
    """A named reference (race, class, subclass, template, token) is absent."""


class InvalidInputError(GeneratorError, ValueError):
    """An option is malformed or out of range."""


class GenerationFailedError(GeneratorError):
    """The algorithm could not satisfy its invariants within its budget."""


class DepthExceededError(GeneratorError):
    """Template recursion hit its depth cap.

    Expansion itself never raises this; it is only raised by
    ``engine.templates.raise_for_partial`` for callers that want strictness.
    """
