# mcqgen/core/errors.py
from typing import Optional

from mcqgen.models import format_count


GENERIC_FAILURE_MESSAGE = "Failed to generate MCQs. Please try again later."


class GenerationError(Exception):
    """
    Base for every failure after the request passed validation.
    `public_message` is what the caller sees; str(exc) and __cause__ are for logs only.
    """
    kind = "generation"

    def __init__(self, message: str, public_message: Optional[str] = None):
        super().__init__(message)
        self.public_message = public_message or GENERIC_FAILURE_MESSAGE


class UpstreamError(GenerationError):
    """The chat model call raised or timed out."""
    kind = "upstream"


class ParseError(GenerationError):
    """The model replied, but not with JSON of the expected shape."""
    kind = "parse"


class CountShortfallError(ParseError):
    kind = "shortfall"

    def __init__(self, generated: int, requested):
        message = (
            f"Only {generated} questions were generated instead of {format_count(requested)}. "
            "Try refining your input or increasing the MCQs value."
        )
        super().__init__(message, public_message=message)
        self.generated = generated
        self.requested = requested


class PersistenceError(GenerationError):
    """Writing the result file failed."""
    kind = "persistence"
