"""
Exceptions shared across layers
"""


class NotationError(Exception):
    """Base class for everything the notation codec raises."""


class UnknownLetterError(NotationError):
    """Piece letter is found in neither the white nor the black alphabet."""


class AmbiguousLetterError(NotationError):
    """Piece letter is found in both alphabets (a broken mapping, not a broken input)."""


class InvalidMappingError(NotationError, ValueError):
    """Alphabet mapping rejected at construction time."""


class UnknownVariantError(NotationError, KeyError):
    """No variant registered under the requested name."""


class InvalidRequestError(Exception):
    """Request could not be validated at the API boundary."""


class RepositoryError(Exception):
    """Requested record could not be found / stored."""
