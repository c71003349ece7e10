"""Domain exceptions."""

from typing import Dict, Optional


class InvalidInputError(ValueError):
    """
    Raised when calculator input falls outside its valid domain.

    Carries a field -> message map so the API layer can report
    every offending field at once.
    """

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = errors
        if message is None:
            message = "; ".join(f"{field}: {msg}" for field, msg in errors.items())
        super().__init__(message)
