from abc import ABC, abstractmethod
from typing import Any, List


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class InvalidArgumentError(ValueError):
    """Raised when an argument is outside what an operation accepts."""
    def __init__(self, argument: str, value: Any, reason: str):
        super().__init__(f"Invalid {argument} {value!r}: {reason}")
        self.argument = argument
        self.value = value
        self.reason = reason

class NullOrEmptyError(InvalidArgumentError):
    """Raised when a required argument is missing or empty."""
    def __init__(self, argument: str, value: Any = None):
        super().__init__(argument, value, "a non-empty value is required")

class BaseTokenizer(ABC):
    """Abstract base class for text tokenization"""

    @abstractmethod
    def tokenize(self, text: str) -> List[Any]:
        """Tokenize text into individual tokens"""
        pass
