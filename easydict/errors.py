"""
Error types shared by the provider adapters, the lookup pipeline and the stores.

The analyzers never raise; these exceptions only cross the I/O boundary.
Each `DictionaryError` carries an `ErrorKind` so the presentation layer can
pick a message without inspecting the concrete class.
"""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of dictionary failures."""
    NOT_FOUND = "not_found"  # Query absent from provider
    NETWORK = "network"  # Transport/connectivity failure or bad status
    DECODING = "decoding"  # Malformed response payload
    INVALID = "invalid"  # Malformed input, e.g. empty query


USER_MESSAGES = {
    ErrorKind.NOT_FOUND: "Word not found. Try a different spelling or search for a phrase.",
    ErrorKind.NETWORK: "Network error. Please check your connection and try again.",
    ErrorKind.DECODING: "Unable to process the response. Please try again.",
    ErrorKind.INVALID: "Please enter a word or phrase to look up.",
}


class DictionaryError(Exception):
    """Base exception for dictionary lookups."""

    kind: ErrorKind = ErrorKind.NETWORK

    def __init__(self, message: str, kind: ErrorKind = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    def user_message(self) -> str:
        """Human-readable message for this error kind."""
        return USER_MESSAGES.get(self.kind, self.message or "An unexpected error occurred. Please try again.")


class WordNotFoundError(DictionaryError):
    kind = ErrorKind.NOT_FOUND


class NetworkError(DictionaryError):
    kind = ErrorKind.NETWORK


class DecodingError(DictionaryError):
    kind = ErrorKind.DECODING


class InvalidQueryError(DictionaryError):
    kind = ErrorKind.INVALID


class StorageError(Exception):
    """Raised when a client store cannot be written."""
    pass
