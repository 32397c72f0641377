"""Exception types shared across layers.

Handlers only translate ``UpstreamTransportError`` into an HTTP 500 with an
``{"error": ...}`` body. ``UpstreamShapeError`` never leaves the service
layer; it is recovered into a fallback string.
"""


class MoodJournalError(Exception):
    """Base class for all service errors."""


class UpstreamTransportError(MoodJournalError):
    """The external AI API could not be reached or answered with an error.

    Covers network failures, non-2xx statuses and bodies that are not JSON.
    """


class UpstreamShapeError(MoodJournalError):
    """The external AI API answered, but not in the expected JSON shape."""


class StoreError(MoodJournalError):
    """A repository failed to read or write."""


class NoEntriesError(MoodJournalError):
    """The client has no stored entries to work from."""
