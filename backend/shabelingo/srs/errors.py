"""Error kinds raised by the scheduling engine."""


class InvalidArgumentError(ValueError):
    """Raised when a scheduling input is outside its documented range."""

    pass


class RetrievalFailedError(Exception):
    """Raised when review items could not be fetched from the store.

    Covers store errors, timeouts and cancellation. Callers get either the
    full selection or this error, never a partial batch.
    """

    pass
