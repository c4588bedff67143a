"""
Application-layer errors raised by infrastructure collaborators.

Use cases let these propagate; the request handler converts them into a
ServerError response.
"""


class ApplicationError(Exception):
    """Base class for failures of an infrastructure collaborator."""

    pass


class HashingError(ApplicationError):
    """The hashing primitive failed to produce a digest."""

    pass


class PersistenceError(ApplicationError):
    """The store could not persist a record (connectivity or constraint)."""

    pass
