"""Domain errors shared between services and adapters."""


class PersistenceError(Exception):
    """Raised by repositories when the database rejects or cannot run a write or read.

    Services catch this and degrade instead of failing the request.
    """
