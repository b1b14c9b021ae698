"""fastentity error types."""


class FastEntityError(Exception):
    """Base error for all fastentity failures."""


class FastEntityStateError(FastEntityError):
    """Operation on a store that was never initialised."""


class FastEntityLoadError(FastEntityError):
    """Bulk load failed for every source, or for any source in strict mode."""

    def __init__(self, message: str, failures=None):
        super().__init__(message)
        self.failures = list(failures or [])


class FastEntityVersionError(FastEntityError):
    """Snapshot manifest version mismatch."""


class FastEntityChecksumError(FastEntityError):
    """Snapshot checksum verification failed."""
