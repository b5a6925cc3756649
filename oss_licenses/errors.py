class ResolutionError(Exception):
    """Raised when a scope's artifacts or their POM files cannot be resolved."""


class MalformedSnapshotError(ValueError):
    """Raised when a persisted snapshot file cannot be parsed."""


class StorageWriteError(Exception):
    """Raised when the snapshot file or its directory cannot be written."""
