class TrackerError(Exception):
    """Base error for tracker operations that should be reported, not raised."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StorageError(TrackerError):
    """A save file exists but does not hold a valid tournament."""
