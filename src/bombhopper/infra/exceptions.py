class LevelEncodeError(Exception):
    """Raised when a level cannot be turned into its JSON document."""


class LevelSaveError(Exception):
    """Raised when an encoded level cannot be written to disk."""
