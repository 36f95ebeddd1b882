# chancellor/assets/errors.py
from pathlib import Path


class AssetError(Exception):
    """Base class for every error raised by the asset subsystem."""


class AssetRootNotFoundError(AssetError, FileNotFoundError):
    """
    The load root is missing or is not a directory.
    Aborts the whole load; the store keeps its previous mapping.
    """

    def __init__(self, root: Path | str | None) -> None:
        super().__init__(f"Asset root does not exist or is not a directory: {root}")
        self.root = root


class AssetDecodeError(AssetError):
    """A single file could not be decoded. Never escapes the decoder."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not decode {path}: {reason}")
        self.path = path
        self.reason = reason


class AssetTypeMismatchError(AssetError, TypeError):
    def __init__(self, path: str, expected: str, actual: str) -> None:
        super().__init__(f"Asset {path} is {actual}, not {expected}")
        self.path = path
        self.expected = expected
        self.actual = actual


class AssetThreadError(AssetError, RuntimeError):
    """The store was touched from a thread other than its owner."""
