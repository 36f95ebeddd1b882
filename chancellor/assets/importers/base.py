# chancellor/assets/importers/base.py
from abc import ABC, abstractmethod

from chancellor.assets.types import Resource


class AssetImporter(ABC):
    @abstractmethod
    def decode(self, path: str, data: bytes) -> Resource:
        """
        Turn raw file bytes into a typed resource.
        Raise on malformed input; the decoder degrades the entry to RawFile.
        """
        pass
