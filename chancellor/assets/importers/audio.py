# chancellor/assets/importers/audio.py
from chancellor.assets.backend import NativeBackend
from chancellor.assets.errors import AssetDecodeError
from chancellor.assets.importers.base import AssetImporter
from chancellor.assets.types import AudioResource


class AudioImporter(AssetImporter):
    def __init__(self, backend: NativeBackend):
        self.backend = backend

    def decode(self, path: str, data: bytes) -> AudioResource:
        if not data:
            raise AssetDecodeError(path, "empty audio file")
        return AudioResource(path=path, sound=self.backend.create_sound(data))
