# chancellor/assets/decoder.py
import logging
from pathlib import Path, PurePosixPath
from typing import Dict, Optional

from chancellor.assets.backend import NativeBackend
from chancellor.assets.importers import (
    AssetImporter,
    AudioImporter,
    HdrImporter,
    ImageImporter,
    JsonImporter,
    ShaderImporter,
    TextImporter,
    XmlImporter,
)
from chancellor.assets.settings import AssetSettings
from chancellor.assets.types import RawFile, Resource

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "bmp", "tga", "gif", "dds")
AUDIO_EXTENSIONS = ("wav", "mp3", "ogg")
SHADER_EXTENSIONS = ("glsl", "vert", "frag")


def extension_of(path: str) -> str:
    """Lower-cased text after the last "." of the file name, or ""."""
    name = PurePosixPath(path).name
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1].lower()


class FormatDecoder:
    """
    Dispatches files to importers by extension.

    A failing importer never aborts a batch: the file degrades to RawFile
    and a warning is logged.
    """

    def __init__(
        self, backend: NativeBackend, settings: Optional[AssetSettings] = None
    ):
        settings = settings or AssetSettings()

        image = ImageImporter(
            backend, flip=settings.flip_images, build_mipmaps=settings.build_mipmaps
        )
        hdr = HdrImporter(
            backend, flip=settings.flip_images, build_mipmaps=settings.build_mipmaps
        )
        audio = AudioImporter(backend)
        shader = ShaderImporter(backend)

        self._importers: Dict[str, AssetImporter] = {
            "json": JsonImporter(),
            "txt": TextImporter(),
            "xml": XmlImporter(),
        }
        self._importers.update({ext: image for ext in IMAGE_EXTENSIONS})
        self._importers["hdr"] = hdr
        self._importers.update({ext: audio for ext in AUDIO_EXTENSIONS})
        self._importers.update({ext: shader for ext in SHADER_EXTENSIONS})

    def register(self, extension: str, importer: AssetImporter) -> None:
        """Add or replace the importer for an extension (without the dot)."""
        self._importers[extension.lstrip(".").lower()] = importer

    def importer_for(self, path: str) -> Optional[AssetImporter]:
        return self._importers.get(extension_of(path))

    def decode(self, path: str, data: bytes, location: Path) -> Resource:
        importer = self.importer_for(path)
        if importer is None:
            return RawFile(path=path, location=location)

        try:
            return importer.decode(path, data)
        except Exception as e:
            logger.warning("Could not convert %s, keeping raw file: %s", path, e)
            return RawFile(path=path, location=location)
