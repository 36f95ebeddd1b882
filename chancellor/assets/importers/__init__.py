# chancellor/assets/importers/__init__.py
from chancellor.assets.importers.audio import AudioImporter
from chancellor.assets.importers.base import AssetImporter
from chancellor.assets.importers.hdr import HdrImporter
from chancellor.assets.importers.image import ImageImporter
from chancellor.assets.importers.shader import ShaderImporter
from chancellor.assets.importers.structured import JsonImporter, XmlImporter
from chancellor.assets.importers.text import TextImporter

__all__ = [
    "AssetImporter",
    "AudioImporter",
    "HdrImporter",
    "ImageImporter",
    "JsonImporter",
    "ShaderImporter",
    "TextImporter",
    "XmlImporter",
]
