# chancellor/assets/importers/text.py
from chancellor.assets.importers.base import AssetImporter
from chancellor.assets.types import TextResource


def decode_utf8(data: bytes) -> str:
    # utf-8-sig drops a leading BOM if present
    return data.decode("utf-8-sig")


class TextImporter(AssetImporter):
    def decode(self, path: str, data: bytes) -> TextResource:
        return TextResource(path=path, text=decode_utf8(data))
