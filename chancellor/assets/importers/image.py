# chancellor/assets/importers/image.py
import io

from PIL import Image

from chancellor.assets.backend import NativeBackend
from chancellor.assets.importers.base import AssetImporter
from chancellor.assets.types import ImageResource


class ImageImporter(AssetImporter):
    def __init__(
        self,
        backend: NativeBackend,
        flip: bool = False,
        build_mipmaps: bool = True,
    ):
        self.backend = backend
        self.flip = flip
        self.build_mipmaps = build_mipmaps

    def decode(self, path: str, data: bytes) -> ImageResource:
        with Image.open(io.BytesIO(data)) as img:
            converted = img.convert("RGBA")

            if self.flip:
                converted = converted.transpose(Image.Transpose.FLIP_TOP_BOTTOM)

            width, height = converted.size
            pixels = converted.tobytes()

        texture = self.backend.create_texture(
            width, height, 4, pixels, build_mipmaps=self.build_mipmaps
        )
        return ImageResource(path=path, width=width, height=height, texture=texture)
