# chancellor/assets/importers/hdr.py
import cv2
import numpy as np

from chancellor.assets.backend import NativeBackend
from chancellor.assets.errors import AssetDecodeError
from chancellor.assets.importers.base import AssetImporter
from chancellor.assets.types import ImageResource


class HdrImporter(AssetImporter):
    """
    Radiance .hdr images, which Pillow cannot read.
    Uploaded as 3-component float textures so values above 1.0 survive.
    """

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
        try:
            pixels = cv2.imdecode(
                np.frombuffer(data, dtype=np.uint8),
                cv2.IMREAD_ANYDEPTH | cv2.IMREAD_COLOR,
            )
        except cv2.error as e:
            raise AssetDecodeError(path, str(e)) from e
        if pixels is None:
            raise AssetDecodeError(path, "not a Radiance HDR image")

        # OpenCV hands back BGR
        rgb = cv2.cvtColor(pixels, cv2.COLOR_BGR2RGB).astype(np.float32)
        if self.flip:
            rgb = np.flipud(rgb)

        height, width = rgb.shape[:2]
        texture = self.backend.create_texture(
            width,
            height,
            3,
            np.ascontiguousarray(rgb).tobytes(),
            build_mipmaps=self.build_mipmaps,
            dtype="f4",
        )
        return ImageResource(path=path, width=width, height=height, texture=texture)
