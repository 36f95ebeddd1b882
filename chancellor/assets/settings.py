# chancellor/assets/settings.py
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class AssetSettings:
    """
    Configuration for AssetStore.load_assets.
    """

    root: Path = field(default_factory=lambda: Path("assets"))
    skip_hidden: bool = False  # ignore dot-files and dot-directories
    flip_images: bool = False  # flip rows so (0, 0) is bottom-left, as GL expects
    build_mipmaps: bool = True
