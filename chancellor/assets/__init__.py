# chancellor/assets/__init__.py
from chancellor.assets.backend import (
    ModernGLBackend,
    NativeBackend,
    NullBackend,
    NullHandle,
)
from chancellor.assets.decoder import FormatDecoder, extension_of
from chancellor.assets.errors import (
    AssetDecodeError,
    AssetError,
    AssetRootNotFoundError,
    AssetThreadError,
    AssetTypeMismatchError,
)
from chancellor.assets.settings import AssetSettings
from chancellor.assets.store import AssetStore, get_asset_store, reset_asset_store
from chancellor.assets.types import (
    AudioResource,
    ImageResource,
    JsonResource,
    RawFile,
    Resource,
    ResourceKind,
    ShaderResource,
    TextResource,
    XmlResource,
)
from chancellor.assets.walker import walk_assets

__all__ = [
    "AssetStore",
    "AssetSettings",
    "get_asset_store",
    "reset_asset_store",
    "FormatDecoder",
    "extension_of",
    "walk_assets",
    "NativeBackend",
    "ModernGLBackend",
    "NullBackend",
    "NullHandle",
    "Resource",
    "ResourceKind",
    "ImageResource",
    "AudioResource",
    "ShaderResource",
    "JsonResource",
    "XmlResource",
    "TextResource",
    "RawFile",
    "AssetError",
    "AssetRootNotFoundError",
    "AssetDecodeError",
    "AssetTypeMismatchError",
    "AssetThreadError",
]
