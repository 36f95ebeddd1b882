# chancellor/assets/store.py
import logging
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from chancellor.assets.backend import NativeBackend
from chancellor.assets.decoder import FormatDecoder
from chancellor.assets.errors import AssetThreadError, AssetTypeMismatchError
from chancellor.assets.settings import AssetSettings
from chancellor.assets.types import ImageResource, RawFile, Resource, ResourceKind
from chancellor.assets.walker import walk_assets

logger = logging.getLogger(__name__)


class AssetStore:
    """
    Loads every file under a root directory up front and caches the decoded
    resources by their "/"-joined path relative to that root.

    The store is the only owner of native handles (textures, sounds,
    programs): callers borrow resources until the next load_assets() or
    dispose(). It belongs to a single thread, the first one that loads or
    disposes through it.
    """

    def __init__(
        self, backend: NativeBackend, settings: Optional[AssetSettings] = None
    ) -> None:
        self.backend = backend
        self.settings = settings or AssetSettings()
        self.decoder = FormatDecoder(backend, self.settings)

        self._assets: Dict[str, Resource] = {}
        self._root: Optional[Path] = None
        self._owner: Optional[int] = None

    # Lifecycle

    def load_assets(self, root: Path | str | None = None) -> None:
        """
        Replace the cache with the contents of root (settings.root if None).

        Raises AssetRootNotFoundError without touching the current cache.
        Individual files that fail to read or decode become RawFile entries.
        """
        self._check_owner()
        if root is None:
            root = self.settings.root

        logger.info("Loading assets from: %s", root)
        files = walk_assets(root, skip_hidden=self.settings.skip_hidden)

        # Release the previous generation before its handles are dropped.
        self.dispose()

        assets: Dict[str, Resource] = {}
        for key, location in files:
            assets[key] = self._load_file(key, location)

        self._assets = assets
        self._root = Path(root)

        logger.info("Loaded %d assets", len(assets))
        for key, resource in assets.items():
            logger.debug("Loaded asset: %s (%s)", key, resource.kind)

    def dispose(self) -> None:
        """Release every native handle exactly once and empty the cache."""
        self._check_owner()
        self._root = None
        if not self._assets:
            return

        assets, self._assets = self._assets, {}

        released = 0
        for key, resource in assets.items():
            if not resource.kind.owns_native_handle:
                continue
            try:
                self.backend.release(resource.native_handle)
                released += 1
            except Exception as e:
                logger.error("Failed to release %s: %s", key, e)

        logger.info("Disposed %d assets (%d native handles)", len(assets), released)

    # Lookup

    def get(self, path: str) -> Optional[Resource]:
        return self._assets.get(path)

    def require(self, path: str, kind: ResourceKind) -> Any:
        """
        Strict typed lookup: the payload at path.
        Raises KeyError if absent, AssetTypeMismatchError if of another kind.
        """
        resource = self._assets.get(path)
        if resource is None:
            raise KeyError(path)
        if resource.kind != kind:
            raise AssetTypeMismatchError(path, kind, resource.kind)
        return resource.payload

    def get_typed(self, path: str, kind: ResourceKind) -> Optional[Any]:
        """
        The payload at path if it is of the given kind, otherwise None.
        A wrong kind is logged and treated like a missing asset.
        """
        try:
            return self.require(path, kind)
        except KeyError:
            logger.debug("Asset not found: %s", path)
            return None
        except AssetTypeMismatchError as e:
            logger.error("%s", e)
            return None

    def get_image(self, path: str) -> Optional[ImageResource]:
        return self.get_typed(path, ResourceKind.IMAGE)

    def get_audio(self, path: str) -> Optional[Any]:
        return self.get_typed(path, ResourceKind.AUDIO)

    def get_shader(self, path: str) -> Optional[Any]:
        return self.get_typed(path, ResourceKind.SHADER)

    def get_text(self, path: str) -> Optional[str]:
        return self.get_typed(path, ResourceKind.TEXT)

    def get_json(self, path: str) -> Optional[Any]:
        return self.get_typed(path, ResourceKind.JSON)

    def get_xml(self, path: str) -> Optional[Any]:
        return self.get_typed(path, ResourceKind.XML)

    def get_raw(self, path: str) -> Optional[Path]:
        return self.get_typed(path, ResourceKind.RAW)

    def all(self) -> Mapping[str, Resource]:
        """Read-only view of the whole cache."""
        return MappingProxyType(self._assets)

    def summary(self) -> List[Tuple[str, ResourceKind]]:
        return [(key, self._assets[key].kind) for key in sorted(self._assets)]

    @property
    def root(self) -> Optional[Path]:
        return self._root

    @property
    def is_loaded(self) -> bool:
        return self._root is not None

    def __contains__(self, path: str) -> bool:
        return path in self._assets

    def __len__(self) -> int:
        return len(self._assets)

    # Internals

    def _load_file(self, key: str, location: Path) -> Resource:
        try:
            data = location.read_bytes()
        except OSError as e:
            logger.warning("Could not read %s, keeping raw file: %s", key, e)
            return RawFile(path=key, location=location)
        return self.decoder.decode(key, data, location)

    def _check_owner(self) -> None:
        current = threading.get_ident()
        if self._owner is None:
            self._owner = current
        elif self._owner != current:
            raise AssetThreadError(
                "AssetStore is owned by another thread; "
                "synchronize access externally or use one store per thread"
            )


_instance: Optional[AssetStore] = None


def get_asset_store(
    backend: Optional[NativeBackend] = None,
    settings: Optional[AssetSettings] = None,
) -> AssetStore:
    """
    The process-wide store. The first call must supply a backend.
    """
    global _instance
    if _instance is None:
        if backend is None:
            raise RuntimeError("get_asset_store() needs a backend on first use")
        _instance = AssetStore(backend, settings)
    return _instance


def reset_asset_store() -> None:
    """Dispose and drop the process-wide store."""
    global _instance
    if _instance is not None:
        _instance.dispose()
        _instance = None
