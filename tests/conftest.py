from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from chancellor.assets import AssetStore, NullBackend, reset_asset_store


class FailingBackend(NullBackend):
    """NullBackend whose releases blow up for one handle kind."""

    def __init__(self, fail_kind: str):
        super().__init__()
        self.fail_kind = fail_kind

    def release(self, handle: Any) -> None:
        if handle.kind == self.fail_kind:
            raise RuntimeError(f"cannot release {handle.kind}")
        super().release(handle)


def write_png(path: Path, size=(1, 1), color="red") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color=color).save(path)
    return path


def write_text(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def backend():
    """Returns a fresh headless backend for each test."""
    return NullBackend()


@pytest.fixture
def store(backend):
    return AssetStore(backend)


@pytest.fixture
def asset_tree(tmp_path):
    """
    A small asset directory:
        a/b.txt, c.png, data/config.json, data/items.xml,
        shaders/basic.glsl, sfx/click.wav, notes.md
    """
    root = tmp_path / "assets"
    write_text(root / "a" / "b.txt", "hello")
    write_png(root / "c.png")
    write_text(root / "data" / "config.json", '{"volume": 0.5, "tags": ["x", "y"]}')
    write_text(root / "data" / "items.xml", '<items><item id="1">Sword</item></items>')
    write_text(
        root / "shaders" / "basic.glsl",
        "#version 330 core\nvoid main() {}\n",
    )
    (root / "sfx").mkdir(parents=True)
    (root / "sfx" / "click.wav").write_bytes(b"RIFF....WAVEfmt ")
    write_text(root / "notes.md", "# notes")
    return root


@pytest.fixture(autouse=True)
def _reset_singleton():
    yield
    reset_asset_store()
