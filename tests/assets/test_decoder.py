import io
import logging
from pathlib import Path

import pytest
from PIL import Image

from chancellor.assets.backend import NullBackend
from chancellor.assets.decoder import FormatDecoder, extension_of
from chancellor.assets.importers import HdrImporter, TextImporter
from chancellor.assets.types import RawFile, ResourceKind


def _image_bytes(fmt):
    buf = io.BytesIO()
    Image.new("RGB", (1, 1), color="blue").save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def decoder():
    return FormatDecoder(NullBackend())


@pytest.mark.parametrize(
    "path, expected",
    [
        ("a.png", "png"),
        ("dir/b.JPG", "jpg"),
        ("archive.tar.gz", "gz"),
        ("Makefile", ""),
        ("dotted.dir/file", ""),
        (".hidden", "hidden"),
    ],
)
def test_extension_of(path, expected):
    assert extension_of(path) == expected


@pytest.mark.parametrize(
    "name, fmt",
    [
        ("a.png", "PNG"),
        ("a.jpg", "JPEG"),
        ("a.jpeg", "JPEG"),
        ("a.bmp", "BMP"),
        ("a.tga", "TGA"),
        ("a.gif", "GIF"),
    ],
)
def test_decode_images(decoder, name, fmt):
    resource = decoder.decode(name, _image_bytes(fmt), Path(name))

    assert resource.kind is ResourceKind.IMAGE
    assert (resource.width, resource.height) == (1, 1)


RADIANCE_1X1 = (
    b"#?RADIANCE\nFORMAT=32-bit_rle_rgbe\n\n-Y 1 +X 1\n" + bytes([128, 64, 32, 129])
)


def test_decode_dds(decoder):
    resource = decoder.decode("sky.dds", _image_bytes("DDS"), Path("sky.dds"))

    assert resource.kind is ResourceKind.IMAGE
    assert (resource.width, resource.height) == (1, 1)


def test_decode_hdr(decoder):
    resource = decoder.decode("sky.hdr", RADIANCE_1X1, Path("sky.hdr"))

    assert resource.kind is ResourceKind.IMAGE
    assert (resource.width, resource.height) == (1, 1)
    # 3 float32 components
    assert resource.texture.size == 12


@pytest.mark.parametrize(
    "name, data, kind",
    [
        ("sfx/a.wav", b"RIFF", ResourceKind.AUDIO),
        ("sfx/a.mp3", b"ID3", ResourceKind.AUDIO),
        ("sfx/a.ogg", b"OggS", ResourceKind.AUDIO),
        ("s/a.glsl", b"void main() {}", ResourceKind.SHADER),
        ("s/a.vert", b"void main() {}", ResourceKind.SHADER),
        ("s/a.frag", b"void main() {}", ResourceKind.SHADER),
        ("d/a.json", b"[1, 2]", ResourceKind.JSON),
        ("d/a.xml", b"<a/>", ResourceKind.XML),
        ("d/a.txt", b"hello", ResourceKind.TEXT),
    ],
)
def test_decode_dispatch(decoder, name, data, kind):
    assert decoder.decode(name, data, Path(name)).kind is kind


def test_extension_match_is_case_insensitive(decoder):
    resource = decoder.decode("README.TXT", b"hi", Path("README.TXT"))

    assert resource.kind is ResourceKind.TEXT


@pytest.mark.parametrize("name", ["model.obj", "font.ttf", "LICENSE", "a.txt.bak"])
def test_unknown_extension_is_raw(decoder, name):
    location = Path("/assets") / name

    resource = decoder.decode(name, b"whatever", location)

    assert resource == RawFile(path=name, location=location)


@pytest.mark.parametrize(
    "name, data",
    [
        ("bad.json", b"{not json"),
        ("bad.xml", b"<a><b></a>"),
        ("bad.png", b"garbage"),
        ("bad.hdr", b"garbage"),
        ("bad.txt", b"\xff\xfe\xfa"),
        ("bad.glsl", b"   "),
        ("bad.wav", b""),
    ],
)
def test_decode_failure_degrades_to_raw(decoder, caplog, name, data):
    with caplog.at_level(logging.WARNING, logger="chancellor.assets.decoder"):
        resource = decoder.decode(name, data, Path(name))

    assert isinstance(resource, RawFile)
    assert resource.path == name
    assert name in caplog.text


def test_register_overrides_extension(decoder):
    decoder.register(".MD", TextImporter())

    resource = decoder.decode("notes.md", b"# hi", Path("notes.md"))

    assert resource.kind is ResourceKind.TEXT
    assert resource.payload == "# hi"


def test_hdr_uses_hdr_importer(decoder):
    assert isinstance(decoder.importer_for("sky.HDR"), HdrImporter)
