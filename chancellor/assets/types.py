# chancellor/assets/types.py
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar, Union


class ResourceKind(StrEnum):
    IMAGE = "image"
    AUDIO = "audio"
    SHADER = "shader"
    JSON = "json"
    XML = "xml"
    TEXT = "text"
    RAW = "raw"

    @property
    def owns_native_handle(self) -> bool:
        return self in (ResourceKind.IMAGE, ResourceKind.AUDIO, ResourceKind.SHADER)


@dataclass(frozen=True)
class ImageResource:
    """Decoded image uploaded as a native texture."""

    kind: ClassVar[ResourceKind] = ResourceKind.IMAGE

    path: str
    width: int
    height: int
    texture: Any  # backend texture handle

    @property
    def payload(self) -> "ImageResource":
        return self

    @property
    def native_handle(self) -> Any:
        return self.texture


@dataclass(frozen=True)
class AudioResource:
    kind: ClassVar[ResourceKind] = ResourceKind.AUDIO

    path: str
    sound: Any  # backend sound buffer

    @property
    def payload(self) -> Any:
        return self.sound

    @property
    def native_handle(self) -> Any:
        return self.sound


@dataclass(frozen=True)
class ShaderResource:
    kind: ClassVar[ResourceKind] = ResourceKind.SHADER

    path: str
    program: Any  # backend shader program
    source: str  # kept for debugging / error reporting

    @property
    def payload(self) -> Any:
        return self.program

    @property
    def native_handle(self) -> Any:
        return self.program


@dataclass(frozen=True)
class JsonResource:
    kind: ClassVar[ResourceKind] = ResourceKind.JSON

    path: str
    value: Any  # dict / list / str / int / float / bool / None

    @property
    def payload(self) -> Any:
        return self.value


@dataclass(frozen=True)
class XmlResource:
    kind: ClassVar[ResourceKind] = ResourceKind.XML

    path: str
    value: Any  # {root_tag: content}, see importers.structured

    @property
    def payload(self) -> Any:
        return self.value


@dataclass(frozen=True)
class TextResource:
    kind: ClassVar[ResourceKind] = ResourceKind.TEXT

    path: str
    text: str

    @property
    def payload(self) -> str:
        return self.text


@dataclass(frozen=True)
class RawFile:
    """
    Fallback for unknown extensions and failed decodes.
    Carries only where the file came from.
    """

    kind: ClassVar[ResourceKind] = ResourceKind.RAW

    path: str
    location: Path

    @property
    def payload(self) -> Path:
        return self.location


Resource = Union[
    ImageResource,
    AudioResource,
    ShaderResource,
    JsonResource,
    XmlResource,
    TextResource,
    RawFile,
]
