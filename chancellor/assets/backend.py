# chancellor/assets/backend.py
import io
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List

import moderngl
import pygame

logger = logging.getLogger(__name__)


class NativeBackend(ABC):
    """
    Creates and releases resources that live outside the Python heap
    (GPU textures, audio buffers, compiled shader programs).
    """

    @abstractmethod
    def create_texture(
        self,
        width: int,
        height: int,
        components: int,
        data: bytes,
        build_mipmaps: bool = True,
        dtype: str = "f1",
    ) -> Any:
        pass

    @abstractmethod
    def create_sound(self, data: bytes) -> Any:
        pass

    @abstractmethod
    def create_program(self, source: str) -> Any:
        """Compile a single-file program; see inject_stage_define."""
        pass

    @abstractmethod
    def release(self, handle: Any) -> None:
        pass


def inject_stage_define(source: str, define: str) -> str:
    """
    Insert `#define <define>` right after the #version directive
    (GLSL requires #version to come first), or at the top if there is none.
    """
    lines = source.splitlines(keepends=True)
    for i, line in enumerate(lines):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith("#version"):
            if not line.endswith("\n"):
                lines[i] = line + "\n"
            lines.insert(i + 1, f"#define {define}\n")
            return "".join(lines)
        break
    return f"#define {define}\n" + source


class ModernGLBackend(NativeBackend):
    """
    Textures and programs through a moderngl.Context, sounds through
    pygame.mixer.
    """

    def __init__(self, ctx: moderngl.Context):
        self.ctx = ctx
        self._mixer_ready = False

    def create_texture(
        self,
        width: int,
        height: int,
        components: int,
        data: bytes,
        build_mipmaps: bool = True,
        dtype: str = "f1",
    ) -> moderngl.Texture:
        texture = self.ctx.texture(
            size=(width, height), components=components, data=data, dtype=dtype
        )
        if build_mipmaps:
            texture.filter = (moderngl.LINEAR_MIPMAP_LINEAR, moderngl.LINEAR)
            texture.build_mipmaps()
        return texture

    def create_sound(self, data: bytes) -> pygame.mixer.Sound:
        self._ensure_mixer()
        return pygame.mixer.Sound(file=io.BytesIO(data))

    def create_program(self, source: str) -> moderngl.Program:
        # One file supplies both stages, selected with preprocessor defines.
        return self.ctx.program(
            vertex_shader=inject_stage_define(source, "VERTEX_SHADER"),
            fragment_shader=inject_stage_define(source, "FRAGMENT_SHADER"),
        )

    def release(self, handle: Any) -> None:
        if isinstance(handle, pygame.mixer.Sound):
            # Sounds have no explicit free: stop() detaches it from every
            # channel and the buffer goes once dispose() drops the store's
            # reference.
            handle.stop()
        else:
            handle.release()

    def _ensure_mixer(self) -> None:
        if self._mixer_ready:
            return
        if pygame.mixer.get_init() is None:
            pygame.mixer.init()
        self._mixer_ready = True
        logger.debug("pygame.mixer initialized: %s", pygame.mixer.get_init())


@dataclass(eq=False)
class NullHandle:
    """Opaque placeholder returned by NullBackend."""

    kind: str
    size: int
    released: bool = False


@dataclass
class NullBackend(NativeBackend):
    """
    Headless backend: no GL context or audio device needed.
    Records every handle it creates and every release.
    """

    created: List[NullHandle] = field(default_factory=list)
    released: List[NullHandle] = field(default_factory=list)

    def create_texture(
        self,
        width: int,
        height: int,
        components: int,
        data: bytes,
        build_mipmaps: bool = True,
        dtype: str = "f1",
    ) -> NullHandle:
        # moderngl dtype strings end in the component size in bytes: "f1", "f4"
        expected = width * height * components * int(dtype[1:])
        if len(data) != expected:
            raise ValueError(
                f"Texture data is {len(data)} bytes, expected {expected}"
            )
        return self._track(NullHandle("texture", len(data)))

    def create_sound(self, data: bytes) -> NullHandle:
        if not data:
            raise ValueError("Empty audio buffer")
        return self._track(NullHandle("sound", len(data)))

    def create_program(self, source: str) -> NullHandle:
        if not source.strip():
            raise ValueError("Empty shader source")
        return self._track(NullHandle("program", len(source)))

    def release(self, handle: Any) -> None:
        if handle.released:
            raise RuntimeError(f"{handle.kind} handle released twice")
        handle.released = True
        self.released.append(handle)

    @property
    def live(self) -> List[NullHandle]:
        return [h for h in self.created if not h.released]

    def _track(self, handle: NullHandle) -> NullHandle:
        self.created.append(handle)
        return handle
