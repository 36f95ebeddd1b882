# chancellor/assets/importers/shader.py
from chancellor.assets.backend import NativeBackend
from chancellor.assets.importers.base import AssetImporter
from chancellor.assets.importers.text import decode_utf8
from chancellor.assets.types import ShaderResource


class ShaderImporter(AssetImporter):
    def __init__(self, backend: NativeBackend):
        self.backend = backend

    def decode(self, path: str, data: bytes) -> ShaderResource:
        source = decode_utf8(data)
        program = self.backend.create_program(source)
        return ShaderResource(path=path, program=program, source=source)
