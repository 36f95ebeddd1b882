# chancellor/input/__init__.py
from chancellor.input.context import KeyBindings
from chancellor.input.handler import InputHandler

__all__ = ["KeyBindings", "InputHandler"]
