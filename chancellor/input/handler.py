# chancellor/input/handler.py
from typing import Set

import pygame

from chancellor.input.context import KeyBindings
from chancellor.types import InputAction, KeyCode


class InputHandler:
    def __init__(self, bindings: KeyBindings | None = None):
        self.bindings = bindings if bindings else KeyBindings()
        self._held: Set[KeyCode] = set()
        self._just_pressed: Set[KeyCode] = set()

    def process_event(self, event: pygame.event.Event) -> None:
        """Feed Pygame events here to update state."""
        if event.type == pygame.KEYDOWN:
            if event.key not in self._held:
                self._just_pressed.add(event.key)
            self._held.add(event.key)

        elif event.type == pygame.KEYUP:
            self._held.discard(event.key)

    def end_frame(self) -> None:
        """Forget this frame's key-down edges. Call once per update loop."""
        self._just_pressed.clear()

    def is_pressed(self, action: InputAction) -> bool:
        """Returns True if the action's key is currently held."""
        key = self.bindings.key_for(action)
        return key is not None and key in self._held

    def is_just_pressed(self, action: InputAction) -> bool:
        """Returns True only in the frame the action's key went down."""
        key = self.bindings.key_for(action)
        return key is not None and key in self._just_pressed

    def is_key_pressed(self, key: KeyCode) -> bool:
        """Raw key query, bypassing the bindings."""
        return key in self._held

    def all_pressed(self, *keys: KeyCode) -> bool:
        """True if every key of a chord is held at once."""
        return all(key in self._held for key in keys)
