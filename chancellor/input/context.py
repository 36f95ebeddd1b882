# chancellor/input/context.py
from typing import Dict, Optional

from chancellor.types import InputAction, KeyCode


class KeyBindings:
    """
    Named action -> key mappings.
    Example:
        bindings = KeyBindings({"jump": pygame.K_SPACE})
        bindings.bind("pause", pygame.K_ESCAPE)
    """

    def __init__(self, bindings: Dict[InputAction, KeyCode] | None = None):
        # Mapping: Action String -> Pygame Key Code (int)
        self.bindings: Dict[InputAction, KeyCode] = dict(bindings) if bindings else {}

    def bind(self, action: InputAction, key: KeyCode) -> None:
        """Map an abstract action to a physical key, replacing any old key."""
        self.bindings[action] = key

    def unbind(self, action: InputAction) -> None:
        if action in self.bindings:
            del self.bindings[action]

    def key_for(self, action: InputAction) -> Optional[KeyCode]:
        return self.bindings.get(action)

    def action_for(self, key: KeyCode) -> Optional[InputAction]:
        for action, bound in self.bindings.items():
            if bound == key:
                return action
        return None
