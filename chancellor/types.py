# chancellor/types.py
InputAction = str
KeyCode = int
