from core.io.input.keyboard_input import KeyboardInput

__all__ = ['KeyboardInput']
