"""
Keyboard Input - Simple text input
"""

from core.io.text_input import TextInput, InputResult
from utils.logger import get_logger

logger = get_logger('io.keyboard_input')

class KeyboardInput(TextInput):
    """Keyboard text input"""
    
    def read(self, prompt: str) -> InputResult:
        """Get one line from the keyboard"""
        try:
            text = input(prompt)
            return InputResult(text=text, source='keyboard')
            
        except EOFError:
            # Ctrl+D pressed or stdin closed
            logger.info("Keyboard input reached EOF")
            return InputResult(text="", source='keyboard', eof=True)
