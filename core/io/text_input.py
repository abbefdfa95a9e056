"""
Text Input Abstraction

Abstract interface for line-based input sources (keyboard, scripted, etc.)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

@dataclass
class InputResult:
    """Result from input source"""
    text: str
    source: str = "unknown"
    eof: bool = False
    
    def is_empty(self) -> bool:
        """Check if no input received"""
        return not self.text or self.text.strip() == ""

class TextInput(ABC):
    """
    Abstract interface for text input.
    
    Can be implemented by:
    - Keyboard (input())
    - Test doubles feeding canned lines
    """
    
    @abstractmethod
    def read(self, prompt: str) -> InputResult:
        """
        Show a prompt and read one line.
        
        Args:
            prompt: Prompt to show user
            
        Returns:
            InputResult with the typed text, eof=True when the stream ended
        """
        pass
