"""
Text Output Abstraction

Abstract interface for output sinks (console, etc.)
"""

from abc import ABC, abstractmethod

class TextOutput(ABC):
    """
    Abstract interface for text output.
    
    Can be implemented by:
    - Console (text print)
    - Test doubles collecting lines
    """
    
    @abstractmethod
    def output(self, text: str) -> bool:
        """
        Display one message.
        
        Args:
            text: Text to output
            
        Returns:
            True if successful
        """
        pass
