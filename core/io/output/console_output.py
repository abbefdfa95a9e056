"""
Console Output - Simple text output
"""

from core.io.text_output import TextOutput
from utils.logger import get_logger

logger = get_logger('io.console_output')

class ConsoleOutput(TextOutput):
    """Console text output"""
    
    def __init__(self, prefix: str = ""):
        """
        Initialize console output.
        
        Args:
            prefix: Prefix to show before output
        """
        self.prefix = prefix
        logger.debug("ConsoleOutput initialized")
    
    def output(self, text: str) -> bool:
        """Print text to console"""
        try:
            print(f"{self.prefix}{text}")
            return True
            
        except UnicodeEncodeError:
            # Terminals without UTF-8 cannot show degree signs
            print(f"{self.prefix}{text}".encode('ascii', 'replace').decode('ascii'))
            return True
            
        except OSError as e:
            logger.error(f"Console output error: {e}")
            return False
