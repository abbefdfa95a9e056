"""
I/O Factory - Creates I/O implementations based on config
"""

from typing import Tuple
from core.io.text_input import TextInput
from core.io.text_output import TextOutput
from core.io.input.keyboard_input import KeyboardInput
from core.io.output.console_output import ConsoleOutput
from utils.logger import get_logger

logger = get_logger('io.factory')

INPUT_MODES = ('keyboard',)
OUTPUT_MODES = ('console',)

class IOFactory:
    """Factory for creating I/O implementations."""
    
    @staticmethod
    def create_input(mode: str = 'keyboard') -> TextInput:
        """
        Create text input based on mode.
        
        Args:
            mode: 'keyboard'
            
        Returns:
            TextInput implementation
        """
        logger.debug(f"Creating input: mode={mode}")
        
        if mode == 'keyboard':
            return KeyboardInput()
        
        raise ValueError(f"Unknown input mode: {mode}")
    
    @staticmethod
    def create_output(mode: str = 'console', prefix: str = "") -> TextOutput:
        """
        Create text output based on mode.
        
        Args:
            mode: 'console'
            prefix: Prefix for every output line
            
        Returns:
            TextOutput implementation
        """
        logger.debug(f"Creating output: mode={mode}")
        
        if mode == 'console':
            return ConsoleOutput(prefix=prefix)
        
        raise ValueError(f"Unknown output mode: {mode}")
    
    @staticmethod
    def create_io_pair(
        input_mode: str = 'keyboard',
        output_mode: str = 'console'
    ) -> Tuple[TextInput, TextOutput]:
        """
        Create matching input/output pair.
        
        Returns:
            (TextInput, TextOutput) tuple
        """
        text_input = IOFactory.create_input(input_mode)
        text_output = IOFactory.create_output(output_mode)
        
        logger.info(
            f"Created I/O pair: "
            f"input={text_input.__class__.__name__}, "
            f"output={text_output.__class__.__name__}"
        )
        
        return text_input, text_output
