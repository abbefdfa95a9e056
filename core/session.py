"""
Converter Session

The interactive loop: menu, choice, temperature, result, and
"another conversion?" until the user declines or input ends.
"""

from typing import Optional

from core.io import TextInput, TextOutput
from core.services.conversion_service import ConversionService
from modules.conversion import ConversionDirection, ConversionResult, ErrorKind
from utils.logger import get_logger

logger = get_logger('session')

HEADER = "--- Temperature Converter ---"
GOODBYE = "Thank you for using Temperature Converter. Goodbye!"
INVALID_CHOICE = "Invalid choice. Please try again."
CONTINUE_PROMPT = "Do you want to perform another conversion? (yes/no): "
YES_ANSWERS = ('y', 'yes')
NO_ANSWERS = ('n', 'no')


class EndOfInput(Exception):
    """Input stream closed while the session was waiting"""


class ConverterSession:
    """
    Runs conversions against any TextInput/TextOutput pair.
    
    The session owns the prompting and retry logic; the service
    owns parsing, validation and conversion.
    """
    
    def __init__(
        self,
        text_input: TextInput,
        text_output: TextOutput,
        service: Optional[ConversionService] = None
    ):
        self.input = text_input
        self.output = text_output
        self.service = service or ConversionService()
    
    def run(self) -> int:
        """
        Run until the user declines to continue or input ends.
        
        Returns:
            Number of completed conversions
        """
        completed = 0
        logger.info("Session started")
        
        try:
            while True:
                self.show_menu()
                direction = self.read_direction()
                result = self.read_and_convert(direction)
                self.output.output(result.message)
                completed += 1
                
                if not self.ask_to_continue():
                    break
        except EndOfInput:
            logger.info("Input ended, closing session")
        
        self.output.output(GOODBYE)
        logger.info(f"Session finished after {completed} conversion(s)")
        return completed
    
    def show_menu(self):
        """Print the conversion menu"""
        self.output.output("")
        self.output.output(HEADER)
        self.output.output("Select Conversion Type:")
        for direction in ConversionDirection:
            self.output.output(f"{direction.choice}. {direction.label}")
    
    def read_direction(self) -> ConversionDirection:
        """Prompt until a valid menu number is entered"""
        max_choice = len(ConversionDirection)
        
        while True:
            text = self._read(f"Enter your choice (1-{max_choice}): ")
            try:
                return ConversionDirection.from_choice(int(text.strip()))
            except ValueError:
                logger.debug(f"Invalid menu choice: {text!r}")
                self.output.output(INVALID_CHOICE)
    
    def read_and_convert(self, direction: ConversionDirection) -> ConversionResult:
        """Prompt until a number within range is entered, then convert it"""
        while True:
            text = self._read("Enter the temperature: ")
            result = self.service.convert_text(text, direction)
            if result.success:
                return result
            
            if result.error is ErrorKind.OUT_OF_RANGE:
                logger.info(f"Out of range input for {direction.name}: {result.value}")
            self.output.output(result.message)
    
    def ask_to_continue(self) -> bool:
        """Ask yes/no until one of the accepted answers is given"""
        while True:
            answer = self._read(CONTINUE_PROMPT).strip().lower()
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            self.output.output("Please answer yes or no.")
    
    def _read(self, prompt: str) -> str:
        result = self.input.read(prompt)
        if result.eof:
            raise EndOfInput()
        return result.text
