from core.io.output.console_output import ConsoleOutput

__all__ = ['ConsoleOutput']
