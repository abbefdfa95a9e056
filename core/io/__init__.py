"""
I/O Abstraction Layer

Provides terminal-agnostic input/output interfaces.
"""

from core.io.text_input import TextInput, InputResult
from core.io.text_output import TextOutput
from core.io.factory import IOFactory

__all__ = [
    'TextInput',
    'InputResult',
    'TextOutput',
    'IOFactory'
]
