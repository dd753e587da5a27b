"""
UI package for the grocery order bot
Contains user interface implementations
"""

from .console_ui import ConsoleOrderUI

__all__ = [
    'ConsoleOrderUI'
]
