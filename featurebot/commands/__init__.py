"""
Command catalog, registry and manager.
"""

from .argument_parser import ArgumentPair, parse_argument_pair
from .command_catalog import CommandCatalog
from .command_registry import CommandHandler, CommandRegistry
from .command_manager import CommandManager

__all__ = [
    'ArgumentPair',
    'parse_argument_pair',
    'CommandCatalog',
    'CommandHandler',
    'CommandRegistry',
    'CommandManager',
]
