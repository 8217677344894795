"""
Role and command registry core for a chat-driven command bot.
"""

__version__ = "0.1.0"
