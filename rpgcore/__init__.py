"""
Stat and progression engine for a role-playing game.

Stats and their modifiers, stat growth, and level/experience progression.
"""

__version__ = "0.1.0"
