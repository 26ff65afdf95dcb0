"""
Level and experience progression.
"""

from rpgcore.levels.level import LevelData
