"""
workout-generator: deterministic rule-based workout generation.

Selects and orders exercises from a catalog for a user's level, goal,
location, equipment, session length and focus areas.
"""

__version__ = "0.1.0"
