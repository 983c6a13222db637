"""
cuelink - Player Identity Resolution

Links player records from different leagues and seasons to a single
canonical identity. Pool leagues record players by display name, so the
same person shows up as "John Smith" in one league and "Jon Smith" in
another; this package finds those candidates and keeps the resulting
identity links consistent.

Main components:
- players: Name normalization, fuzzy matching and identity links
- config: Settings loaded from environment variables
"""

__version__ = "1.0.0"
