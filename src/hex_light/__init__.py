"""
Hex Light: search-based players for the connection game Hex.
"""

__version__ = "0.1"
