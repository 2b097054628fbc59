"""
Hotel booking client core: reservation flow and credential checks.
"""

__version__ = "1.0.0"
