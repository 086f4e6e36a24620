"""
Alias Tips - suggest shell aliases for the command you are about to run.
"""

__version__ = "0.1.0"
