"""
Albert - streaming educational podcast generator.
"""

__version__ = "1.0.0"
