"""
Copilot Plus: spending insights from Copilot Money exports.
"""

__version__ = "0.1.0"
