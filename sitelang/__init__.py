"""
sitelang - site locale resolution and language redirects
"""

__version__ = "0.1.0"
