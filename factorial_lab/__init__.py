"""
Factorial Lab - prints the factorial of 5.
"""

__version__ = "0.1.0"
