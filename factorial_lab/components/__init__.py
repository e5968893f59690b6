"""
Application components.
"""
