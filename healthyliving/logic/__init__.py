"""Screen logic layer.

Subpackages:
- screen: the state container for the recipe screen and its render function
"""
__all__ = ["screen"]
