"""
Custom exception classes for the recipe screen
"""


class RecipeBookError(Exception):
    """Base exception for recipe book mutations"""
    pass


class EmptyFieldError(RecipeBookError):
    """Raised when the name or the URL is blank after trimming"""
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field '{field}' is empty")


class DuplicateNameError(RecipeBookError):
    """Raised when a recipe with the same name (any case) already exists"""
    def __init__(self, name: str, existing: str):
        self.name = name
        self.existing = existing
        super().__init__(f"Recipe '{name}' already exists as '{existing}'")


class ImageLoadCancelled(Exception):
    """Raised to waiters of an image load cancelled before it finished"""
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Image load for '{key}' was cancelled")
