"""Recipe book aggregate: ordered, in-memory list of uniquely named recipes."""
import logging
from typing import Iterator, List, Optional

from healthyliving.domain.Recipe import Recipe
from healthyliving.domain.exceptions import DuplicateNameError, EmptyFieldError

logger = logging.getLogger(__name__)


class RecipeBook:
    def __init__(self):
        self.items: List[Recipe] = []

    def add(self, name: str, url: str) -> Recipe:
        '''
        Trims both values and appends a new recipe.

        Raises EmptyFieldError when either value is blank and
        DuplicateNameError when the name already exists (case-insensitive).
        The book is left untouched on failure.
        '''
        n = (name or "").strip()
        u = (url or "").strip()
        if not n:
            raise EmptyFieldError("name")
        if not u:
            raise EmptyFieldError("url")
        existing = self.find(n)
        if existing is not None:
            raise DuplicateNameError(n, existing.name)
        recipe = Recipe(n, u)
        self.items.append(recipe)
        logger.info(f"Recipe added: {recipe}")
        return recipe

    def remove(self, recipe: Recipe) -> None:
        '''
        Removes the recipe if present. Missing recipes are ignored.
        '''
        try:
            self.items.remove(recipe)
        except ValueError:
            logger.debug(f"Recipe not in book, nothing to remove: {recipe}")
            return
        logger.info(f"Recipe removed: {recipe}")

    def find(self, name_or_key: str) -> Optional[Recipe]:
        key = name_or_key.lower()
        for recipe in self.items:
            if recipe.key == key:
                return recipe
        return None

    def get_items(self) -> List[Recipe]:
        return list(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(list(self.items))

    def __contains__(self, recipe) -> bool:
        return recipe in self.items
