"""Recipe entry: a name paired with the URL of a remote image."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Recipe:
    name: str
    url: str

    @property
    def key(self) -> str:
        """Lowercase name, unique inside a RecipeBook."""
        return self.name.lower()

    def __str__(self) -> str:
        return f"{self.name} - {self.url}"

    def to_dict(self):
        return {"name": self.name, "url": self.url, "key": self.key}
