"""
ResourceCatalog - Read-only access to the learning resources.

Provides:
- Lookup by resource ID
- Iteration in seed order
- Category filtering for the resource listing
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from learntrack.schemas import Resource, ResourceCategory
from learntrack.utils import load_resources


# Select box value meaning "no category filter"
ALL_CATEGORIES = "all"


class ResourceCatalog:
    """
    Fixed set of known learning resources.

    The catalog is seeded once and never mutated; resources are frozen models.
    """

    def __init__(self, resources: Iterable[Resource]):
        self._resources: dict[str, Resource] = {}
        for resource in resources:
            if resource.id in self._resources:
                raise ValueError(f"Duplicate resource id: {resource.id}")
            self._resources[resource.id] = resource

    @classmethod
    def from_seed(cls, seed_path: Optional[Path] = None) -> "ResourceCatalog":
        """Build the catalog from the seed YAML."""
        return cls(load_resources(seed_path))

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[Resource]:
        return iter(self._resources.values())

    def __contains__(self, resource_id: str) -> bool:
        return resource_id in self._resources

    def get(self, resource_id: str) -> Optional[Resource]:
        """Get a resource by ID, or None if unknown."""
        return self._resources.get(resource_id)

    def all(self) -> list[Resource]:
        return list(self._resources.values())

    def filter_by_category(
        self,
        category: Union[ResourceCategory, str, None] = None,
    ) -> list[Resource]:
        """
        Resources in the given category, in catalog order.

        None or "all" returns every resource.
        """
        if category is None or category == ALL_CATEGORIES:
            return self.all()
        category = ResourceCategory(category)
        return [r for r in self._resources.values() if r.category == category]
