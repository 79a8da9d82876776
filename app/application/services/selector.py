"""Selection by identifier over an already-fetched collection."""

from typing import Iterable, Optional, TypeVar

T = TypeVar("T")


def select(collection: Iterable[T], id: int) -> Optional[T]:
    """Return the first entity in ``collection`` whose id equals ``id``.

    Linear scan in iteration order; the collection need not be sorted.
    Returns None when nothing matches.
    """
    for entity in collection:
        if entity.id == id:
            return entity
    return None
