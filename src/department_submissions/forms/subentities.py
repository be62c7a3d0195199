"""Editor for the repeatable sub-records of a draft."""

import logging
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from department_submissions.exceptions import PreconditionError
from schemas.subentities import Subentity, new_key

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Subentity)


class SubentityList(Generic[T]):
    """An ordered, never-empty list of sub-records.

    Rows are addressed by position for editing and by their stable ``key``
    when the caller needs an identity that survives removals.

    Example:
        authors = SubentityList(Author)
        authors.append()
        authors.update(1, "given_name", "Sita")
        authors.remove(0)
    """

    def __init__(self, factory: Callable[[], T], items: list[T] | None = None):
        self._factory = factory
        self._items: list[T] = list(items) if items else [factory()]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    @property
    def can_remove(self) -> bool:
        return len(self._items) > 1

    def index_of(self, key: str) -> int:
        for index, item in enumerate(self._items):
            if item.key == key:
                return index
        raise KeyError(key)

    def append(self, template: T | None = None) -> T:
        """Add a row at the end, from type defaults or a copy of ``template``."""
        if template is None:
            item = self._factory()
        else:
            item = template.model_copy(update={"key": new_key()})
        self._items.append(item)
        return item

    def remove(self, index: int) -> T:
        """Remove the row at ``index``.

        Raises:
            PreconditionError: If it is the only remaining row
            IndexError: If index is out of range
        """
        if not self.can_remove:
            raise PreconditionError("At least one entry is required")
        item = self._items.pop(index)
        logger.debug(f"Removed {type(item).__name__} {item.key}")
        return item

    def remove_key(self, key: str) -> T:
        return self.remove(self.index_of(key))

    def update(self, index: int, field: str, value: str) -> T:
        """Set one field of the row at ``index`` without reordering."""
        item = self._items[index]
        if field == "key" or field not in type(item).model_fields:
            raise ValueError(f"{type(item).__name__} has no editable field '{field}'")
        setattr(item, field, value)
        return item

    def reset(self) -> None:
        """Back to a single row of defaults."""
        self._items = [self._factory()]
