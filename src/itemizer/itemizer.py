import logging
from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Optional, Tuple, TypeVar

import attr

from .exc import InvalidItemError, UnknownItemError
from .item import Item

__all__ = ["Itemizer"]

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


@attr.s(repr=False)
class Itemizer(Generic[V]):
    """
    Bidirectional table assigning dense integer :class:`Item` handles to
    hashable values.

    The first distinct value gets id 0, the next one id 1, and so on. Entries
    are never removed or reassigned.
    """

    _value_to_item: Dict[V, Item] = attr.ib(factory=dict, init=False)
    _item_to_value: List[V] = attr.ib(factory=list, init=False)

    @classmethod
    def from_values(cls, values: Iterable[V]) -> "Itemizer[V]":
        """
        Build an itemizer with ``values`` already itemized, in order.
        """
        itemizer = cls()
        for value in values:
            itemizer.id_of(value)
        return itemizer

    def id_of(self, value: V) -> Item:
        """
        Return the item for ``value``, assigning the next free id if this value
        has not been seen before.
        """
        item = self._value_to_item.get(value)
        if item is not None:
            return item

        item = Item(len(self._item_to_value))
        self._item_to_value.append(value)
        self._value_to_item[value] = item

        assert len(self._item_to_value) == item.id + 1
        return item

    def id_of_exists(self, value: V) -> Optional[Item]:
        """
        Like :meth:`id_of`, but return None instead of registering ``value``.
        """
        return self._value_to_item.get(value)

    def value_of(self, item: Item) -> V:
        """
        Return the value that ``item`` was assigned to.

        Raises :class:`UnknownItemError` if ``item`` did not come from this
        itemizer.
        """
        if not isinstance(item, Item):
            raise InvalidItemError(f"expected Item, got {item!r}")

        index = item.as_index()
        if not 0 <= index < len(self._item_to_value):
            logger.debug("rejected %r, only %d items", item, len(self._item_to_value))
            raise UnknownItemError(
                f"{item!r} out of range for itemizer with {len(self)} items"
            )
        return self._item_to_value[index]

    def items(self) -> Iterator[Tuple[Item, V]]:
        return ((Item(i), v) for i, v in enumerate(self._item_to_value))

    def __len__(self):
        return len(self._item_to_value)

    def __iter__(self) -> Iterator[V]:
        return iter(self._item_to_value)

    def __contains__(self, value):
        return value in self._value_to_item

    def __repr__(self):
        pairs = ", ".join(f"{v!r}: {item.id}" for item, v in self.items())
        return f"{type(self).__name__}({{{pairs}}})"
