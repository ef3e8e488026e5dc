import attr

from .exc import InvalidItemError, NegativeItemError

__all__ = ["Item"]


def _check_id(instance, attribute, value):
    if type(value) is bool or not isinstance(value, int):
        raise InvalidItemError(f"item id must be an int, got {value!r}")
    if value < 0:
        raise NegativeItemError(f"item id must be non-negative, got {value!r}")


@attr.s(frozen=True, slots=True, order=True)
class Item:
    """
    Opaque handle for a value registered in an :class:`Itemizer`.

    Two items are equal iff their ids are equal. An item only has meaning for
    the itemizer that produced it. Ids are plain Python ints and have no upper
    bound.
    """

    id: int = attr.ib(validator=_check_id)

    @classmethod
    def with_id(cls, id: int) -> "Item":
        return cls(id)

    def as_index(self) -> int:
        return self.id

    def __index__(self):
        return self.id
