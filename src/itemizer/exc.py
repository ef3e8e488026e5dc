__all__ = [
    "ItemizerError",
    "UnknownItemError",
    "InvalidItemError",
    "NegativeItemError",
]


class ItemizerError(Exception):
    pass


class UnknownItemError(ItemizerError, IndexError):
    """
    Raised by :meth:`Itemizer.value_of` for an :class:`Item` that this itemizer
    never produced. This is a programming error, not an expected condition.
    """


class InvalidItemError(ItemizerError, TypeError):
    pass


class NegativeItemError(ItemizerError, ValueError):
    pass
