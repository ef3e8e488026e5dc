from .exc import ItemizerError, UnknownItemError, InvalidItemError, NegativeItemError
from .item import Item
from .itemizer import Itemizer

__all__ = [
    "Item",
    "Itemizer",
    "ItemizerError",
    "UnknownItemError",
    "InvalidItemError",
    "NegativeItemError",
]
