import pytest

from itemizer import Item, InvalidItemError, NegativeItemError


def test_with_id():
    assert Item.with_id(0).as_index() == 0
    assert Item.with_id(1).as_index() == 1


def test_equality_and_hash():
    assert Item.with_id(3) == Item(3)
    assert Item.with_id(3) != Item(4)
    assert len({Item(3), Item(3), Item(4)}) == 2
    assert {Item(7): "x"}[Item.with_id(7)] == "x"


def test_ordering():
    assert Item(0) < Item(1) < Item(10)
    assert sorted([Item(2), Item(0), Item(1)]) == [Item(0), Item(1), Item(2)]


def test_usable_as_sequence_index():
    names = ["a", "b", "c"]
    assert names[Item(2)] == "c"


def test_frozen():
    item = Item(1)
    with pytest.raises(AttributeError):
        item.id = 2


@pytest.mark.parametrize("bad", ["1", 1.0, None, True])
def test_reject_non_int(bad):
    with pytest.raises(InvalidItemError):
        Item.with_id(bad)
    with pytest.raises(TypeError):
        Item(bad)


def test_reject_negative():
    with pytest.raises(NegativeItemError):
        Item.with_id(-1)
    with pytest.raises(ValueError):
        Item(-5)


def test_ids_unbounded():
    big = 2**40
    assert Item.with_id(big).as_index() == big
    assert Item(2**32) > Item(2**32 - 1)
