import pytest

from embedkit.id_allocator import Allocator


def test_source_sequence():
    allocator = Allocator(10)

    assert allocator.allocate(1, 1) == 0
    assert str(allocator) == "[1,0,0,0,0,0,0,0,0,0]"

    assert allocator.allocate(1, 2) == 1
    assert str(allocator) == "[1,2,0,0,0,0,0,0,0,0]"

    assert allocator.allocate(1, 1) == 2
    assert str(allocator) == "[1,2,1,0,0,0,0,0,0,0]"

    assert allocator.free_memory(2) == 1
    assert str(allocator) == "[1,0,1,0,0,0,0,0,0,0]"

    assert allocator.allocate(3, 3) == 3
    assert str(allocator) == "[1,0,1,3,3,3,0,0,0,0]"

    assert allocator.free_memory(1) == 2
    assert str(allocator) == "[0,0,0,3,3,3,0,0,0,0]"

    with pytest.raises(MemoryError):
        allocator.allocate(10, 4)
    assert str(allocator) == "[0,0,0,3,3,3,0,0,0,0]"


def test_free_unknown_id_frees_nothing():
    allocator = Allocator(4)
    allocator.allocate(2, 7)
    assert allocator.free_memory(9) == 0
    assert str(allocator) == "[7,7,0,0]"


def test_whole_capacity_then_full():
    allocator = Allocator(5)
    assert allocator.allocate(5, 1) == 0
    with pytest.raises(MemoryError):
        allocator.allocate(1, 2)
    assert allocator.free_memory(1) == 5
    assert allocator.allocate(5, 2) == 0


def test_size_larger_than_capacity():
    allocator = Allocator(3)
    with pytest.raises(MemoryError):
        allocator.allocate(4, 1)


@pytest.mark.parametrize("size,mid", [(0, 1), (-1, 1), (1, 0), (1, -2)])
def test_invalid_arguments(size, mid):
    allocator = Allocator(3)
    with pytest.raises(ValueError):
        allocator.allocate(size, mid)


def test_free_then_reallocate_fills_gap():
    allocator = Allocator(6)
    allocator.allocate(2, 1)
    allocator.allocate(2, 2)
    allocator.allocate(2, 3)
    allocator.free_memory(2)
    assert allocator.allocate(2, 4) == 2
    assert str(allocator) == "[1,1,4,4,3,3]"