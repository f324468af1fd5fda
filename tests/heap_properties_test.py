import random

import pytest

from minheap import EmptyHeapError, MinHeap


def assert_heap_property(values):
    for i in range(1, len(values)):
        parent = (i - 1) // 2
        assert values[parent] <= values[i], f"parent {parent} > child {i} in {values}"


@pytest.mark.parametrize("seed", range(10))
def test_heap_property_survives_mixed_operations(seed):
    rng = random.Random(seed)
    h = MinHeap()
    inserted = extracted = 0
    for _ in range(300):
        if h and rng.random() < 0.4:
            h.extract_minimum()
            extracted += 1
        else:
            h.insert(rng.randint(-50, 50))
            inserted += 1
        assert_heap_property(h.breadth_first_view())
        assert len(h) == inserted - extracted


@pytest.mark.parametrize("seed", range(5))
def test_extraction_order_is_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 1000) for _ in range(200)]
    h = MinHeap(values)

    out = []
    while h:
        out.append(h.extract_minimum())
    assert out == sorted(values)

    with pytest.raises(EmptyHeapError):
        h.extract_minimum()
    assert len(h) == 0


def test_size_after_inserts_and_extractions():
    h = MinHeap(range(20, 0, -1))
    for _ in range(7):
        h.extract_minimum()
    assert len(h) == 13
    assert h.peek() == 8


def test_duplicates_are_kept():
    h = MinHeap([4, 4, 1, 4, 1])
    assert [h.extract_minimum() for _ in range(len(h))] == [1, 1, 4, 4, 4]
