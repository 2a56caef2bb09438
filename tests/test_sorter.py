import random

from comma_sort.buffer import NumberBuffer
from comma_sort.sorter import bubble_sort


def test_correctness():
    """Compare against sorted() on a fixed set of small inputs."""
    tests = [
        [],
        [5],
        [3, 1, 2],
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [5, 5, 5, 5],
        [5, -3, 5, 0],
        [10, 0, -100, 7, 7, 3, 999],
        [170, 45, 75, 90, 802, 24, 2, 66],
    ]
    for arr in tests:
        original = list(arr)
        assert bubble_sort(arr) is None
        assert arr == sorted(original), original


def test_random_permutation_preserved():
    rng = random.Random(1234)
    for _ in range(200):
        arr = [rng.randint(-50, 50) for _ in range(rng.randint(0, 16))]
        original = list(arr)
        bubble_sort(arr)
        assert all(arr[i] <= arr[i + 1] for i in range(len(arr) - 1))
        assert sorted(original) == arr


def test_idempotent():
    arr = [-4, 0, 0, 3, 9]
    bubble_sort(arr)
    assert arr == [-4, 0, 0, 3, 9]


def test_length_limits_sorted_prefix():
    arr = [3, 2, 1, 0]
    bubble_sort(arr, 3)
    assert arr == [1, 2, 3, 0]


def test_degenerate_lengths_do_not_touch():
    arr = [2, 1]
    bubble_sort(arr, 0)
    assert arr == [2, 1]
    bubble_sort(arr, 1)
    assert arr == [2, 1]


def test_sorts_number_buffer_in_place():
    buf = NumberBuffer.from_values([9, -1, 4])
    bubble_sort(buf, len(buf))
    assert buf.to_list() == [-1, 4, 9]
    assert len(buf) == 3
