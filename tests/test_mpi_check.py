import pytest

pytest.importorskip("mpi4py")

from comma_sort.cases import TEST_CASES  # noqa: E402
from comma_sort.mpi_check import chunkify, mpi_check  # noqa: E402


def test_chunkify_exact_count():
    parts = chunkify(list("abcde"), 3)
    assert len(parts) == 3
    assert [x for p in parts for x in p] == list("abcde")
    assert chunkify([], 4) == [[], [], [], []]


def test_single_rank_check():
    results = mpi_check(TEST_CASES)
    assert [r.line for r in results] == TEST_CASES
    assert all(r.ok for r in results)
