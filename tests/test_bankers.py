import pytest

from oslabsim.bankers import format_need, need_matrix, safe_sequence

ALLOCATION = [
    [1, 1, 2, 4],
    [2, 2, 6, 5],
    [0, 2, 3, 5],
    [2, 5, 8, 6],
]
MAXIMUM = [
    [1, 2, 5, 4],
    [0, 4, 8, 5],
    [3, 6, 9, 5],
    [1, 4, 8, 9],
]
AVAILABLE = [5, 7, 8, 6]


def test_sample_need_matrix():
    assert need_matrix(ALLOCATION, MAXIMUM) == [
        [0, 1, 3, 0],
        [-2, 2, 2, 0],
        [3, 4, 6, 0],
        [-1, -1, 0, 3],
    ]


def test_sample_format_need():
    text = format_need(need_matrix(ALLOCATION, MAXIMUM))
    assert text.splitlines() == [
        "0\t1\t3\t0\t",
        "-2\t2\t2\t0\t",
        "3\t4\t6\t0\t",
        "-1\t-1\t0\t3\t",
    ]
    assert text.endswith("\n")


def test_sample_safe_sequence():
    assert safe_sequence(ALLOCATION, MAXIMUM, AVAILABLE) == [0, 1, 2, 3]


def test_unsafe_state_returns_none():
    assert safe_sequence([[0], [0]], [[2], [3]], [1]) is None


def test_later_process_can_unblock_earlier_one():
    allocation = [[0], [4]]
    maximum = [[5], [4]]
    assert safe_sequence(allocation, maximum, [1]) == [1, 0]


def test_need_plus_allocation_gives_maximum():
    need = need_matrix(ALLOCATION, MAXIMUM)
    for need_row, alloc_row, max_row in zip(need, ALLOCATION, MAXIMUM):
        assert [n + a for n, a in zip(need_row, alloc_row)] == list(max_row)


def test_mismatched_process_count_rejected():
    with pytest.raises(ValueError):
        need_matrix(ALLOCATION, MAXIMUM[:2])


def test_mismatched_resource_count_rejected():
    with pytest.raises(ValueError):
        safe_sequence(ALLOCATION, MAXIMUM, [5, 7, 8])