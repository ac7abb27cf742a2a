import pytest

from oslabsim.file_allocation import AllocationError, Disk


def test_sequential_sample():
    disk = Disk(20)
    assert list(disk.allocate_sequential(2, 5)) == [2, 3, 4, 5, 6]
    assert list(disk.allocate_sequential(7, 4)) == [7, 8, 9, 10]
    with pytest.raises(AllocationError):
        disk.allocate_sequential(5, 3)
    assert disk.format_status() == (
        "0:0  1:0  2:1  3:1  4:1  5:1  6:1  7:1  \n"
        "8:1  9:1  10:1  11:0  12:0  13:0  14:0  15:0  \n"
        "16:0  17:0  18:0  19:0  "
    )


def test_sequential_past_end_of_disk():
    disk = Disk(10)
    with pytest.raises(AllocationError):
        disk.allocate_sequential(8, 3)
    assert not disk.is_allocated(8)


def test_indexed_sample():
    disk = Disk(16)
    assert disk.allocate_indexed(3, [5, 6, 8, 10, 12]) == (5, 6, 8, 10, 12)
    assert disk.index_blocks[3] == (5, 6, 8, 10, 12)
    assert disk.format_status() == (
        "0:0  1:0  2:0  3:1  4:0  5:1  6:1  7:0  \n"
        "8:1  9:0  10:1  11:0  12:1  13:0  14:0  15:0  \n"
    )


def test_indexed_failure_leaves_disk_unchanged():
    disk = Disk(16)
    with pytest.raises(AllocationError):
        disk.allocate_indexed(3, [5, 16])
    assert not disk.is_allocated(3)
    assert not disk.is_allocated(5)


def test_indexed_rejects_reused_index():
    disk = Disk(16)
    disk.allocate_indexed(3, [4])
    with pytest.raises(AllocationError):
        disk.allocate_indexed(3, [7])


def test_indexed_rejects_block_equal_to_index():
    disk = Disk(16)
    with pytest.raises(AllocationError):
        disk.allocate_indexed(3, [3])


def test_indexed_limit():
    disk = Disk(50)
    with pytest.raises(AllocationError):
        disk.allocate_indexed(0, range(1, 22))


def test_linked_sample():
    disk = Disk(16)
    disk.allocate_linked([2, 5, 7, 9])
    assert disk.chain(2) == [2, 5, 7, 9]
    assert disk.format_status().startswith("0:0  1:0  2:1  3:0  4:0  5:1  6:0  7:1  \n")


def test_linked_rejects_allocated_block():
    disk = Disk(16)
    disk.allocate_sequential(7, 1)
    with pytest.raises(AllocationError):
        disk.allocate_linked([2, 5, 7])
    assert not disk.is_allocated(2)


def test_linked_rejects_duplicates_and_empty():
    disk = Disk(16)
    with pytest.raises(AllocationError):
        disk.allocate_linked([2, 5, 2])
    with pytest.raises(AllocationError):
        disk.allocate_linked([])


def test_allocated_count_matches_status():
    disk = Disk(24)
    disk.allocate_sequential(0, 3)
    disk.allocate_linked([10, 4, 20])
    status = disk.format_status()
    assert status.count(":1") == sum(disk.is_allocated(b) for b in range(24))
    assert status.count("\n") == 3


def test_is_allocated_out_of_range():
    with pytest.raises(ValueError):
        Disk(8).is_allocated(8)


def test_chain_of_free_block():
    with pytest.raises(ValueError):
        Disk(8).chain(1)


def test_disk_size_must_be_positive():
    with pytest.raises(ValueError):
        Disk(0)