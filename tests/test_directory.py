import pytest

from oslabsim.directory import (
    DirectoryFullError,
    SingleLevelDirectory,
    TwoLevelDirectory,
)


def test_single_level_create_and_search():
    directory = SingleLevelDirectory()
    directory.create("SACC")
    assert directory.search("SACC") is True
    assert directory.search("OTHER") is False


def test_single_level_files_keep_creation_order():
    directory = SingleLevelDirectory()
    for name in ["b", "a", "c"]:
        directory.create(name)
    assert directory.files() == ["b", "a", "c"]


def test_single_level_files_returns_copy():
    directory = SingleLevelDirectory()
    directory.create("x")
    directory.files().append("y")
    assert directory.files() == ["x"]


def test_single_level_default_capacity_is_twenty():
    directory = SingleLevelDirectory()
    for number in range(20):
        directory.create(f"f{number}")
    with pytest.raises(DirectoryFullError):
        directory.create("extra")
    assert len(directory.files()) == 20


def test_single_level_negative_capacity_rejected():
    with pytest.raises(ValueError):
        SingleLevelDirectory(-1)


def test_two_level_listing_matches_sample():
    directory = TwoLevelDirectory(["CHARAN", "CHETHAN"])
    directory.create(1, "HII")
    assert directory.listing() == (
        "Files for user CHARAN:\nHII\n\nFiles for user CHETHAN:\nNo files."
    )


def test_two_level_search_is_per_user():
    directory = TwoLevelDirectory(["CHARAN", "CHETHAN"])
    directory.create(1, "HII")
    assert directory.search(1, "HII") is True
    assert directory.search(2, "HII") is False
    assert directory.files(2) == []


def test_two_level_invalid_user_number():
    directory = TwoLevelDirectory(["CHARAN"])
    with pytest.raises(ValueError):
        directory.create(0, "a")
    with pytest.raises(ValueError):
        directory.search(2, "a")


def test_two_level_user_directory_full():
    directory = TwoLevelDirectory(["a", "b"], capacity=2)
    directory.create(1, "x")
    directory.create(1, "y")
    with pytest.raises(DirectoryFullError):
        directory.create(1, "z")
    directory.create(2, "z")
    assert directory.files(1) == ["x", "y"]
    assert directory.files(2) == ["z"]