import pytest

from oslabsim.ipc import message_queue_exchange, shared_memory_exchange


def test_shared_memory_round_trip():
    text = "Hello from Child via Shared Memory"
    assert shared_memory_exchange(text) == text


def test_shared_memory_empty_message():
    assert shared_memory_exchange("") == ""


def test_shared_memory_rejects_oversized_message():
    with pytest.raises(ValueError):
        shared_memory_exchange("x" * 64)


def test_shared_memory_largest_message_fits():
    text = "y" * 63
    assert shared_memory_exchange(text) == text


def test_message_queue_round_trip():
    text = "Hello from Child via Message Queue!"
    assert message_queue_exchange(text) == text


def test_message_queue_custom_type():
    assert message_queue_exchange("abc", 7) == "abc"


def test_message_queue_rejects_non_positive_type():
    with pytest.raises(ValueError):
        message_queue_exchange("abc", 0)


def test_message_queue_rejects_oversized_message():
    with pytest.raises(ValueError):
        message_queue_exchange("z" * 100)