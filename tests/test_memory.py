import pytest

from vonmann.memory import MAX_MEM, Memory


@pytest.fixture
def ram():
    return Memory()


def test_size_is_64_kib(ram):
    assert len(ram) == MAX_MEM == 1024 * 64


@pytest.mark.parametrize("address", [0, 0xFFFF])
def test_new_memory_is_zeroed(ram, address):
    assert ram[address] == 0


def test_write_then_read_round_trip(ram):
    writes = {0xFFFC: 0xA5, 0xFFFD: 0x84, 0x0084: 0x42}
    for address, value in writes.items():
        ram[address] = value
    assert {address: ram[address] for address in writes} == writes


def test_write_does_not_touch_neighbours(ram):
    ram[0x1000] = 0xFF
    assert (ram[0x0FFF], ram[0x1000], ram[0x1001]) == (0, 0xFF, 0)


def test_overwrite_replaces_value(ram):
    ram[0x20] = 0x11
    ram[0x20] = 0x22
    assert ram[0x20] == 0x22


@pytest.mark.parametrize("address", [MAX_MEM, MAX_MEM + 1, -1])
def test_read_out_of_range_raises(ram, address):
    ram[MAX_MEM - 1] = 0x07
    with pytest.raises(IndexError):
        ram[address]
    assert ram[MAX_MEM - 1] == 0x07


@pytest.mark.parametrize("address", [MAX_MEM, -1])
def test_write_out_of_range_raises(ram, address):
    with pytest.raises(IndexError):
        ram[address] = 1
    assert (ram[0], ram[MAX_MEM - 1]) == (0, 0)


@pytest.mark.parametrize("value", [256, -1])
def test_write_value_not_a_byte_raises(ram, value):
    with pytest.raises(ValueError):
        ram[0x10] = value
    assert ram[0x10] == 0