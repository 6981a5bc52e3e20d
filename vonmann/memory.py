"""Flat 64 KiB byte-addressable memory."""

from __future__ import annotations

MAX_MEM = 1024 * 64


class Memory:
    """A 64 KiB block of bytes, zeroed on creation and indexed by address."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data = bytearray(MAX_MEM)

    @staticmethod
    def _check_address(address: int) -> int:
        address = int(address)
        if not 0 <= address < MAX_MEM:
            raise IndexError(f"address {address:#x} outside memory of {MAX_MEM} bytes")
        return address

    def __getitem__(self, address: int) -> int:
        return self._data[self._check_address(address)]

    def __setitem__(self, address: int, value: int) -> None:
        value = int(value)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value {value} out of range 0..255")
        self._data[self._check_address(address)] = value

    def __len__(self) -> int:
        return len(self._data)