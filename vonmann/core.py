"""Registers and addressing-mode helpers shared by all instruction groups."""

from __future__ import annotations

from typing import NamedTuple

from .memory import Memory
from .status import ProcessorStatus

RESET_VECTOR = 0xFFFC
STACK_TOP = 0xFF


class IndexedAddress(NamedTuple):
    """An effective address and whether indexing crossed a page boundary."""

    address: int
    page_crossed: bool


def _indexed(base: int, offset: int) -> IndexedAddress:
    effective = (base + offset) & 0xFFFF
    return IndexedAddress(effective, (base & 0xFF00) != (effective & 0xFF00))


class CPUCore:
    """Register file of the 6502 together with instruction fetching and addressing."""

    def __init__(self) -> None:
        self.pc = RESET_VECTOR
        self.sp = STACK_TOP
        self.a = 0
        self.x = 0
        self.y = 0
        self.status = ProcessorStatus()

    def fetch(self, memory: Memory) -> int:
        """Read the byte at the program counter and advance it."""
        value = self.read(self.pc, memory)
        self.pc = (self.pc + 1) & 0xFFFF
        return value

    def read(self, address: int, memory: Memory) -> int:
        """Read one byte from memory."""
        return memory[address]

    def fetch_address(self, memory: Memory) -> int:
        """Fetch a little-endian 16-bit operand."""
        low = self.fetch(memory)
        high = self.fetch(memory)
        return (high << 8) | low

    def zero_page_indexed(self, memory: Memory, offset: int) -> int:
        """Fetch a zero-page operand and add an offset, wrapping within page zero."""
        return (self.fetch(memory) + offset) & 0xFF

    def absolute_indexed(self, memory: Memory, offset: int) -> IndexedAddress:
        """Fetch an absolute operand and add an offset."""
        return _indexed(self.fetch_address(memory), offset)

    def indexed_indirect(self, memory: Memory) -> int:
        """Resolve an (zp,X) operand to the address it points at."""
        pointer = (self.fetch(memory) + self.x) & 0xFF
        low = memory[pointer]
        high = memory[(pointer + 1) & 0xFF]
        return (high << 8) | low

    def indirect_indexed(self, memory: Memory) -> IndexedAddress:
        """Resolve a (zp),Y operand to its effective address."""
        pointer = self.fetch(memory)
        low = memory[pointer]
        high = memory[(pointer + 1) & 0xFF]
        return _indexed((high << 8) | low, self.y)