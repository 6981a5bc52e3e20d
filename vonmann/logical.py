"""Logical instructions: AND, EOR, ORA and BIT."""

from __future__ import annotations

import operator
from typing import Callable

from .core import CPUCore
from .load import (
    _absolute,
    _absolute_indexed,
    _immediate,
    _indexed_indirect,
    _indirect_indexed,
    _zero_page,
    _zero_page_indexed,
)
from .memory import Memory


class LogicalMixin(CPUCore):
    """Bitwise operations on the accumulator; each returns cycles used after the opcode."""

    def _combine(self, op: Callable[[int, int], int], operand: tuple[int, int]) -> int:
        value, cycles = operand
        self.a = op(self.a, value) & 0xFF
        self.status.set_nz(self.a)
        return cycles

    def _bit(self, value: int) -> None:
        # Flags are only ever raised here, never cleared.
        if self.a & value == 0:
            self.status.zero = True
        if value & 0b1000_0000:
            self.status.negative = True
        if value & 0b0100_0000:
            self.status.overflow = True

    # AND
    def and_im(self, memory: Memory) -> int:
        return self._combine(operator.and_, _immediate(self, memory))

    def and_zp(self, memory: Memory) -> int:
        return self._combine(operator.and_, _zero_page(self, memory))

    def and_zpx(self, memory: Memory) -> int:
        return self._combine(operator.and_, _zero_page_indexed(self, memory, self.x))

    def and_abs(self, memory: Memory) -> int:
        return self._combine(operator.and_, _absolute(self, memory))

    def and_absx(self, memory: Memory) -> int:
        return self._combine(operator.and_, _absolute_indexed(self, memory, self.x))

    def and_absy(self, memory: Memory) -> int:
        return self._combine(operator.and_, _absolute_indexed(self, memory, self.y))

    def and_indx(self, memory: Memory) -> int:
        return self._combine(operator.and_, _indexed_indirect(self, memory))

    def and_indy(self, memory: Memory) -> int:
        return self._combine(operator.and_, _indirect_indexed(self, memory))

    # Exclusive OR
    def eor_im(self, memory: Memory) -> int:
        return self._combine(operator.xor, _immediate(self, memory))

    def eor_zp(self, memory: Memory) -> int:
        return self._combine(operator.xor, _zero_page(self, memory))

    def eor_zpx(self, memory: Memory) -> int:
        return self._combine(operator.xor, _zero_page_indexed(self, memory, self.x))

    def eor_abs(self, memory: Memory) -> int:
        return self._combine(operator.xor, _absolute(self, memory))

    def eor_absx(self, memory: Memory) -> int:
        return self._combine(operator.xor, _absolute_indexed(self, memory, self.x))

    def eor_absy(self, memory: Memory) -> int:
        return self._combine(operator.xor, _absolute_indexed(self, memory, self.y))

    def eor_indx(self, memory: Memory) -> int:
        return self._combine(operator.xor, _indexed_indirect(self, memory))

    def eor_indy(self, memory: Memory) -> int:
        return self._combine(operator.xor, _indirect_indexed(self, memory))

    # Inclusive OR
    def ora_im(self, memory: Memory) -> int:
        return self._combine(operator.or_, _immediate(self, memory))

    def ora_zp(self, memory: Memory) -> int:
        return self._combine(operator.or_, _zero_page(self, memory))

    def ora_zpx(self, memory: Memory) -> int:
        return self._combine(operator.or_, _zero_page_indexed(self, memory, self.x))

    def ora_abs(self, memory: Memory) -> int:
        return self._combine(operator.or_, _absolute(self, memory))

    def ora_absx(self, memory: Memory) -> int:
        return self._combine(operator.or_, _absolute_indexed(self, memory, self.x))

    def ora_absy(self, memory: Memory) -> int:
        return self._combine(operator.or_, _absolute_indexed(self, memory, self.y))

    def ora_indx(self, memory: Memory) -> int:
        return self._combine(operator.or_, _indexed_indirect(self, memory))

    def ora_indy(self, memory: Memory) -> int:
        return self._combine(operator.or_, _indirect_indexed(self, memory))

    # Bit test
    def bit_zp(self, memory: Memory) -> int:
        value, cycles = _zero_page(self, memory)
        self._bit(value)
        return cycles

    def bit_abs(self, memory: Memory) -> int:
        value, cycles = _absolute(self, memory)
        self._bit(value)
        return cycles