"""Load instructions: LDA, LDX and LDY in all their addressing modes."""

from __future__ import annotations

from .core import CPUCore
from .memory import Memory


def _immediate(cpu: CPUCore, memory: Memory) -> tuple[int, int]:
    return cpu.fetch(memory), 1


def _zero_page(cpu: CPUCore, memory: Memory) -> tuple[int, int]:
    return cpu.read(cpu.fetch(memory), memory), 2


def _zero_page_indexed(cpu: CPUCore, memory: Memory, offset: int) -> tuple[int, int]:
    return memory[cpu.zero_page_indexed(memory, offset)], 3


def _absolute(cpu: CPUCore, memory: Memory) -> tuple[int, int]:
    return cpu.read(cpu.fetch_address(memory), memory), 3


def _absolute_indexed(cpu: CPUCore, memory: Memory, offset: int) -> tuple[int, int]:
    target = cpu.absolute_indexed(memory, offset)
    return cpu.read(target.address, memory), 4 if target.page_crossed else 3


def _indexed_indirect(cpu: CPUCore, memory: Memory) -> tuple[int, int]:
    return cpu.read(cpu.indexed_indirect(memory), memory), 5


def _indirect_indexed(cpu: CPUCore, memory: Memory) -> tuple[int, int]:
    target = cpu.indirect_indexed(memory)
    return cpu.read(target.address, memory), 5 if target.page_crossed else 4


class LoadMixin(CPUCore):
    """Register loads; each method returns the cycles it used after the opcode."""

    def _load_a(self, value: int, cycles: int) -> int:
        self.a = value
        self.status.set_nz(value)
        return cycles

    def _load_x(self, value: int, cycles: int) -> int:
        self.x = value
        self.status.set_nz(value)
        return cycles

    def _load_y(self, value: int, cycles: int) -> int:
        self.y = value
        self.status.set_nz(value)
        return cycles

    # Accumulator
    def lda_im(self, memory: Memory) -> int:
        return self._load_a(*_immediate(self, memory))

    def lda_zp(self, memory: Memory) -> int:
        return self._load_a(*_zero_page(self, memory))

    def lda_zpx(self, memory: Memory) -> int:
        return self._load_a(*_zero_page_indexed(self, memory, self.x))

    def lda_abs(self, memory: Memory) -> int:
        return self._load_a(*_absolute(self, memory))

    def lda_absx(self, memory: Memory) -> int:
        return self._load_a(*_absolute_indexed(self, memory, self.x))

    def lda_absy(self, memory: Memory) -> int:
        return self._load_a(*_absolute_indexed(self, memory, self.y))

    def lda_indx(self, memory: Memory) -> int:
        return self._load_a(*_indexed_indirect(self, memory))

    def lda_indy(self, memory: Memory) -> int:
        return self._load_a(*_indirect_indexed(self, memory))

    # X register
    def ldx_im(self, memory: Memory) -> int:
        return self._load_x(*_immediate(self, memory))

    def ldx_zp(self, memory: Memory) -> int:
        return self._load_x(*_zero_page(self, memory))

    def ldx_zpy(self, memory: Memory) -> int:
        return self._load_x(*_zero_page_indexed(self, memory, self.y))

    def ldx_abs(self, memory: Memory) -> int:
        return self._load_x(*_absolute(self, memory))

    def ldx_absy(self, memory: Memory) -> int:
        return self._load_x(*_absolute_indexed(self, memory, self.y))

    # Y register
    def ldy_im(self, memory: Memory) -> int:
        return self._load_y(*_immediate(self, memory))

    def ldy_zp(self, memory: Memory) -> int:
        return self._load_y(*_zero_page(self, memory))

    def ldy_zpx(self, memory: Memory) -> int:
        return self._load_y(*_zero_page_indexed(self, memory, self.x))

    def ldy_abs(self, memory: Memory) -> int:
        return self._load_y(*_absolute(self, memory))

    def ldy_absx(self, memory: Memory) -> int:
        return self._load_y(*_absolute_indexed(self, memory, self.x))