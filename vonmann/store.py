"""Store instructions: STA, STX and STY in all their addressing modes."""

from __future__ import annotations

from .core import CPUCore
from .memory import Memory


class StoreMixin(CPUCore):
    """Register stores; each method returns the cycles it used after the opcode."""

    # Accumulator
    def sta_zp(self, memory: Memory) -> int:
        memory[self.fetch(memory)] = self.a
        return 2

    def sta_zpx(self, memory: Memory) -> int:
        memory[self.zero_page_indexed(memory, self.x)] = self.a
        return 3

    def sta_abs(self, memory: Memory) -> int:
        memory[self.fetch_address(memory)] = self.a
        return 3

    def sta_absx(self, memory: Memory) -> int:
        memory[self.absolute_indexed(memory, self.x).address] = self.a
        return 4

    def sta_absy(self, memory: Memory) -> int:
        memory[self.absolute_indexed(memory, self.y).address] = self.a
        return 4

    def sta_indx(self, memory: Memory) -> int:
        memory[self.indexed_indirect(memory)] = self.a
        return 5

    def sta_indy(self, memory: Memory) -> int:
        memory[self.indirect_indexed(memory).address] = self.a
        return 5

    # X register
    def stx_zp(self, memory: Memory) -> int:
        memory[self.fetch(memory)] = self.x
        return 2

    def stx_zpy(self, memory: Memory) -> int:
        memory[self.zero_page_indexed(memory, self.y)] = self.x
        return 3

    def stx_abs(self, memory: Memory) -> int:
        memory[self.fetch_address(memory)] = self.x
        return 3

    # Y register
    def sty_zp(self, memory: Memory) -> int:
        memory[self.fetch(memory)] = self.y
        return 2

    def sty_zpx(self, memory: Memory) -> int:
        memory[self.zero_page_indexed(memory, self.x)] = self.y
        return 3

    def sty_abs(self, memory: Memory) -> int:
        memory[self.fetch_address(memory)] = self.y
        return 3