"""Stack push and pull instructions."""

from __future__ import annotations

from .core import CPUCore
from .memory import Memory
from .status import ProcessorStatus

STACK_PAGE = 0x0100


class StackMixin(CPUCore):
    """Push and pull of the accumulator and status; each returns cycles used."""

    def pha(self, memory: Memory) -> int:
        memory[STACK_PAGE | self.sp] = self.a
        return 2

    def php(self, memory: Memory) -> int:
        memory[STACK_PAGE | self.sp] = int(self.status)
        return 2

    def pla(self, memory: Memory) -> int:
        self.a = memory[STACK_PAGE | self.pc]
        self.status.set_nz(self.a)
        return 3

    def plp(self, memory: Memory) -> int:
        self.status = ProcessorStatus(memory[STACK_PAGE | self.sp])
        return 3