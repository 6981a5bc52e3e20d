"""Register transfer instructions."""

from __future__ import annotations

from .core import CPUCore


class TransferMixin(CPUCore):
    """Register-to-register transfers; each returns the cycles used after the opcode."""

    def tax(self) -> int:
        self.x = self.a
        self.status.set_nz(self.a)
        return 1

    def tay(self) -> int:
        self.y = self.a
        self.status.set_nz(self.a)
        return 1

    def tsx(self) -> int:
        self.x = self.sp
        self.status.set_nz(self.sp)
        return 1

    def txa(self) -> int:
        self.a = self.x
        self.status.set_nz(self.x)
        return 1

    def txs(self) -> int:
        self.sp = self.x
        self.status.set_nz(self.x)
        return 1

    def tya(self) -> int:
        self.a = self.y
        self.status.set_nz(self.y)
        return 1