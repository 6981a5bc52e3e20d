"""The MOS 6502 processor: opcode table and the fetch-execute loop."""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence

from .arithmetic import ArithmeticMixin
from .load import LoadMixin
from .logical import LogicalMixin
from .memory import Memory
from .stack import StackMixin
from .store import StoreMixin
from .transfer import TransferMixin


class Opcode(IntEnum):
    """Opcodes understood by the processor."""

    LDA_IM = 0xA9
    LDA_ZP = 0xA5
    LDA_ZPX = 0xB5
    LDA_ABS = 0xAD
    LDA_ABSX = 0xBD
    LDA_ABSY = 0xB9
    LDA_INDX = 0xA1
    LDA_INDY = 0xB1
    LDX_IM = 0xA2
    LDX_ZP = 0xA6
    LDX_ZPY = 0xB6
    LDX_ABS = 0xAE
    LDX_ABSY = 0xBE
    LDY_IM = 0xA0
    LDY_ZP = 0xA4
    LDY_ZPX = 0xB4
    LDY_ABS = 0xAC
    LDY_ABSX = 0xBC
    STA_ZP = 0x85
    STA_ZPX = 0x95
    STA_ABS = 0x8D
    STA_ABSX = 0x9D
    STA_ABSY = 0x99
    STA_INDX = 0x81
    STA_INDY = 0x91
    STX_ZP = 0x86
    STX_ZPY = 0x96
    STX_ABS = 0x8E
    STY_ZP = 0x84
    STY_ZPX = 0x94
    STY_ABS = 0x8C
    TAX = 0xAA
    TAY = 0xA8
    TSX = 0xBA
    TXA = 0x8A
    TXS = 0x9A
    TYA = 0x98
    PHA = 0x48
    PHP = 0x08
    PLA = 0x68
    PLP = 0x28
    AND_IM = 0x29
    AND_ZP = 0x25
    AND_ZPX = 0x35
    AND_ABS = 0x2D
    AND_ABSX = 0x3D
    AND_ABSY = 0x39
    AND_INDX = 0x21
    AND_INDY = 0x31
    EOR_IM = 0x49
    EOR_ZP = 0x45
    EOR_ZPX = 0x55
    EOR_ABS = 0x4D
    EOR_ABSX = 0x5D
    EOR_ABSY = 0x59
    EOR_INDX = 0x41
    EOR_INDY = 0x51
    ORA_IM = 0x09
    ORA_ZP = 0x05
    ORA_ZPX = 0x15
    ORA_ABS = 0x0D
    ORA_ABSX = 0x1D
    ORA_ABSY = 0x19
    ORA_INDX = 0x01
    ORA_INDY = 0x11
    BIT_ZP = 0x24
    BIT_ABS = 0x2C
    ADC_IM = 0x69
    ADC_ZP = 0x65
    ADC_ZPX = 0x75
    ADC_ABS = 0x6D
    ADC_ABSX = 0x7D
    ADC_ABSY = 0x79
    ADC_INDX = 0x61
    ADC_INDY = 0x71
    SBC_IM = 0xE9
    SBC_ZP = 0xE5
    SBC_ZPX = 0xF5
    SBC_ABS = 0xED
    SBC_ABSX = 0xFD
    SBC_ABSY = 0xF9
    SBC_INDX = 0xE1
    SBC_INDY = 0xF1
    CMP_IM = 0xC9
    CMP_ZP = 0xC5
    CMP_ZPX = 0xD5
    CMP_ABS = 0xCD
    CMP_ABSX = 0xDD
    CMP_ABSY = 0xD9
    CMP_INDX = 0xC1
    CMP_INDY = 0xD1
    CPX_IM = 0xE0
    CPX_ZP = 0xE4
    CPX_ABS = 0xEC
    CPY_IM = 0xC0
    CPY_ZP = 0xC4
    CPY_ABS = 0xCC


# Instructions that touch only registers and take no memory argument.
_IMPLIED = frozenset(
    {Opcode.TAX, Opcode.TAY, Opcode.TSX, Opcode.TXA, Opcode.TXS, Opcode.TYA}
)


class CycleBudgetExceeded(RuntimeError):
    """Raised when an instruction needs more cycles than remain."""


class MOS6502(
    LoadMixin,
    StoreMixin,
    TransferMixin,
    StackMixin,
    LogicalMixin,
    ArithmeticMixin,
):
    """A 6502 processor that executes instructions from a Memory."""

    def __init__(self) -> None:
        super().__init__()

    def execute(self, cycles: int, memory: Memory) -> None:
        """Run instructions until the given number of cycles is used up.

        Unknown opcodes are reported and skipped at the cost of one cycle.
        Raises CycleBudgetExceeded if an instruction overruns the budget.
        """
        if cycles < 0:
            raise ValueError(f"cycle count {cycles} must not be negative")
        while cycles > 0:
            instruction = self.fetch(memory)
            cycles -= 1
            try:
                opcode = Opcode(instruction)
            except ValueError:
                print(f"Unknown instruction: 0x{instruction:X}")
                continue
            handler = getattr(self, opcode.name.lower())
            used = handler() if opcode in _IMPLIED else handler(memory)
            if used > cycles:
                raise CycleBudgetExceeded(
                    f"{opcode.name} needs {used} more cycles but only {cycles} remain"
                )
            cycles -= used


def main(argv: Sequence[str] | None = None) -> int:
    """Run a short demonstration program: a zero-page load at the reset vector."""
    cpu = MOS6502()
    memory = Memory()
    memory[0xFFFC] = Opcode.LDA_ZP
    memory[0xFFFD] = 0x84
    memory[0x0084] = 0x42
    cpu.execute(3, memory)
    return 0