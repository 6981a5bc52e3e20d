"""The 6502 processor status register."""

from __future__ import annotations

from enum import IntFlag


class StatusFlag(IntFlag):
    """Bits of the processor status register."""

    CARRY = 1 << 0
    ZERO = 1 << 1
    INTERRUPT_DISABLE = 1 << 2
    DECIMAL_MODE = 1 << 3
    BREAK_COMMAND = 1 << 4
    OVERFLOW = 1 << 6
    NEGATIVE = 1 << 7


class ProcessorStatus:
    """An 8-bit status register whose flags read and write as booleans."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        value = int(value)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"status value {value} out of range 0..255")
        self._value = value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ProcessorStatus):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"ProcessorStatus({self._value:#04x})"

    def _get(self, flag: StatusFlag) -> bool:
        return bool(self._value & flag)

    def _put(self, flag: StatusFlag, on: bool) -> None:
        if on:
            self._value |= int(flag)
        else:
            self._value &= ~int(flag) & 0xFF

    @property
    def carry(self) -> bool:
        """Carry flag (bit 0)."""
        return self._get(StatusFlag.CARRY)

    @carry.setter
    def carry(self, on: bool) -> None:
        self._put(StatusFlag.CARRY, on)

    @property
    def zero(self) -> bool:
        """Zero flag (bit 1)."""
        return self._get(StatusFlag.ZERO)

    @zero.setter
    def zero(self, on: bool) -> None:
        self._put(StatusFlag.ZERO, on)

    @property
    def interrupt_disable(self) -> bool:
        """Interrupt disable (bit 2)."""
        return self._get(StatusFlag.INTERRUPT_DISABLE)

    @interrupt_disable.setter
    def interrupt_disable(self, on: bool) -> None:
        self._put(StatusFlag.INTERRUPT_DISABLE, on)

    @property
    def decimal_mode(self) -> bool:
        """Decimal mode (bit 3)."""
        return self._get(StatusFlag.DECIMAL_MODE)

    @decimal_mode.setter
    def decimal_mode(self, on: bool) -> None:
        self._put(StatusFlag.DECIMAL_MODE, on)

    @property
    def break_command(self) -> bool:
        """Break command (bit 4)."""
        return self._get(StatusFlag.BREAK_COMMAND)

    @break_command.setter
    def break_command(self, on: bool) -> None:
        self._put(StatusFlag.BREAK_COMMAND, on)

    @property
    def overflow(self) -> bool:
        """Overflow flag (bit 6)."""
        return self._get(StatusFlag.OVERFLOW)

    @overflow.setter
    def overflow(self, on: bool) -> None:
        self._put(StatusFlag.OVERFLOW, on)

    @property
    def negative(self) -> bool:
        """Negative flag (bit 7)."""
        return self._get(StatusFlag.NEGATIVE)

    @negative.setter
    def negative(self, on: bool) -> None:
        self._put(StatusFlag.NEGATIVE, on)

    def set_nz(self, value: int) -> None:
        """Set the zero and negative flags from an 8-bit result."""
        self.zero = value == 0
        self.negative = bool(value & 0b1000_0000)