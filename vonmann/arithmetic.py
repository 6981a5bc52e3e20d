"""Arithmetic instructions: ADC, SBC and the compares CMP, CPX, CPY."""

from __future__ import annotations

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


def _sign(value: int) -> bool:
    return bool(value & 0x80)


class ArithmeticMixin(CPUCore):
    """Binary add, subtract and compare; each returns cycles used after the opcode."""

    def _adc(self, operand: tuple[int, int]) -> int:
        value, cycles = operand
        result = self.a + value + int(self.status.carry)
        self.status.carry = result > 0xFF
        a_sign, value_sign, result_sign = _sign(self.a), _sign(value), _sign(result)
        self.status.overflow = a_sign == value_sign and a_sign != result_sign
        self.a = result & 0xFF
        self.status.set_nz(self.a)
        return cycles

    def _sbc(self, operand: tuple[int, int]) -> int:
        value, cycles = operand
        result = self.a - value - (1 - int(self.status.carry))
        self.status.carry = result >= 0
        a_sign, value_sign, result_sign = _sign(self.a), _sign(value), _sign(result & 0xFF)
        self.status.overflow = a_sign != value_sign and a_sign != result_sign
        self.a = result & 0xFF
        self.status.set_nz(self.a)
        return cycles

    def _compare(self, register: int, operand: tuple[int, int]) -> int:
        value, cycles = operand
        self.status.carry = register >= value
        self.status.zero = register == value
        self.status.negative = _sign((register - value) & 0xFF)
        return cycles

    # Add with carry
    def adc_im(self, memory: Memory) -> int:
        return self._adc(_immediate(self, memory))

    def adc_zp(self, memory: Memory) -> int:
        return self._adc(_zero_page(self, memory))

    def adc_zpx(self, memory: Memory) -> int:
        return self._adc(_zero_page_indexed(self, memory, self.x))

    def adc_abs(self, memory: Memory) -> int:
        return self._adc(_absolute(self, memory))

    def adc_absx(self, memory: Memory) -> int:
        return self._adc(_absolute_indexed(self, memory, self.x))

    def adc_absy(self, memory: Memory) -> int:
        return self._adc(_absolute_indexed(self, memory, self.y))

    def adc_indx(self, memory: Memory) -> int:
        return self._adc(_indexed_indirect(self, memory))

    def adc_indy(self, memory: Memory) -> int:
        return self._adc(_indirect_indexed(self, memory))

    # Subtract with carry
    def sbc_im(self, memory: Memory) -> int:
        return self._sbc(_immediate(self, memory))

    def sbc_zp(self, memory: Memory) -> int:
        return self._sbc(_zero_page(self, memory))

    def sbc_zpx(self, memory: Memory) -> int:
        return self._sbc(_zero_page_indexed(self, memory, self.x))

    def sbc_abs(self, memory: Memory) -> int:
        return self._sbc(_absolute(self, memory))

    def sbc_absx(self, memory: Memory) -> int:
        return self._sbc(_absolute_indexed(self, memory, self.x))

    def sbc_absy(self, memory: Memory) -> int:
        return self._sbc(_absolute_indexed(self, memory, self.y))

    def sbc_indx(self, memory: Memory) -> int:
        return self._sbc(_indexed_indirect(self, memory))

    def sbc_indy(self, memory: Memory) -> int:
        return self._sbc(_indirect_indexed(self, memory))

    # Compare accumulator
    def cmp_im(self, memory: Memory) -> int:
        return self._compare(self.a, _immediate(self, memory))

    def cmp_zp(self, memory: Memory) -> int:
        return self._compare(self.a, _zero_page(self, memory))

    def cmp_zpx(self, memory: Memory) -> int:
        return self._compare(self.a, _zero_page_indexed(self, memory, self.x))

    def cmp_abs(self, memory: Memory) -> int:
        return self._compare(self.a, _absolute(self, memory))

    def cmp_absx(self, memory: Memory) -> int:
        return self._compare(self.a, _absolute_indexed(self, memory, self.x))

    def cmp_absy(self, memory: Memory) -> int:
        return self._compare(self.a, _absolute_indexed(self, memory, self.y))

    def cmp_indx(self, memory: Memory) -> int:
        return self._compare(self.a, _indexed_indirect(self, memory))

    def cmp_indy(self, memory: Memory) -> int:
        return self._compare(self.a, _indirect_indexed(self, memory))

    # Compare X register
    def cpx_im(self, memory: Memory) -> int:
        return self._compare(self.x, _immediate(self, memory))

    def cpx_zp(self, memory: Memory) -> int:
        return self._compare(self.x, _zero_page(self, memory))

    def cpx_abs(self, memory: Memory) -> int:
        return self._compare(self.x, _absolute(self, memory))

    # Compare Y register
    def cpy_im(self, memory: Memory) -> int:
        return self._compare(self.y, _immediate(self, memory))

    def cpy_zp(self, memory: Memory) -> int:
        return self._compare(self.y, _zero_page(self, memory))

    def cpy_abs(self, memory: Memory) -> int:
        return self._compare(self.y, _absolute(self, memory))