from typing import NamedTuple, Optional

import pytest

from vonmann.arithmetic import ArithmeticMixin
from vonmann.memory import Memory

ORIGIN = 0x0200


class Layout(NamedTuple):
    cycles: int
    operand: tuple = ()
    data_at: Optional[int] = None
    index: tuple = ()
    pointer: tuple = ()


LAYOUTS = {
    "im": Layout(1),
    "zp": Layout(2, (0x10,), 0x10),
    "zpx": Layout(3, (0x10,), 0x15, ("x", 5)),
    "zpx_wrap": Layout(3, (0xFE,), 0x02, ("x", 4)),
    "abs": Layout(3, (0x34, 0x12), 0x1234),
    "absx": Layout(3, (0x34, 0x12), 0x1235, ("x", 1)),
    "absx_cross": Layout(4, (0xFF, 0x12), 0x1300, ("x", 1)),
    "absy": Layout(3, (0x34, 0x12), 0x1235, ("y", 1)),
    "absy_cross": Layout(4, (0xFF, 0x12), 0x1300, ("y", 1)),
    "indx": Layout(5, (0x20,), 0x3000, ("x", 4), (0x24, 0x00, 0x30)),
    "indy": Layout(4, (0x40,), 0x3002, ("y", 2), (0x40, 0x00, 0x30)),
    "indy_cross": Layout(5, (0x40,), 0x3100, ("y", 1), (0x40, 0xFF, 0x30)),
}

CASES = [
    ("adc", 0x00, False, 0x42, 0x42, {"carry": False, "zero": False}),
    ("sbc", 0x42, True, 0x42, 0x00, {"zero": True, "carry": True, "overflow": False}),
    ("cmp", 0x42, False, 0x42, 0x42, {"zero": True, "carry": True, "negative": False}),
]


def arrange(mode, value):
    """Build a cpu and memory for ``mode``; return them with cycles and operand length."""
    layout = LAYOUTS[mode]
    cpu = ArithmeticMixin()
    cpu.pc = ORIGIN
    ram = Memory()
    if layout.index:
        setattr(cpu, *layout.index)
    if layout.pointer:
        zero_page, low, high = layout.pointer
        ram[zero_page], ram[zero_page + 1] = low, high
    if layout.data_at is not None:
        ram[layout.data_at] = value
    operand = layout.operand or (value,)
    for address, byte in enumerate(operand, ORIGIN):
        ram[address] = byte
    return cpu, ram, layout.cycles, len(operand)


def flags(cpu, names):
    return {name: getattr(cpu.status, name) for name in names}


@pytest.mark.parametrize("mode", list(LAYOUTS))
@pytest.mark.parametrize("op, a, carry_in, value, result, expected", CASES)
def test_operation_in_every_mode(mode, op, a, carry_in, value, result, expected):
    cpu, ram, cycles, length = arrange(mode, value)
    cpu.a = a
    cpu.status.carry = carry_in
    assert getattr(cpu, f"{op}_{mode.split('_')[0]}")(ram) == cycles
    assert cpu.a == result
    assert cpu.pc == ORIGIN + length
    assert flags(cpu, expected) == expected


@pytest.mark.parametrize("op, register", [("cpx", "x"), ("cpy", "y")])
@pytest.mark.parametrize("mode", ["im", "zp", "abs"])
def test_index_compare_equal(op, register, mode):
    cpu, ram, cycles, length = arrange(mode, 0x37)
    setattr(cpu, register, 0x37)
    assert getattr(cpu, f"{op}_{mode}")(ram) == cycles
    assert cpu.pc == ORIGIN + length
    assert flags(cpu, ["zero", "carry"]) == {"zero": True, "carry": True}


@pytest.mark.parametrize(
    "a, value, carry_in, result, expected",
    [
        (0x00, 0x00, True, 0x01, {"carry": False}),
        (0x7F, 0x01, False, 0x80, {"overflow": True, "negative": True, "carry": False}),
        (0xFF, 0x01, False, 0x00, {"carry": True, "zero": True, "overflow": False}),
    ],
)
def test_adc_flags(a, value, carry_in, result, expected):
    cpu, ram, _, _ = arrange("im", value)
    cpu.a = a
    cpu.status.carry = carry_in
    cpu.adc_im(ram)
    assert cpu.a == result
    assert flags(cpu, expected) == expected


def test_sbc_borrow_clears_carry():
    cpu, ram, _, _ = arrange("im", 5)
    cpu.a = 5
    cpu.status.carry = False
    cpu.sbc_im(ram)
    assert cpu.a == 0xFF
    assert flags(cpu, ["carry", "negative", "zero"]) == {
        "carry": False,
        "negative": True,
        "zero": False,
    }


def test_sbc_signed_overflow_then_adc_restores():
    cpu, ram, _, _ = arrange("im", 0x01)
    ram[ORIGIN + 1] = 0x01
    cpu.a = 0x80
    cpu.status.carry = True
    cpu.sbc_im(ram)
    assert flags(cpu, ["overflow", "negative"]) == {"overflow": True, "negative": False}
    cpu.status.carry = False
    cpu.adc_im(ram)
    assert cpu.a == 0x80


@pytest.mark.parametrize("a, value", [(0x10, 0x20), (0x00, 0xFF), (0x80, 0x80), (0x33, 0x01)])
def test_adc_then_sbc_round_trip(a, value):
    cpu, ram, _, _ = arrange("im", value)
    ram[ORIGIN + 1] = value
    cpu.a = a
    cpu.status.carry = False
    cpu.adc_im(ram)
    cpu.status.carry = True
    cpu.sbc_im(ram)
    assert cpu.a == a


@pytest.mark.parametrize(
    "a, value, carry, negative",
    [(1, 2, False, True), (2, 1, True, False)],
)
def test_cmp_ordering(a, value, carry, negative):
    cpu, ram, _, _ = arrange("im", value)
    cpu.a = a
    cpu.cmp_im(ram)
    assert cpu.a == a
    assert flags(cpu, ["carry", "zero", "negative"]) == {
        "carry": carry,
        "zero": False,
        "negative": negative,
    }


def test_cpx_does_not_touch_accumulator_or_x():
    cpu, ram, _, _ = arrange("im", 0x09)
    cpu.a = 0x11
    cpu.x = 0x05
    cpu.cpx_im(ram)
    assert (cpu.a, cpu.x) == (0x11, 0x05)
    assert cpu.status.carry == False  # noqa: E712