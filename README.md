# vonmann

An emulator for part of the MOS 6502 instruction set. It models 64 KiB of
memory, the A, X and Y registers, the stack pointer, the program counter
and the processor status flags. It runs instructions against a cycle
budget.

## Installation

```
pip install .
```

## Usage

```python
from vonmann.memory import Memory
from vonmann.mos6502 import MOS6502, Opcode

memory = Memory()
memory[0xFFFC] = Opcode.LDA_ZP   # 0xA5
memory[0xFFFD] = 0x84
memory[0x0084] = 0x42

cpu = MOS6502()
cpu.execute(3, memory)
assert cpu.a == 0x42
```

### Memory

`vonmann.memory.Memory` is a zeroed block of 65,536 bytes that you index by
address. An address outside `0..0xFFFF` raises `IndexError`. Writing a
value outside `0..255` raises `ValueError`. `len(memory)` is 65536.

### The processor

`vonmann.mos6502.MOS6502` keeps its registers as plain attributes: `pc`,
`sp`, `a`, `x`, `y` and `status`. A new processor starts with `pc` at
`0xFFFC`, `sp` at `0xFF`, the other registers at zero and every flag clear.

`execute(cycles, memory)` fetches and runs instructions until the budget is
spent. Fetching an opcode costs one cycle. Each instruction then costs the
number of cycles that its method returns. Indexed reads cost one more
cycle when they cross a page boundary.

- If an opcode is not recognised, the processor prints
  `Unknown instruction: 0x..` and continues. The opcode uses only its
  fetch cycle.
- If an instruction needs more cycles than remain, `execute` raises
  `vonmann.mos6502.CycleBudgetExceeded`.
- A negative cycle count raises `ValueError`.

`vonmann.mos6502.Opcode` is an `IntEnum` of all recognised opcodes. For
example, `Opcode.LDA_IM` is `0xA9`.

Each instruction is also a method you can call directly, such as
`cpu.lda_im(memory)`, `cpu.sta_absx(memory)` or `cpu.tax()`. It returns the
cycles used after the opcode fetch.

### Status register

`vonmann.status.ProcessorStatus` holds the flag byte. You read and assign
the flags as boolean attributes: `carry`, `zero`, `interrupt_disable`,
`decimal_mode`, `break_command`, `overflow` and `negative`.
`int(status)` gives the raw byte. `ProcessorStatus(value)` builds a status
register from a byte. `set_nz(value)` sets the zero and negative flags from
a result. `vonmann.status.StatusFlag` names the bit of each flag.

## Supported instructions

- Loads: `LDA`, `LDX`, `LDY`
- Stores: `STA`, `STX`, `STY`
- Transfers: `TAX`, `TAY`, `TSX`, `TXA`, `TXS`, `TYA`
- Stack: `PHA`, `PHP`, `PLA`, `PLP`
- Logical: `AND`, `EOR`, `ORA`, `BIT`
- Arithmetic and comparison: `ADC`, `SBC`, `CMP`, `CPX`, `CPY`

These instructions use the immediate, zero page, zero page indexed,
absolute, absolute indexed, indexed indirect and indirect indexed
addressing modes that their opcodes define.

## Command line

```
vonmann
```

This runs the built-in demonstration shown above: a zero-page `LDA` placed
at `0xFFFC`, executed for three cycles. It prints nothing and exits with
status 0.

## What it does not do

- There are no jumps, branches, subroutine calls or returns.
- There is no increment or decrement, no shift or rotate, no flag-setting
  instruction, and no `NOP` or `BRK`. There are no interrupts.
- `ADC` and `SBC` are binary only. The decimal flag has no effect.
- Pushes write at `0x0100 | sp`, and `PLP` reads from that address, but no
  push or pull changes the stack pointer. `PLA` reads from `0x0100 | pc`.
- `BIT` sets the zero, negative and overflow flags when their conditions
  hold, but it never clears them.
- Execution always starts at `0xFFFC`. The address stored there is not read
  as a reset vector.
- There is no way to load a program or memory image from a file. The
  command runs only the demonstration.

## Running the tests

```
pip install .[test]
pytest
```