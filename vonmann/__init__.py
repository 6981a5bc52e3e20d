"""A MOS 6502 processor emulator: memory, status register and an instruction-executing CPU."""

__version__ = "0.1.0"
__all__ = ["__version__"]