"""Byte-addressed memory that can be read and written in 8, 16, 24 and 32-bit units."""

from __future__ import annotations

_WIDTHS = (1, 2, 4)


def reverse_u16(value: int) -> int:
    """Swap the two bytes of a 16-bit value."""
    value &= 0xFFFF
    return ((value << 8) | (value >> 8)) & 0xFFFF


def reverse_u32(value: int) -> int:
    """Reverse the byte order of a 32-bit value."""
    value &= 0xFFFFFFFF
    return (
        ((value << 24) & 0xFF000000)
        | ((value & 0xFF00) << 8)
        | ((value >> 8) & 0xFF00)
        | (value >> 24)
    )


class MultiAccessMemory:
    """A block of memory with a fixed byte order for multi-byte units.

    Addresses of 16 and 32-bit units must be multiples of the unit size;
    24-bit units only need byte alignment and are only supported in
    little-endian memory.
    """

    def __init__(self, size: int, big_endian: bool = False) -> None:
        if size <= 0 or size % 4:
            raise ValueError("size must be a positive multiple of 4")
        self.size = size
        self.big_endian = big_endian
        self.data = bytearray(size)

    @property
    def _order(self) -> str:
        return "big" if self.big_endian else "little"

    def _check(self, address: int, width: int, aligned: bool = True) -> None:
        if address < 0 or address + width > self.size:
            raise IndexError(f"address {address:#x} out of range for {width}-byte access")
        if aligned and address % width:
            raise ValueError(f"address {address:#x} is not aligned to {width} bytes")

    def _read(self, address: int, width: int, aligned: bool = True) -> int:
        self._check(address, width, aligned)
        return int.from_bytes(self.data[address:address + width], self._order)

    def _write(self, address: int, value: int, width: int, aligned: bool = True) -> None:
        self._check(address, width, aligned)
        mask = (1 << (8 * width)) - 1
        self.data[address:address + width] = (value & mask).to_bytes(width, self._order)

    def read_u8(self, address: int) -> int:
        return self._read(address, 1)

    def read_u16(self, address: int) -> int:
        return self._read(address, 2)

    def read_u24(self, address: int) -> int:
        if self.big_endian:
            raise ValueError("24-bit access requires little-endian memory")
        return self._read(address, 3, aligned=False)

    def read_u32(self, address: int) -> int:
        return self._read(address, 4)

    def write_u8(self, address: int, value: int) -> None:
        self._write(address, value, 1)

    def write_u16(self, address: int, value: int) -> None:
        self._write(address, value, 2)

    def write_u24(self, address: int, value: int) -> None:
        if self.big_endian:
            raise ValueError("24-bit access requires little-endian memory")
        self._write(address, value, 3, aligned=False)

    def write_u32(self, address: int, value: int) -> None:
        self._write(address, value, 4)

    def read(self, address: int, width: int) -> int:
        """Read a unit of ``width`` bytes (1, 2 or 4)."""
        if width not in _WIDTHS:
            raise ValueError(f"unsupported access width {width}")
        return self._read(address, width)

    def write(self, address: int, value: int, width: int) -> None:
        """Write a unit of ``width`` bytes (1, 2 or 4)."""
        if width not in _WIDTHS:
            raise ValueError(f"unsupported access width {width}")
        self._write(address, value, width)