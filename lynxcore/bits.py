"""Helpers for bit flags held in integers, byte arrays and word arrays."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_WIDTHS = (16, 32, 64)
_WORDS = 8
_WORD_MASK = 0xFFFFFFFF


def bits_or(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the word-wise OR of two equally long word sequences."""
    return [x | y for x, y in zip(a, b, strict=True)]


def bits_clear(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return ``a`` with every bit that is set in ``b`` cleared."""
    return [x & ~y & _WORD_MASK for x, y in zip(a, b, strict=True)]


def bits_any_set(values: Iterable[int]) -> bool:
    """True if any word has a bit set."""
    return any(v != 0 for v in values)


def _bit_mask(bit: int, width: int) -> int:
    if width not in _WIDTHS:
        raise ValueError(f"unsupported width {width}")
    return 1 << (bit & (width - 1))


def bit_set(value: int, bit: int, width: int = 32) -> int:
    """Return ``value`` with ``bit`` (taken modulo ``width``) set."""
    return value | _bit_mask(bit, width)


def bit_clear(value: int, bit: int, width: int = 32) -> int:
    """Return ``value`` with ``bit`` (taken modulo ``width``) cleared."""
    return value & ~_bit_mask(bit, width)


def bit_get(value: int, bit: int, width: int = 32) -> int:
    """Return 1 if ``bit`` (taken modulo ``width``) is set in ``value``, else 0."""
    _bit_mask(bit, width)
    return (value >> (bit & (width - 1))) & 1


def set_byte_bit(data: bytearray, bit: int) -> None:
    """Set a bit in a byte array, counting from the low bit of byte 0."""
    data[bit >> 3] |= 1 << (bit & 7)


def clear_byte_bit(data: bytearray, bit: int) -> None:
    """Clear a bit in a byte array."""
    data[bit >> 3] &= ~(1 << (bit & 7)) & 0xFF


def get_byte_bit(data: bytes | bytearray, bit: int) -> int:
    """Return 1 if the bit is set in the byte array, else 0."""
    return (data[bit >> 3] >> (bit & 7)) & 1


class RetroBits:
    """A set of 256 flags stored as eight 32-bit words."""

    def __init__(self) -> None:
        self.data = [0] * _WORDS

    def _index(self, bit: int) -> int:
        if not 0 <= bit < _WORDS * 32:
            raise IndexError(f"bit {bit} out of range")
        return bit >> 5

    def set(self, bit: int) -> None:
        self.data[self._index(bit)] |= 1 << (bit & 31)

    def clear(self, bit: int) -> None:
        self.data[self._index(bit)] &= ~(1 << (bit & 31)) & _WORD_MASK

    def get(self, bit: int) -> int:
        return (self.data[self._index(bit)] >> (bit & 31)) & 1

    def clear_all(self) -> None:
        self.data = [0] * _WORDS

    def copy16(self, bits: int) -> None:
        """Clear every flag, then load the low 16 bits of ``bits`` into the first word."""
        self.clear_all()
        self.data[0] = bits & 0xFFFF

    def copy32(self, bits: int) -> None:
        """Clear every flag, then load ``bits`` into the first word."""
        self.clear_all()
        self.data[0] = bits & _WORD_MASK