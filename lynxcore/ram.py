"""The 64 KiB system RAM, optionally preloaded from a homebrew image."""

from __future__ import annotations

import zlib
from dataclasses import dataclass

RAM_SIZE = 65536
RAM_ADDR_MASK = 0xFFFF
DEFAULT_RAM_CONTENTS = 0xFF
HEADER_RAW_SIZE = 10
HOMEBREW_MAGIC = b"BS93"

_INVERT = bytes(i ^ DEFAULT_RAM_CONTENTS for i in range(256))


@dataclass(frozen=True)
class HomebrewHeader:
    """The fixed header at the start of a homebrew RAM image."""

    load_address: int
    size: int
    magic: bytes

    @property
    def valid(self) -> bool:
        """True if the header carries the expected magic number."""
        return self.magic == HOMEBREW_MAGIC


def parse_homebrew_header(data: bytes) -> HomebrewHeader:
    """Parse the header of a homebrew image.

    The load address is where the image, header included, is placed: the
    address stored in the header minus the header size, wrapped to 16 bits.
    """
    if len(data) < HEADER_RAW_SIZE:
        raise ValueError(
            f"homebrew header needs {HEADER_RAW_SIZE} bytes, got {len(data)}"
        )
    stored_address = int.from_bytes(data[2:4], "big")
    size = int.from_bytes(data[4:6], "big")
    load_address = (stored_address - HEADER_RAW_SIZE) & RAM_ADDR_MASK
    return HomebrewHeader(load_address, size, bytes(data[6:10]))


class Ram:
    """System RAM; an image, if given, is loaded again on every reset."""

    READ_CYCLE = 5
    WRITE_CYCLE = 5
    OBJECT_SIZE = RAM_SIZE

    def __init__(self, image: bytes | None = None) -> None:
        self._xor_data: bytearray | None = None
        self.boot_address: int | None = None
        self.crc32 = 0
        self.info_ram_size = 0
        self.data = bytearray(RAM_SIZE)
        if image is not None:
            self._load(bytes(image))
        self.reset()

    def _load(self, image: bytes) -> None:
        header = parse_homebrew_header(image)
        load = header.load_address
        first = min(RAM_SIZE - load, header.size)
        second = header.size - first

        loaded = bytearray(RAM_SIZE)
        chunk = image[:first]
        loaded[load:load + len(chunk)] = chunk
        crc = zlib.crc32(loaded[load:load + first])
        chunk = image[first:first + second]
        loaded[:len(chunk)] = chunk
        crc = zlib.crc32(loaded[:second], crc)

        self.crc32 = crc
        self.info_ram_size = header.size
        self._xor_data = bytearray(loaded.translate(_INVERT))
        self.boot_address = load

    def reset(self) -> None:
        """Refill RAM: with the loaded image if there is one, else with 0xFF."""
        if self._xor_data is None:
            self.data = bytearray([DEFAULT_RAM_CONTENTS]) * RAM_SIZE
        else:
            self.data = bytearray(self._xor_data.translate(_INVERT))

    def peek(self, addr: int) -> int:
        return self.data[addr & RAM_ADDR_MASK]

    def poke(self, addr: int, data: int) -> None:
        self.data[addr & RAM_ADDR_MASK] = data & 0xFF