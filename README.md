# lynxcore

Pure-Python building blocks for an Atari Lynx emulator core. It has no
dependencies outside the standard library.

## Modules

- `lynxcore.masmem`: `MultiAccessMemory(size, big_endian=False)` is a byte
  buffer read and written as 8-, 16- or 32-bit units (`read_u8`, `read_u16`,
  `read_u32`, `write_u8`, ... and the generic `read(address, width)` /
  `write(address, value, width)`) in little- or big-endian order. 16- and
  32-bit accesses must be aligned; `read_u24` / `write_u24` need only byte
  alignment and work only in little-endian memory. Out-of-range addresses raise
  `IndexError`, misaligned ones `ValueError`. `reverse_u16` and `reverse_u32`
  swap byte order.
- `lynxcore.bits`: word-list helpers `bits_or`, `bits_clear`, `bits_any_set`;
  integer helpers `bit_set`, `bit_clear`, `bit_get` for widths 16, 32 and 64
  (the bit number is taken modulo the width); byte-array helpers
  `set_byte_bit`, `clear_byte_bit`, `get_byte_bit`; and `RetroBits`, a set of
  256 flags held as eight 32-bit words, with `set`, `clear`, `get`,
  `clear_all`, `copy16` and `copy32`.
- `lynxcore.ram`: `Ram(image=None)` holds the 64 KiB system RAM. Without an
  image every byte is `0xFF` after `reset()`. With a BS93 homebrew image the
  image (header included) is placed at its load address, wrapping past
  `0xFFFF` to `0x0000`, and is restored on every `reset()`; `boot_address`,
  `info_ram_size` and `crc32` describe what was loaded. `parse_homebrew_header`
  decodes the 10-byte header into a `HomebrewHeader` whose `valid` property
  checks the magic. `peek` and `poke` mask the address to 16 bits.
- `lynxcore.cpu65c02`: `Cpu65C02(memory)` holds the 65C02 registers and flags
  and works on any object with `peek(addr)` and `poke(addr, data)` (such as
  `Ram`). Each addressing mode (`immediate`, `absolute`, `zeropage_x`,
  `indirect_y`, ...) leaves the effective address in `operand`; each
  instruction (`lda`, `adc`, `sbc`, `bit`, `brk`, `jsr`, `rts`, ...) then acts
  on it. `adc` and `sbc` support decimal mode. Branches read their offset from
  `pc` themselves. `status` reads and writes the flags as a byte; `stp` and
  `wai` set `sleeping`.
- `lynxcore.core_options`: `option_definitions()` lists the core's options
  (`lynx_rot_screen`, `lynx_pix_format`, `lynx_force_60hz`).
  `apply_core_options(frontend)` hands them to an object following the
  `OptionFrontend` protocol, choosing by `core_options_version()`: version 2
  or later gets full definitions through `set_core_options_v2`, version 1 gets
  `to_v1` definitions through `set_core_options`, and anything older gets
  `legacy_variables` (`"Description; default|other|..."` strings) through
  `set_variables`. It returns True only when the frontend reports category
  support.
- `lynxcore.blip`: `BlipBuffer(size)` accumulates signed 32-bit deltas;
  `factor` and `offset` turn clock times into 32.32 fixed-point sample
  positions (`resampled_time`, `resampled_duration`, `samples_avail`).
  `BlipSynth(quality, range_)` adds amplitude steps into a buffer with
  `offset`, `offset_resampled` and `update`, scaled by its `delta_factor`.
  `BlipReader` integrates a buffer's deltas into samples (`begin`, `next`,
  `read`, `read_raw`, `end`). `StereoBuffer(size)` holds centre, left and
  right buffers. `BlipEq` carries low-pass parameters.

## Example

    from lynxcore.ram import Ram
    from lynxcore.cpu65c02 import Cpu65C02

    ram = Ram(None)
    ram.poke(0x0200, 0x42)
    cpu = Cpu65C02(ram)
    cpu.pc = 0x0200
    cpu.immediate()
    cpu.lda()
    assert cpu.a == 0x42

## What it does not do

These are parts, not a running emulator. There is no opcode decoder or
instruction loop, so the caller picks the addressing mode and instruction
methods itself. There is no cartridge, video, timer or audio chip handling,
and no frame loop. The sound buffers have no clock-rate or sample-rate
setup, frame ending, sample readout or stereo mixing; `factor`, `offset` and
`delta_factor` are set directly. There is no command-line program.

## Installation

    pip install .

## Tests

    pip install .[test]
    pytest