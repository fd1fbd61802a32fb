"""Building blocks for an Atari Lynx emulator: memory, RAM, 65C02 operations, sound buffers and options."""

__version__ = "0.1.0"