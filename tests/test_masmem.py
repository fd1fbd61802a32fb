import pytest

from lynxcore.masmem import MultiAccessMemory, reverse_u16, reverse_u32


@pytest.mark.parametrize("value", [0, 1, 0x00FF, 0xABCD, 0xFFFF])
def test_reverse_u16_is_involution(value):
    assert reverse_u16(reverse_u16(value)) == value


@pytest.mark.parametrize("value", [0, 1, 0x12345678, 0xDEADBEEF, 0xFFFFFFFF])
def test_reverse_u32_is_involution(value):
    assert reverse_u32(reverse_u32(value)) == value


def test_reverse_u16_swaps_bytes():
    assert reverse_u16(0x1234) == 0x3412


def test_little_endian_byte_layout():
    mem = MultiAccessMemory(16, False)
    mem.write_u32(0, 0x11223344)
    assert mem.read_u8(0) == 0x44
    assert mem.read_u8(3) == 0x11


@pytest.mark.parametrize("big_endian", [False, True])
def test_round_trips(big_endian):
    mem = MultiAccessMemory(32, big_endian)
    mem.write_u8(1, 0xAB)
    mem.write_u16(2, 0xBEEF)
    mem.write_u32(4, 0xCAFEBABE)
    assert mem.read_u8(1) == 0xAB
    assert mem.read_u16(2) == 0xBEEF
    assert mem.read_u32(4) == 0xCAFEBABE
    assert mem.read(4, 4) == mem.read_u32(4)
    mem.write(8, 0x1357, 2)
    assert mem.read(8, 2) == 0x1357


def test_big_and_little_views_are_byte_reversed():
    little = MultiAccessMemory(8, False)
    big = MultiAccessMemory(8, True)
    little.write_u32(0, 0x01020304)
    big.data[:] = little.data
    assert big.read_u32(0) == reverse_u32(little.read_u32(0))
    assert big.read_u16(2) == reverse_u16(little.read_u16(2))


def test_u24_unaligned_round_trip():
    mem = MultiAccessMemory(8, False)
    mem.write_u24(1, 0xABCDEF)
    assert mem.read_u24(1) == 0xABCDEF
    assert mem.read_u8(1) == mem.read_u24(1) & 0xFF


def test_u24_rejected_on_big_endian():
    mem = MultiAccessMemory(8, True)
    with pytest.raises(ValueError):
        mem.read_u24(0)
    with pytest.raises(ValueError):
        mem.write_u24(0, 1)


def test_write_masks_value():
    mem = MultiAccessMemory(8, False)
    mem.write_u8(0, 0x1FF)
    assert mem.read_u8(0) == 0xFF


def test_misaligned_access_raises():
    mem = MultiAccessMemory(8, False)
    with pytest.raises(ValueError):
        mem.read_u16(1)
    with pytest.raises(ValueError):
        mem.write_u32(2, 0)


def test_out_of_range_raises():
    mem = MultiAccessMemory(8, False)
    with pytest.raises(IndexError):
        mem.read_u8(8)
    with pytest.raises(IndexError):
        mem.read_u32(8)


def test_bad_width_and_size():
    mem = MultiAccessMemory(8, False)
    with pytest.raises(ValueError):
        mem.read(0, 3)
    with pytest.raises(ValueError):
        MultiAccessMemory(6, False)