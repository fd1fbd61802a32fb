import pytest

from lynxcore.cpu65c02 import IRQ_VECTOR, STACK_BASE, Cpu65C02
from lynxcore.ram import Ram


@pytest.fixture
def cpu():
    return Cpu65C02(Ram())


def load_operand(cpu, value, addr=0x0200):
    cpu.memory.poke(addr, value)
    cpu.operand = addr


def test_peek_word_little_endian(cpu):
    cpu.memory.poke(0x10, 0x34)
    cpu.memory.poke(0x11, 0x12)
    assert cpu.peek_word(0x10) == 0x1234


def test_push_pull_round_trip(cpu):
    sp = cpu.sp
    cpu.push(0x5A)
    assert cpu.memory.peek(STACK_BASE + sp) == 0x5A
    assert cpu.pull() == 0x5A
    assert cpu.sp == sp


def test_immediate_and_lda(cpu):
    cpu.pc = 0x0300
    cpu.memory.poke(0x0300, 0x42)
    cpu.immediate()
    cpu.lda()
    assert cpu.a == 0x42
    assert cpu.pc == 0x0301
    assert not cpu.z and not cpu.n


def test_absolute_x_wraps(cpu):
    cpu.pc = 0x0300
    cpu.memory.poke(0x0300, 0xFF)
    cpu.memory.poke(0x0301, 0xFF)
    cpu.x = 2
    cpu.absolute_x()
    assert cpu.operand == 1
    assert cpu.pc == 0x0302


def test_zeropage_x_wraps(cpu):
    cpu.pc = 0x0300
    cpu.memory.poke(0x0300, 0xF0)
    cpu.x = 0x20
    cpu.zeropage_x()
    assert cpu.operand == 0x10


def test_indirect_y(cpu):
    cpu.pc = 0x0300
    cpu.memory.poke(0x0300, 0x40)
    cpu.memory.poke(0x40, 0x00)
    cpu.memory.poke(0x41, 0x20)
    cpu.y = 5
    cpu.indirect_y()
    assert cpu.operand == 0x2000 + 5


def test_relative_is_unsigned(cpu):
    cpu.pc = 0x0300
    cpu.memory.poke(0x0300, 0x80)
    cpu.relative()
    assert cpu.operand == 0x0301 + 0x80


@pytest.mark.parametrize("a,value", [(0x37, 0x25), (0x7F, 0x01), (0xF0, 0x20), (0x00, 0x00)])
def test_adc_sbc_binary_round_trip(cpu, a, value):
    load_operand(cpu, value)
    cpu.a = a
    cpu.c = False
    cpu.adc()
    cpu.c = True
    cpu.sbc()
    assert cpu.a == a


def test_adc_overflow_flag(cpu):
    load_operand(cpu, 0x50)
    cpu.a = 0x50
    cpu.adc()
    assert cpu.v and cpu.n and not cpu.c


def test_adc_decimal(cpu):
    load_operand(cpu, 0x01)
    cpu.d = True
    cpu.a = 0x09
    cpu.adc()
    assert cpu.a == 0x10
    cpu.c = True
    cpu.sbc()
    assert cpu.a == 0x09 and cpu.c


def test_adc_decimal_carry(cpu):
    load_operand(cpu, 0x01)
    cpu.d = True
    cpu.a = 0x99
    cpu.adc()
    assert cpu.a == 0 and cpu.c and cpu.z


def test_cmp_sets_carry_and_zero(cpu):
    load_operand(cpu, 0x30)
    cpu.a = 0x30
    cpu.cmp()
    assert cpu.c and cpu.z
    cpu.a = 0x10
    cpu.cmp()
    assert not cpu.c and not cpu.z


def test_bit_immediate_keeps_n_v(cpu):
    load_operand(cpu, 0xC0)
    cpu.a = 0x01
    cpu.opcode = 0x89
    cpu.bit()
    assert cpu.z and not cpu.n and not cpu.v
    cpu.opcode = 0x2C
    cpu.bit()
    assert cpu.z and cpu.n and cpu.v


def test_branch_taken_backwards(cpu):
    cpu.pc = 0x0300
    cpu.memory.poke(0x0300, 0xFC)
    cpu.z = True
    cpu.beq()
    assert cpu.pc == 0x0301 - 4


def test_branch_not_taken(cpu):
    cpu.pc = 0x0300
    cpu.memory.poke(0x0300, 0x10)
    cpu.z = False
    cpu.beq()
    assert cpu.pc == 0x0301


def test_jsr_rts_round_trip(cpu):
    cpu.pc = 0x0300
    sp = cpu.sp
    cpu.operand = 0x0400
    cpu.jsr()
    assert cpu.pc == 0x0400
    cpu.rts()
    assert cpu.pc == 0x0300
    assert cpu.sp == sp


def test_brk_rti_round_trip(cpu):
    cpu.memory.poke(IRQ_VECTOR, 0x00)
    cpu.memory.poke(IRQ_VECTOR + 1, 0x80)
    cpu.pc = 0x0300
    cpu.c = True
    cpu.d = True
    cpu.brk()
    assert cpu.pc == 0x8000
    assert cpu.i and not cpu.d
    cpu.rti()
    assert cpu.pc == 0x0301
    assert cpu.c and cpu.d and not cpu.i


def test_php_plp_round_trip(cpu):
    cpu.n = True
    cpu.z = True
    cpu.c = True
    status = cpu.status
    cpu.php()
    cpu.n = cpu.z = cpu.c = False
    cpu.plp()
    assert cpu.status == status


def test_rol_ror_round_trip(cpu):
    load_operand(cpu, 0x81)
    cpu.c = False
    cpu.rol()
    assert cpu.c
    cpu.ror()
    assert cpu.memory.peek(cpu.operand) == 0x81


def test_lsr_a_clears_top_bit(cpu):
    cpu.a = 0xFF
    cpu.lsr_a()
    assert cpu.c and not cpu.n
    assert cpu.a == 0xFF >> 1


def test_inc_dec_round_trip(cpu):
    load_operand(cpu, 0xFF)
    cpu.inc()
    assert cpu.z
    cpu.dec()
    assert cpu.memory.peek(cpu.operand) == 0xFF and cpu.n


def test_trb_tsb(cpu):
    load_operand(cpu, 0x0F)
    cpu.a = 0xF0
    cpu.tsb()
    assert cpu.z
    assert cpu.memory.peek(cpu.operand) == 0xFF
    cpu.trb()
    assert not cpu.z
    assert cpu.memory.peek(cpu.operand) == 0x0F


def test_stz_and_sta(cpu):
    load_operand(cpu, 0x55)
    cpu.stz()
    assert cpu.memory.peek(cpu.operand) == 0
    cpu.a = 0x66
    cpu.sta()
    assert cpu.memory.peek(cpu.operand) == 0x66


def test_transfers(cpu):
    cpu.a = 0x80
    cpu.tax()
    assert cpu.x == 0x80 and cpu.n
    cpu.txs()
    assert cpu.sp == 0x80
    cpu.x = 0
    cpu.tsx()
    assert cpu.x == 0x80


def test_stp_and_wai_sleep(cpu):
    cpu.stp()
    assert cpu.sleeping
    cpu.sleeping = False
    cpu.wai()
    assert cpu.sleeping