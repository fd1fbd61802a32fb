"""Addressing modes and instruction semantics of the 65C02 processor."""

from __future__ import annotations

from typing import Protocol

IRQ_VECTOR = 0xFFFE
STACK_BASE = 0x0100

FLAG_N = 0x80
FLAG_V = 0x40
FLAG_UNUSED = 0x20
FLAG_B = 0x10
FLAG_D = 0x08
FLAG_I = 0x04
FLAG_Z = 0x02
FLAG_C = 0x01

BIT_IMMEDIATE_OPCODE = 0x89


class Memory(Protocol):
    def peek(self, addr: int) -> int: ...

    def poke(self, addr: int, data: int) -> None: ...


class Cpu65C02:
    """Processor registers and flags, with one method per addressing mode and instruction.

    An addressing-mode method leaves the effective address in ``operand``;
    an instruction method then acts on it.
    """

    def __init__(self, memory: Memory) -> None:
        self.memory = memory
        self.a = 0
        self.x = 0
        self.y = 0
        self.sp = 0xFF
        self.pc = 0
        self.operand = 0
        self.opcode = 0
        self.n = False
        self.v = False
        self.d = False
        self.i = False
        self.z = False
        self.c = False
        self.sleeping = False

    @property
    def status(self) -> int:
        """The processor status byte."""
        ps = FLAG_UNUSED
        for flag, mask in ((self.n, FLAG_N), (self.v, FLAG_V), (self.d, FLAG_D),
                           (self.i, FLAG_I), (self.z, FLAG_Z), (self.c, FLAG_C)):
            if flag:
                ps |= mask
        return ps

    @status.setter
    def status(self, value: int) -> None:
        self.n = bool(value & FLAG_N)
        self.v = bool(value & FLAG_V)
        self.d = bool(value & FLAG_D)
        self.i = bool(value & FLAG_I)
        self.z = bool(value & FLAG_Z)
        self.c = bool(value & FLAG_C)

    # Memory and stack helpers

    def _peek(self, addr: int) -> int:
        return self.memory.peek(addr & 0xFFFF)

    def _poke(self, addr: int, value: int) -> None:
        self.memory.poke(addr & 0xFFFF, value & 0xFF)

    def _fetch(self) -> int:
        value = self._peek(self.pc)
        self.pc = (self.pc + 1) & 0xFFFF
        return value

    def _fetch_word(self) -> int:
        value = self.peek_word(self.pc)
        self.pc = (self.pc + 2) & 0xFFFF
        return value

    def peek_word(self, addr: int) -> int:
        """Read a little-endian 16-bit word."""
        return self._peek(addr) | (self._peek((addr + 1) & 0xFFFF) << 8)

    def push(self, value: int) -> None:
        self._poke(STACK_BASE + self.sp, value)
        self.sp = (self.sp - 1) & 0xFF

    def pull(self) -> int:
        self.sp = (self.sp + 1) & 0xFF
        return self._peek(STACK_BASE + self.sp)

    def _set_nz(self, value: int) -> None:
        self.z = not value
        self.n = bool(value & 0x80)

    # Addressing modes

    def immediate(self) -> None:
        self.operand = self.pc
        self.pc = (self.pc + 1) & 0xFFFF

    def absolute(self) -> None:
        self.operand = self._fetch_word()

    def zeropage(self) -> None:
        self.operand = self._fetch()

    def zeropage_x(self) -> None:
        self.operand = (self._fetch() + self.x) & 0xFF

    def zeropage_y(self) -> None:
        self.operand = (self._fetch() + self.y) & 0xFF

    def absolute_x(self) -> None:
        self.operand = (self._fetch_word() + self.x) & 0xFFFF

    def absolute_y(self) -> None:
        self.operand = (self._fetch_word() + self.y) & 0xFFFF

    def indirect_absolute_x(self) -> None:
        self.operand = self.peek_word((self._fetch_word() + self.x) & 0xFFFF)

    def relative(self) -> None:
        offset = self._fetch()
        self.operand = (self.pc + offset) & 0xFFFF

    def indirect_x(self) -> None:
        self.operand = self.peek_word((self._fetch() + self.x) & 0x00FF)

    def indirect_y(self) -> None:
        self.operand = (self.peek_word(self._fetch()) + self.y) & 0xFFFF

    def indirect_absolute(self) -> None:
        self.operand = self.peek_word(self._fetch_word())

    def indirect(self) -> None:
        self.operand = self.peek_word(self._fetch())

    # Instructions

    def adc(self) -> None:
        value = self._peek(self.operand)
        a = self.a
        carry = 1 if self.c else 0
        self.v = False
        self.c = False
        if self.d:
            lo = (a & 0x0F) + (value & 0x0F) + carry
            hi = (a & 0xF0) + (value & 0xF0)
            if lo > 0x09:
                hi += 0x10
                lo += 0x06
            if ~(a ^ value) & (a ^ hi) & 0x80:
                self.v = True
            if hi > 0x90:
                hi += 0x60
            if hi & 0xFF00:
                self.c = True
            self.a = (lo & 0x0F) + (hi & 0xF0)
        else:
            total = a + value + carry
            if ~(a ^ value) & (a ^ total) & 0x80:
                self.v = True
            if total & 0xFF00:
                self.c = True
            self.a = total & 0xFF
        self._set_nz(self.a)

    def and_(self) -> None:
        self.a &= self._peek(self.operand)
        self._set_nz(self.a)

    def asl(self) -> None:
        value = self._peek(self.operand)
        self.c = bool(value & 0x80)
        value = (value << 1) & 0xFF
        self._set_nz(value)
        self._poke(self.operand, value)

    def asl_a(self) -> None:
        self.c = bool(self.a & 0x80)
        self.a = (self.a << 1) & 0xFF
        self._set_nz(self.a)

    def _branch(self, taken: bool) -> None:
        if taken:
            offset = self._peek(self.pc)
            if offset & 0x80:
                offset -= 0x100
            self.pc = (self.pc + 1 + offset) & 0xFFFF
        else:
            self.pc = (self.pc + 1) & 0xFFFF

    def bcc(self) -> None:
        self._branch(not self.c)

    def bcs(self) -> None:
        self._branch(self.c)

    def beq(self) -> None:
        self._branch(self.z)

    def bit(self) -> None:
        # The immediate form only affects Z.
        value = self._peek(self.operand)
        self.z = not (self.a & value)
        if self.opcode != BIT_IMMEDIATE_OPCODE:
            self.n = bool(value & 0x80)
            self.v = bool(value & 0x40)

    def bmi(self) -> None:
        self._branch(self.n)

    def bne(self) -> None:
        self._branch(not self.z)

    def bpl(self) -> None:
        self._branch(not self.n)

    def bra(self) -> None:
        self._branch(True)

    def brk(self) -> None:
        self.pc = (self.pc + 1) & 0xFFFF
        self.push(self.pc >> 8)
        self.push(self.pc & 0xFF)
        self.push(self.status | FLAG_B)
        self.d = False
        self.i = True
        self.pc = self.peek_word(IRQ_VECTOR)

    def bvc(self) -> None:
        self._branch(not self.v)

    def bvs(self) -> None:
        self._branch(self.v)

    def clc(self) -> None:
        self.c = False

    def cld(self) -> None:
        self.d = False

    def cli(self) -> None:
        self.i = False

    def clv(self) -> None:
        self.v = False

    def _compare(self, register: int) -> None:
        value = self._peek(self.operand)
        self.c = register >= value
        self._set_nz((register - value) & 0xFF)

    def cmp(self) -> None:
        self._compare(self.a)

    def cpx(self) -> None:
        self._compare(self.x)

    def cpy(self) -> None:
        self._compare(self.y)

    def dec(self) -> None:
        value = (self._peek(self.operand) - 1) & 0xFF
        self._poke(self.operand, value)
        self._set_nz(value)

    def dec_a(self) -> None:
        self.a = (self.a - 1) & 0xFF
        self._set_nz(self.a)

    def dex(self) -> None:
        self.x = (self.x - 1) & 0xFF
        self._set_nz(self.x)

    def dey(self) -> None:
        self.y = (self.y - 1) & 0xFF
        self._set_nz(self.y)

    def eor(self) -> None:
        self.a ^= self._peek(self.operand)
        self._set_nz(self.a)

    def inc(self) -> None:
        value = (self._peek(self.operand) + 1) & 0xFF
        self._poke(self.operand, value)
        self._set_nz(value)

    def inc_a(self) -> None:
        self.a = (self.a + 1) & 0xFF
        self._set_nz(self.a)

    def inx(self) -> None:
        self.x = (self.x + 1) & 0xFF
        self._set_nz(self.x)

    def iny(self) -> None:
        self.y = (self.y + 1) & 0xFF
        self._set_nz(self.y)

    def jmp(self) -> None:
        self.pc = self.operand

    def jsr(self) -> None:
        ret = (self.pc - 1) & 0xFFFF
        self.push(ret >> 8)
        self.push(ret & 0xFF)
        self.pc = self.operand

    def lda(self) -> None:
        self.a = self._peek(self.operand)
        self._set_nz(self.a)

    def ldx(self) -> None:
        self.x = self._peek(self.operand)
        self._set_nz(self.x)

    def ldy(self) -> None:
        self.y = self._peek(self.operand)
        self._set_nz(self.y)

    def lsr(self) -> None:
        value = self._peek(self.operand)
        self.c = bool(value & 0x01)
        value = (value >> 1) & 0x7F
        self._poke(self.operand, value)
        self._set_nz(value)

    def lsr_a(self) -> None:
        self.c = bool(self.a & 0x01)
        self.a = (self.a >> 1) & 0x7F
        self._set_nz(self.a)

    def nop(self) -> None:
        """Execute no operation; the program counter stays within the 16-bit address space."""
        self.pc &= 0xFFFF

    def ora(self) -> None:
        self.a |= self._peek(self.operand)
        self._set_nz(self.a)

    def pha(self) -> None:
        self.push(self.a)

    def php(self) -> None:
        self.push(self.status)

    def phx(self) -> None:
        self.push(self.x)

    def phy(self) -> None:
        self.push(self.y)

    def pla(self) -> None:
        self.a = self.pull()
        self._set_nz(self.a)

    def plp(self) -> None:
        self.status = self.pull()

    def plx(self) -> None:
        self.x = self.pull()
        self._set_nz(self.x)

    def ply(self) -> None:
        self.y = self.pull()
        self._set_nz(self.y)

    def rol(self) -> None:
        value = self._peek(self.operand)
        old_c = self.c
        self.c = bool(value & 0x80)
        value = ((value << 1) | (1 if old_c else 0)) & 0xFF
        self._poke(self.operand, value)
        self._set_nz(value)

    def rol_a(self) -> None:
        old_c = self.c
        self.c = bool(self.a & 0x80)
        self.a = ((self.a << 1) | (1 if old_c else 0)) & 0xFF
        self._set_nz(self.a)

    def ror(self) -> None:
        value = self._peek(self.operand)
        old_c = self.c
        self.c = bool(value & 0x01)
        value = ((value >> 1) & 0x7F) | (0x80 if old_c else 0x00)
        self._poke(self.operand, value)
        self._set_nz(value)

    def ror_a(self) -> None:
        old_c = self.c
        self.c = bool(self.a & 0x01)
        self.a = ((self.a >> 1) & 0x7F) | (0x80 if old_c else 0x00)
        self._set_nz(self.a)

    def rti(self) -> None:
        self.status = self.pull()
        lo = self.pull()
        self.pc = lo | (self.pull() << 8)

    def rts(self) -> None:
        lo = self.pull()
        self.pc = ((lo | (self.pull() << 8)) + 1) & 0xFFFF

    def sbc(self) -> None:
        value = self._peek(self.operand)
        a = self.a
        borrow = 0 if self.c else 1
        total = a - value - borrow
        self.v = False
        self.c = False
        if (a ^ value) & (a ^ total) & 0x80:
            self.v = True
        if (total & 0xFF00) == 0:
            self.c = True
        if self.d:
            lo = (a & 0x0F) - (value & 0x0F) - borrow
            hi = (a & 0xF0) - (value & 0xF0)
            if lo & 0xF0:
                lo -= 6
            if lo & 0x80:
                hi -= 0x10
            if hi & 0x0F00:
                hi -= 0x60
            self.a = (lo & 0x0F) + (hi & 0xF0)
        else:
            self.a = total & 0xFF
        self._set_nz(self.a)

    def sec(self) -> None:
        self.c = True

    def sed(self) -> None:
        self.d = True

    def sei(self) -> None:
        self.i = True

    def sta(self) -> None:
        self._poke(self.operand, self.a)

    def stp(self) -> None:
        self.sleeping = True

    def stx(self) -> None:
        self._poke(self.operand, self.x)

    def sty(self) -> None:
        self._poke(self.operand, self.y)

    def stz(self) -> None:
        self._poke(self.operand, 0)

    def tax(self) -> None:
        self.x = self.a
        self._set_nz(self.x)

    def tay(self) -> None:
        self.y = self.a
        self._set_nz(self.y)

    def trb(self) -> None:
        value = self._peek(self.operand)
        self.z = not (self.a & value)
        self._poke(self.operand, value & (self.a ^ 0xFF))

    def tsb(self) -> None:
        value = self._peek(self.operand)
        self.z = not (self.a & value)
        self._poke(self.operand, value | self.a)

    def tsx(self) -> None:
        self.x = self.sp
        self._set_nz(self.x)

    def txa(self) -> None:
        self.a = self.x
        self._set_nz(self.a)

    def txs(self) -> None:
        self.sp = self.x

    def tya(self) -> None:
        self.a = self.y
        self._set_nz(self.a)

    def wai(self) -> None:
        self.sleeping = True