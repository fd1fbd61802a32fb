"""Band-limited sound synthesis buffers and the step synthesiser that feeds them.

Times handed to a synthesiser are source clocks. A buffer converts them
into 32.32 fixed-point output sample positions with its ``factor`` and
``offset``. The synthesiser adds each amplitude step into the two
neighbouring samples, weighted by the sub-sample phase.
"""

from __future__ import annotations

from dataclasses import dataclass

BLIP_BUFFER_ACCURACY = 32
BLIP_PHASE_BITS = 8
BLIP_RES = 1 << BLIP_PHASE_BITS
BLIP_WIDEST_IMPULSE = 16
BLIP_BUFFER_EXTRA = BLIP_WIDEST_IMPULSE + 2
BLIP_SAMPLE_BITS = 30
BLIP_SAMPLE_MAX = 32767
BLIP_READER_DEFAULT_BASS = 9

BLIP_MED_QUALITY = 8
BLIP_GOOD_QUALITY = 12
BLIP_HIGH_QUALITY = 16
BLIP_LOW_QUALITY = BLIP_MED_QUALITY
BLIP_BEST_QUALITY = BLIP_HIGH_QUALITY

BLIP_UNSCALED = 65535
BLIP_MAX_LENGTH = 0
BLIP_DEFAULT_LENGTH = 250

_U64_MASK = (1 << 64) - 1


def _wrap32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


@dataclass
class BlipEq:
    """Low-pass equalisation parameters."""

    treble: float = 0.0
    rolloff_freq: int = 0
    sample_rate: int = 44100
    cutoff_freq: int = 0


class BlipBuffer:
    """An accumulation buffer of signed 32-bit deltas.

    ``size`` is the number of output samples; a few extra slots are kept
    past the end so that the last steps of a frame still fit.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("buffer size must not be negative")
        self.buffer_size = size
        self.buffer = [0] * (size + BLIP_BUFFER_EXTRA)
        self.factor = 0
        self.offset = 0
        self.reader_accum = 0
        self.bass_shift = 0
        self._modified = 0

    def samples_avail(self) -> int:
        """Number of whole output samples ready to be read."""
        return self.offset >> BLIP_BUFFER_ACCURACY

    def output_latency(self) -> int:
        """Samples of delay between synthesis and readout."""
        return BLIP_WIDEST_IMPULSE // 2

    def resampled_time(self, t: int) -> int:
        """Convert a clock time to a fixed-point sample position."""
        return (t * self.factor + self.offset) & _U64_MASK

    def resampled_duration(self, t: int) -> int:
        """Convert a clock duration to a fixed-point sample count."""
        return (t * self.factor) & _U64_MASK

    def set_modified(self) -> None:
        self._modified = 1

    def clear_modified(self) -> int:
        """Return the modified flag and reset it."""
        was, self._modified = self._modified, 0
        return was


class BlipSynth:
    """Adds amplitude steps into a :class:`BlipBuffer`.

    ``delta_factor`` scales every step; ``last_amp`` remembers the level
    set by :meth:`update`.
    """

    def __init__(self, quality: int, range_: int) -> None:
        if range_ == 0:
            raise ValueError("range must not be zero")
        self.quality = quality
        self.range = range_
        self.buffer: BlipBuffer | None = None
        self.last_amp = 0
        self.delta_factor = 0

    def set_output(self, buffer: BlipBuffer | None) -> None:
        """Direct output to ``buffer`` and forget the previous amplitude."""
        self.buffer = buffer
        self.last_amp = 0

    def _target(self, buffer: BlipBuffer | None) -> BlipBuffer:
        target = buffer if buffer is not None else self.buffer
        if target is None:
            raise ValueError("no output buffer set")
        return target

    def offset_resampled(self, time: int, delta: int, buffer: BlipBuffer | None = None) -> None:
        """Add a step of ``delta`` at a fixed-point sample position."""
        target = self._target(buffer)
        delta = _wrap32(delta * self.delta_factor)
        index = time >> BLIP_BUFFER_ACCURACY
        if index + 1 >= len(target.buffer):
            raise IndexError(f"time {time:#x} is beyond the end of the buffer")
        phase = (time >> (BLIP_BUFFER_ACCURACY - BLIP_PHASE_BITS)) & (BLIP_RES - 1)
        buf = target.buffer
        left = buf[index] + delta
        right = (delta >> BLIP_PHASE_BITS) * phase
        left -= right
        right += buf[index + 1]
        buf[index] = _wrap32(left)
        buf[index + 1] = _wrap32(right)

    def offset(self, time: int, delta: int, buffer: BlipBuffer | None = None) -> None:
        """Add a step of ``delta`` at clock time ``time``."""
        target = self._target(buffer)
        self.offset_resampled(target.resampled_time(time), delta, target)

    def update(self, time: int, amplitude: int) -> None:
        """Move the waveform to ``amplitude`` at clock time ``time``."""
        target = self._target(None)
        delta = amplitude - self.last_amp
        self.last_amp = amplitude
        self.offset_resampled(target.resampled_time(time), delta, target)


class BlipReader:
    """Integrates the deltas of a buffer into output samples."""

    def __init__(self) -> None:
        self._buffer: list[int] = []
        self._pos = 0
        self.accum = 0

    def begin(self, buffer: BlipBuffer) -> int:
        """Start reading ``buffer``; returns its bass shift."""
        self._buffer = buffer.buffer
        self._pos = 0
        self.accum = buffer.reader_accum
        return buffer.bass_shift

    def read(self) -> int:
        """The current sample at 16-bit resolution."""
        return self.accum >> (BLIP_SAMPLE_BITS - 16)

    def read_raw(self) -> int:
        """The current sample at full internal resolution."""
        return self.accum

    def next(self, bass_shift: int = BLIP_READER_DEFAULT_BASS) -> None:
        """Advance to the next sample, applying the high-pass filter."""
        if self._pos >= len(self._buffer):
            raise IndexError("read past the end of the buffer")
        self.accum = _wrap32(
            self.accum + self._buffer[self._pos] - (self.accum >> bass_shift)
        )
        self._pos += 1

    def end(self, buffer: BlipBuffer) -> None:
        """Store the accumulator back into ``buffer``."""
        buffer.reader_accum = self.accum


class StereoBuffer:
    """Three buffers for centre, left and right channels."""

    def __init__(self, size: int) -> None:
        self.bufs = (BlipBuffer(size), BlipBuffer(size), BlipBuffer(size))
        self.stereo_added = False
        self.was_stereo = False

    def left(self) -> BlipBuffer:
        return self.bufs[1]

    def center(self) -> BlipBuffer:
        return self.bufs[0]

    def right(self) -> BlipBuffer:
        return self.bufs[2]

    def samples_avail(self) -> int:
        return self.bufs[0].samples_avail()