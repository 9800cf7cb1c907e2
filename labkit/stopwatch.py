"""A six-digit HH:MM:SS stopwatch that counts up or down one second per tick.

Each digit is held as an unsigned byte, so adjusting a digit below zero
wraps it around to 255, and a digit outside 0-9 leaves the display showing
whatever code was driven before it.
"""

from __future__ import annotations

from enum import Enum

_BYTE = 0xFF
_SEGMENT_MASKS = tuple(1 << bit for bit in range(5, -1, -1))


class CountMode(Enum):
    """Direction the stopwatch counts in."""

    UP = "up"
    DOWN = "down"


class TimeUnit(Enum):
    """Digit pair that the adjustment buttons act on."""

    SECONDS = 0
    MINUTES = 2
    HOURS = 4


def bcd_code(digit: int) -> int:
    """Return the 4-bit BCD decoder input that shows ``digit``."""
    if not 0 <= digit <= 9:
        raise ValueError(f"digit out of range 0-9: {digit}")
    return digit


class Stopwatch:
    """Stopwatch state: six digits, count direction, pause and adjust flags, alarm."""

    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        if not 0 <= hours <= 99:
            raise ValueError(f"hours out of range 0-99: {hours}")
        if not 0 <= minutes <= 59:
            raise ValueError(f"minutes out of range 0-59: {minutes}")
        if not 0 <= seconds <= 59:
            raise ValueError(f"seconds out of range 0-59: {seconds}")
        # Least significant digit first: s1, s10, m1, m10, h1, h10.
        self._ticks = [
            seconds % 10,
            seconds // 10,
            minutes % 10,
            minutes // 10,
            hours % 10,
            hours // 10,
        ]
        self._mode = CountMode.UP
        self._running = True
        self._adjusting = False
        self._port_c = 0
        self.alarm = False

    @property
    def mode(self) -> CountMode:
        return self._mode

    @property
    def running(self) -> bool:
        return self._running

    @property
    def adjusting(self) -> bool:
        return self._adjusting

    def tick(self) -> None:
        """Advance one second in the current direction; no effect while paused."""
        if not self._running:
            return
        if self._mode is CountMode.UP:
            self._count_up()
        else:
            self._count_down()

    def _count_up(self) -> None:
        s1, s10, m1, m10, h1, h10 = self._ticks
        if s1 != 9:
            s1 += 1
        elif s10 != 5:
            s1 = 0
            s10 += 1
        elif m1 != 9:
            s1 = s10 = 0
            m1 += 1
        elif m10 != 5:
            s1 = s10 = m1 = 0
            m10 += 1
        else:
            s1 = s10 = m1 = m10 = 0
            if h1 == 9:
                h1 = 0
                h10 += 1
            elif h1 == 3 and h10 == 2:
                h1 = h10 = 0
            else:
                h1 += 1
        self._ticks = [d & _BYTE for d in (s1, s10, m1, m10, h1, h10)]

    def _count_down(self) -> None:
        s1, s10, m1, m10, h1, h10 = self._ticks
        if s1 > 0:
            s1 -= 1
        elif s10 > 0:
            s1 = 9
            s10 -= 1
        elif m1 > 0:
            s1, s10 = 9, 5
            m1 -= 1
        elif m10 > 0:
            s1, s10, m1 = 9, 5, 9
            m10 -= 1
        elif h1 > 0:
            s1, s10, m1, m10 = 9, 5, 9, 5
            h1 -= 1
        elif h10 > 0:
            s1, s10, m1, m10, h1 = 9, 5, 9, 5, 9
            h10 -= 1
        else:
            self.alarm = True
        self._ticks = [s1, s10, m1, m10, h1, h10]

    def reset(self) -> None:
        """Set every digit to zero."""
        self._ticks = [0] * 6

    def pause(self) -> None:
        """Stop counting."""
        self._running = False

    def resume(self) -> None:
        """Start counting again."""
        self._running = True

    def toggle_mode(self) -> None:
        """Pause, reverse the count direction and enter adjusting mode."""
        self._running = False
        self._mode = CountMode.DOWN if self._mode is CountMode.UP else CountMode.UP
        self._adjusting = True

    def finish_adjusting(self) -> None:
        """Leave adjusting mode; the increment and decrement buttons stop working."""
        self._adjusting = False

    def increment(self, unit: TimeUnit) -> bool:
        """Add one to the unit's ones digit, carrying at 9; ignored unless adjusting."""
        if not self._adjusting:
            return False
        ones = unit.value
        if self._ticks[ones] == 9:
            self._ticks[ones] = 0
            self._ticks[ones + 1] = (self._ticks[ones + 1] + 1) & _BYTE
        else:
            self._ticks[ones] = (self._ticks[ones] + 1) & _BYTE
        return True

    def decrement(self, unit: TimeUnit) -> bool:
        """Subtract one from the unit's ones digit as a byte; ignored unless adjusting."""
        if not self._adjusting:
            return False
        ones = unit.value
        self._ticks[ones] = (self._ticks[ones] - 1) & _BYTE
        return True

    def digits(self) -> tuple[int, int, int, int, int, int]:
        """Digits most significant first: hour tens, hour ones, ..., second ones."""
        s1, s10, m1, m10, h1, h10 = self._ticks
        return (h10, h1, m10, m1, s10, s1)

    def display(self) -> list[tuple[int, int]]:
        """One multiplexing pass: (segment enable mask, BCD code) per display.

        Seconds ones are driven first on the highest enable bit. A digit
        outside 0-9 leaves the decoder on the previously driven code.
        """
        frames = []
        for mask, digit in zip(_SEGMENT_MASKS, self._ticks):
            if 0 <= digit <= 9:
                self._port_c = bcd_code(digit)
            frames.append((mask, self._port_c))
        return frames