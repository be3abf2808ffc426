"""
Console module for terminal TicTacToe.
Handles single keypress input, screen clearing, and line output.
"""

import os
import select
import sys
from collections import deque
from typing import Optional, Iterable, List
from colorama import just_fix_windows_console, Style, Cursor, ansi
from .config import TerminalConfig

try:
    import msvcrt
except ImportError:
    msvcrt = None

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None


# Ctrl+C as delivered by a terminal in raw mode
CTRL_C = "\x03"

# First byte of arrow, Delete and function key sequences
ESC = b"\x1b"

# msvcrt prefixes for arrows, function keys and the like
WINDOWS_KEY_PREFIXES = ("\x00", "\xe0")


def _utf8_length(lead: int) -> int:
    """Number of bytes in the UTF-8 character starting with `lead`."""
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


class ConsoleError(Exception):
    """Raised when the console can no longer be read from."""


class Console:
    """
    Simple terminal wrapper class.
    Reads one key at a time and writes lines to the screen.

    In simulate mode no terminal is touched: keys come from a scripted
    queue and printed lines are collected in `lines`.
    """

    def __init__(
        self,
        config: Optional[TerminalConfig] = None,
        simulate: bool = False,
        keys: Optional[Iterable[str]] = None
    ):
        """
        Initialize the console.

        Args:
            config: Terminal configuration. Uses defaults if not provided.
            simulate: If True, don't touch the real terminal.
            keys: Keys to hand out in simulate mode, in order. A string
                is taken one character per key.
        """
        self.config = config or TerminalConfig()
        self.simulate = simulate
        self.use_color = self.config.USE_COLOR and not simulate

        # Simulation state
        self.pending_keys = deque(keys or [])
        self.lines: List[str] = []
        self.clears = 0

        # ANSI colours and screen clearing on older Windows consoles
        if not simulate:
            just_fix_windows_console()

    def read_key(self) -> str:
        """
        Wait for a single keypress.

        Returns:
            The key. Usually one character; special keys come back as
            their whole escape sequence.

        Raises:
            KeyboardInterrupt: If Ctrl+C was pressed.
            ConsoleError: If there is no more input to read.
        """
        if self.simulate:
            if not self.pending_keys:
                raise ConsoleError("No more scripted keys!")
            key = self.pending_keys.popleft()
        else:
            key = self._read_terminal_key()

        if key == CTRL_C:
            raise KeyboardInterrupt
        return key

    def _read_terminal_key(self) -> str:
        """
        Read one keypress from stdin without line buffering or echo.

        Keys that send several characters (arrows, Delete, function keys)
        come back as one string, so their digits never count as moves.
        """
        stream = sys.stdin

        if stream is None or stream.closed:
            raise ConsoleError("Standard input is not available!")

        # Piped input: nothing to switch into raw mode
        if not stream.isatty():
            key = stream.read(1)
            if not key:
                raise ConsoleError("End of input reached!")
            return key

        if msvcrt is not None:
            key = msvcrt.getwch()
            # Special keys arrive as a prefix plus a scan code
            if key in WINDOWS_KEY_PREFIXES:
                key += msvcrt.getwch()
            return key

        if termios is None:
            raise ConsoleError("No way to read single keys on this platform!")

        fd = stream.fileno()
        try:
            old_settings = termios.tcgetattr(fd)
        except termios.error as e:
            raise ConsoleError(f"Could not read terminal settings: {e}") from e

        try:
            # TCSANOW keeps keys typed ahead of the prompt
            tty.setraw(fd, termios.TCSANOW)
            try:
                return self._read_raw_key(fd)
            finally:
                termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        except (termios.error, OSError) as e:
            raise ConsoleError(f"Could not read from terminal: {e}") from e

    def _read_byte(self, fd: int, timeout: Optional[float] = None) -> bytes:
        """Read one byte, or b"" if nothing arrives within `timeout` seconds."""
        if timeout is not None:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return b""
        return os.read(fd, 1)

    def _read_raw_key(self, fd: int) -> str:
        """Read one keypress from a terminal already in raw mode."""
        first = self._read_byte(fd)
        if not first:
            raise ConsoleError("End of input reached!")

        if first != ESC:
            data = first
            # Rest of a multi-byte UTF-8 character
            for _ in range(_utf8_length(first[0]) - 1):
                data += self._read_byte(fd, self.config.ESCAPE_TIMEOUT)
            return data.decode("utf-8", errors="replace")

        timeout = self.config.ESCAPE_TIMEOUT
        sequence = first
        introducer = self._read_byte(fd, timeout)
        sequence += introducer

        if introducer == b"[":
            # CSI: parameters up to a final byte in '@'..'~'
            while True:
                byte = self._read_byte(fd, timeout)
                sequence += byte
                if not byte or 0x40 <= byte[0] <= 0x7E:
                    break
        elif introducer == b"O":
            # SS3: one more byte (F1-F4 on many terminals)
            sequence += self._read_byte(fd, timeout)

        return sequence.decode("utf-8", errors="replace")

    def clear_screen(self) -> bool:
        """
        Clear the screen and move the cursor to the top.

        Returns:
            True if the screen was cleared, False if it couldn't be
            (clearing disabled, or output is not a terminal).
        """
        if not self.config.CLEAR_SCREEN:
            return False

        if self.simulate:
            self.clears += 1
            return True

        stream = sys.stdout
        if stream is None or not stream.isatty():
            return False

        stream.write(ansi.clear_screen() + Cursor.POS(1, 1))
        stream.flush()
        return True

    def print_line(self, text: str = "", color: Optional[str] = None):
        """
        Print a line of text.

        Args:
            text: The text to print.
            color: Optional colorama Fore colour for the line.
        """
        if self.simulate:
            self.lines.append(text)
            return

        if color and self.use_color:
            text = f"{color}{text}{Style.RESET_ALL}"
        print(text, flush=True)

    def print_lines(self, lines: Iterable[str]):
        """Print several lines."""
        for line in lines:
            self.print_line(line)
