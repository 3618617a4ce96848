"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing so a lone Escape does not wait for another key.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
}

_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_TILDE_KEYS: dict[bytes, str] = {
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
}

# Token for recognised-but-unbound sequences (Delete, F-keys, modified arrows).
UNKNOWN_KEY = "UNKNOWN"
_CSI_MAX_LENGTH = 16


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_csi_tail(fd: int) -> tuple[bytes, bytes | None]:
    """Consume CSI parameter bytes up to the final byte (0x40-0x7E).

    Returns ``(params, final)``; ``final`` is ``None`` when the sequence
    stalls or runs too long.
    """
    params = b""
    while len(params) < _CSI_MAX_LENGTH:
        ch = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if ch is None:
            return params, None
        if 0x40 <= ch[0] <= 0x7E:
            return params, ch
        params += ch
    return params, None


def _read_utf8_tail(fd: int, lead: bytes) -> str:
    """Complete a multi-byte UTF-8 character started by ``lead``."""
    first = lead[0]
    if first >= 0xF0:
        needed = 3
    elif first >= 0xE0:
        needed = 2
    elif first >= 0xC0:
        needed = 1
    else:
        needed = 0
    data = lead
    for _ in range(needed):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        data += part
    return data.decode("utf-8", errors="replace")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``; returns ``""`` when ``timeout_ms`` elapses."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    control = _CONTROL_KEYS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch)

    # Escape / arrow key sequences, CSI (ESC [) or SS3 (ESC O) form.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ESC"
        return _FINAL_KEYS.get(final, UNKNOWN_KEY)
    params, final = _read_csi_tail(fd)
    if final is None:
        return UNKNOWN_KEY
    if not params:
        return _FINAL_KEYS.get(final, UNKNOWN_KEY)
    if final == b"~":
        return _TILDE_KEYS.get(params, UNKNOWN_KEY)
    return UNKNOWN_KEY
