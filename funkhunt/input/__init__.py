"""Input-layer public API for key decoding and mode dispatch.

Exports are split between low-level terminal decoding (`read_key`) and the
mode router used by the runtime loop (`handle_key`).
"""

from .key_registry import KeyComboBinding, KeyComboRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, _PENDING_BYTES, read_key
from .router import handle_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
    "KeyComboBinding",
    "KeyComboRegistry",
    "handle_key",
]
