"""Input-layer public API for key decoding and event mapping.

Exports are split between low-level terminal decoding (``read_key``) and the
key-to-event translation used by the runtime loop.
"""

from .keys import delete_last_word, event_for_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "delete_last_word",
    "event_for_key",
    "read_key",
]
