# int_fixtures/logic.py

from __future__ import annotations

import itertools
import logging
from typing import Iterable, Iterator, TextIO, Tuple

_LOGGER = logging.getLogger(__name__)

WIDTHS = (8, 16, 32, 64)
EXHAUSTIVE_WIDTHS = (8, 16)
SAMPLE_WINDOW = 1024

STYLES = ("plain", "bigint")

HEADER = "export default {\n"
FOOTER = "};\n"


# ---------------- Ranges ----------------
def _check_width(bits: int) -> None:
    if bits not in WIDTHS:
        raise ValueError(f"width must be one of {', '.join(str(w) for w in WIDTHS)}")

def int_range_for(bits: int) -> Tuple[int, int]:
    """
    Return the inclusive (lo, hi) range of a signed two's complement integer.

    8  → [-128, 127]
    16 → [-32768, 32767]
    32 → [-(2^31), 2^31 - 1]
    64 → [-(2^63), 2^63 - 1]
    """
    _check_width(bits)
    lo = -(1 << (bits - 1))
    hi = (1 << (bits - 1)) - 1
    return lo, hi


# ---------------- Value iteration ----------------
def exhaustive_values(bits: int) -> range:
    """Every value of the width, ascending, each exactly once."""
    lo, hi = int_range_for(bits)
    return range(lo, hi + 1)

def sampled_values(bits: int, window: int = SAMPLE_WINDOW) -> Iterator[int]:
    """Boundary-sample a width: three windows of ``window`` values plus the maximum.

    Windows are emitted in this order, each ascending:
      - [lo, lo + window)
      - [-window, window)
      - [hi - window, hi)
      - hi

    Raises ``ValueError`` if the windows would overlap.
    """
    lo, hi = int_range_for(bits)
    if window < 1:
        raise ValueError("window must be at least 1")
    if 2 * window > hi:
        raise ValueError(f"window {window} too large for {bits}-bit sampling")
    return itertools.chain(
        range(lo, lo + window),
        range(-window, window),
        range(hi - window, hi),
        (hi,),
    )

def table_values(bits: int, window: int = SAMPLE_WINDOW) -> Iterable[int]:
    if bits in EXHAUSTIVE_WIDTHS:
        return exhaustive_values(bits)
    return sampled_values(bits, window)

def table_size(bits: int, window: int = SAMPLE_WINDOW) -> int:
    if bits in EXHAUSTIVE_WIDTHS:
        return 1 << bits
    _check_width(bits)
    return 3 * window + 1


# ---------------- Formatting ----------------
def to_hex_key(value: int, bits: int, pad: bool = True) -> str:
    """Hex key for ``value``: its two's complement bit pattern, upper-case, ``0x``-prefixed."""
    lo, hi = int_range_for(bits)
    if not (lo <= value <= hi):
        raise ValueError(f"Value out of range for {bits}-bit two's complement")
    pattern = value & ((1 << bits) - 1)
    digits = bits // 4 if pad else 1
    return f"0x{pattern:0{digits}X}"

def format_entry(value: int, bits: int, style: str = "plain") -> str:
    if style == "plain":
        return f"\t{to_hex_key(value, bits)}: {value},\n"
    elif style == "bigint":
        # Computed BigInt key, unpadded like printf's %llX
        return f"\t[{to_hex_key(value, bits, pad=False)}n]: {value}n,\n"
    else:
        raise ValueError(f"Unknown entry style: {style}")

def render_document(values: Iterable[int], bits: int, style: str = "plain") -> Iterator[str]:
    yield HEADER
    for value in values:
        yield format_entry(value, bits, style)
    yield FOOTER


# ---------------- Output ----------------
def check_table_args(bits: int, window: int = SAMPLE_WINDOW, style: str = "plain") -> None:
    """Raise ``ValueError`` unless (bits, window, style) describe a writable table."""
    if style not in STYLES:
        raise ValueError(f"Unknown entry style: {style}")
    table_values(bits, window)

def write_table(out: TextIO, bits: int, window: int = SAMPLE_WINDOW, style: str = "plain") -> int:
    """Write the whole fixture module for ``bits`` to ``out``.

    Arguments are validated before anything is written, so a bad width,
    window or style never leaves a partial document behind.
    Returns the number of entries written.
    """
    check_table_args(bits, window, style)
    values = table_values(bits, window)
    _LOGGER.debug("writing %d-bit table (%d entries, style=%s)", bits, table_size(bits, window), style)

    count = 0
    for line in render_document(values, bits, style):
        out.write(line)
        count += 1
    # header and footer are not entries
    return count - 2
