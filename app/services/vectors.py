# =============================================================================
# Vector Field Codec — list[number] <-> JSON text
# =============================================================================
#
# The users table stores `vec` as TEXT because the datastore has no native
# array type. Writes are strict: anything other than a list of finite
# numbers is rejected before the statement runs. Reads are lenient: stored
# text that is not a JSON array decodes to None and is only logged.
# =============================================================================

from __future__ import annotations

import json
import logging
import math
import sys
from typing import Any

from app.exceptions import ValidationError

logger = logging.getLogger(__name__)

VEC_ERROR = "vec must be an array of numbers"


def _is_number(value: Any) -> bool:
    # bool is a subclass of int, but true/false are not numbers in JSON
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        # int vs float comparison is exact, it never overflows
        return abs(value) <= sys.float_info.max
    if isinstance(value, float):
        return math.isfinite(value)
    return False


def encode_vec(vec: Any) -> str | None:
    """
    Encode a vector for storage.

    None → None (no vector). A list of numbers → compact JSON text, e.g.
    [1.5, -2, 3] → "[1.5,-2,3]". Integers too large for a double are
    rejected like any other non-number. Anything else raises ValidationError.
    """
    if vec is None:
        return None
    if not isinstance(vec, list) or not all(_is_number(v) for v in vec):
        raise ValidationError(VEC_ERROR)
    return json.dumps(vec, separators=(",", ":"))


def decode_vec(stored: str | None) -> list | None:
    """
    Decode a stored vector.

    Empty or NULL → None. Text that does not parse, or parses to something
    other than an array, also → None.
    """
    if not stored:
        return None
    try:
        parsed = json.loads(stored)
    except (ValueError, RecursionError):
        logger.warning("Stored vec is not valid JSON: %.80r", stored)
        return None
    if not isinstance(parsed, list):
        logger.warning("Stored vec is not a JSON array: %.80r", stored)
        return None
    return parsed
