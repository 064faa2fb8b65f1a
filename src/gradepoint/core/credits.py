import math
import re
from typing import Union

DEFAULT_CREDITS = 3.0

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_credits(raw: Union[str, float, int, None]) -> float:
    """
    Coerce a credits input to a non-negative number.

    Text is read the way a browser number box reads it: the leading numeric
    part counts ("4.5h" -> 4.5) and anything unparsable becomes 0.
    Negative or non-finite values also become 0.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        match = _LEADING_NUMBER.match(raw)
        if not match:
            return 0.0
        value = float(match.group(0))

    if not math.isfinite(value) or value <= 0:
        return 0.0
    return value


class InvalidCreditsError(ValueError):
    pass


def check_credits(value) -> float:
    """Return value as a float, or raise for anything that is not a finite number >= 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidCreditsError(f"Credits must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidCreditsError(f"Credits must be a finite number >= 0, got {value!r}")
    return float(value)
