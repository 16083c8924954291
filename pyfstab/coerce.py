# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import re
from typing import Any, Dict

from typeguard import typechecked

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def unsigned_int(s: str) -> int:
    """Parse a decimal unsigned integer.

    Stricter than `int`: signs other than a leading '+', surrounding whitespace,
    underscores and non-ASCII digits are rejected.

    Examples:
    >>> unsigned_int('2')
    2
    >>> unsigned_int('+1')
    1
    >>> unsigned_int('-1')
    Traceback (most recent call last):
    ...
    ValueError: invalid digit found in '-1'
    """
    if s == "":
        raise ValueError("cannot parse integer from empty string")
    if _UNSIGNED_RE.fullmatch(s) is None:
        raise ValueError(f"invalid digit found in {s!r}")
    return int(s)


@typechecked
def ensure_dict(x: Any) -> Dict[str, Any]:
    return x
