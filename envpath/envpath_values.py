from __future__ import annotations

import random
import string
from typing import Optional

DEFAULT_RAND_LENGTH = 16
MAX_RAND_LENGTH = 1024
_ALPHANUMERIC = string.ascii_letters + string.digits


def get_random_value(rand_length: Optional[int] = None) -> str:
    """Random alphanumeric string, DEFAULT_RAND_LENGTH characters unless given."""
    n = DEFAULT_RAND_LENGTH if rand_length is None else rand_length
    return "".join(random.choices(_ALPHANUMERIC, k=n))


def match_values(ident: str, *, rand_length: Optional[int] = None) -> Optional[str]:
    """
    Resolves `$val: ident`. Unlike `$const:`, values are produced at call time.

      empty    -> ""
      rand-N   -> N random alphanumerics; the default length when N is not
                  a number in 0..MAX_RAND_LENGTH
    """
    if ident == "empty":
        return ""
    if ident.startswith("rand-"):
        _, _, n = ident.partition("-")
        length = int(n) if n.isascii() and n.isdigit() else None
        if length is None or length > MAX_RAND_LENGTH:
            length = rand_length
        return get_random_value(length)
    return None


__all__ = ["DEFAULT_RAND_LENGTH", "MAX_RAND_LENGTH", "get_random_value", "match_values"]
