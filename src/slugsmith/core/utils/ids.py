"""Random identifiers for slug suffixes"""

import secrets
import string
from typing import Iterable


ALPHANUMERIC = string.ascii_letters + string.digits


def random_id(length: int, alphabet: Iterable[str] = ALPHANUMERIC) -> str:
    """Return length characters drawn uniformly from alphabet. Empty string for length <= 0."""
    pool = tuple(alphabet)
    return "".join(secrets.choice(pool) for _ in range(length))
