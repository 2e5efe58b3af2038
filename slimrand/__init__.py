"""A small xorwow pseudo-random number generator with typed sampling.

Not suitable for cryptographic use.
"""

import logging

from .kinds import Kind
from .seeding import derive_seed
from .xorwow import INIT_COUNTER, INIT_WORDS, WEYL_INCREMENT, Xorwow

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "INIT_COUNTER",
    "INIT_WORDS",
    "Kind",
    "WEYL_INCREMENT",
    "Xorwow",
    "derive_seed",
]
