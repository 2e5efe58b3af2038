# slimrand/seeding.py
# Seed derivation for default construction, and seed -> state word folding.

import itertools
import logging
import os
import time

from . import config

logger = logging.getLogger(__name__)

MASK32 = (1 << 32) - 1
SEED_WORDS = 6
SEED_BITS = 32 * SEED_WORDS

# distinguishes time seeds taken within the same clock tick
_time_counter = itertools.count()


def _fallback(reason):
    seed = config.FALLBACK_SEED
    logger.warning(f"{reason}, falling back to default SEED: {seed:016x}")
    return seed


def derive_seed():
    """
    Derive a seed integer according to config.SEED_MODE.
    Priority:
      - If SEED_MODE == 'random' -> os.urandom(config.ENTROPY_BYTES)
      - If SEED_MODE == 'time' -> clock reading mixed with pid and a counter
      - If SEED_MODE == 'fixed' and config.SEED is set -> use it
      - If SEED_MODE == 'fixed' and config.SEED is None -> FALLBACK_SEED
    Never raises: a missing entropy source or an unknown mode degrades to
    config.FALLBACK_SEED.
    """
    mode = (config.SEED_MODE or 'random').lower()
    if mode == 'random':
        try:
            b = os.urandom(config.ENTROPY_BYTES)
        except (NotImplementedError, OSError) as exc:
            return _fallback(f"Entropy source unavailable ({exc})")
        seed = int.from_bytes(b, 'little')
        logger.info(f"Using random SEED (os.urandom, {len(b)} bytes)")
        return seed
    elif mode == 'time':
        if config.TIME_GRANULARITY == 's':
            t = int(time.time())
        elif config.TIME_GRANULARITY == 'ms':
            t = time.time_ns() // 1_000_000
        else:
            t = time.time_ns()
        # clock -> x, y; pid -> z; counter -> d, which is added to every output
        seed = (t & ((1 << 64) - 1)) | (os.getpid() & MASK32) << 64 | (next(_time_counter) & MASK32) << 160
        logger.info(f"Using time-derived SEED (granu={config.TIME_GRANULARITY}): {seed:048x}")
        return seed
    elif mode == 'fixed':
        if config.SEED is not None:
            logger.info(f"Using fixed SEED from config: {config.SEED!r}")
            return config.SEED
        seed = config.FALLBACK_SEED
        logger.info(f"Using default fixed SEED: {seed:016x}")
        return seed
    return _fallback(f"Unknown SEED_MODE '{config.SEED_MODE}'")


def seed_to_int(seed):
    if isinstance(seed, (bytes, bytearray, memoryview)):
        return int.from_bytes(bytes(seed), 'little')
    if isinstance(seed, int):
        if seed < 0:
            seed %= 1 << SEED_BITS
        return seed
    raise TypeError(f"seed must be an int or bytes-like, not {type(seed).__name__}")


def fold_seed(seed):
    """Split a seed into six 32-bit words, least significant first.

    Words past the sixth are XORed back into slot ``i % 6``, so seeds of any
    width contribute every bit.
    """
    n = seed_to_int(seed)
    words = [0] * SEED_WORDS
    i = 0
    while n:
        words[i % SEED_WORDS] ^= n & MASK32
        n >>= 32
        i += 1
    return words
