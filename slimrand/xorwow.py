# slimrand/xorwow.py
# Marsaglia's xorwow generator with typed sampling.
# State: five 32-bit shift-register words plus a 32-bit Weyl counter.
# NOT suitable for cryptographic use.

import logging

from .kinds import Kind
from .seeding import MASK32, derive_seed, fold_seed

logger = logging.getLogger(__name__)

WEYL_INCREMENT = 362437

# Marsaglia's published start state; seed 0 starts here exactly.
INIT_WORDS = (123456789, 362436069, 521288629, 88675123, 5783321)
INIT_COUNTER = 6615241


class Xorwow:
    """A xorwow generator owned by a single caller.

    ``Xorwow()`` seeds itself from ``config.SEED_MODE`` (OS entropy by
    default); ``Xorwow(seed)`` and ``Xorwow.from_seed(seed)`` are
    deterministic. Instances do no locking: give each thread its own
    generator or serialize access externally.
    """

    def __init__(self, seed=None):
        if seed is None:
            seed = derive_seed()
        self._load(seed)

    @classmethod
    def from_seed(cls, seed):
        rng = cls.__new__(cls)
        rng._load(seed)
        return rng

    def _load(self, seed):
        words = fold_seed(seed)
        self.state = [a ^ b for a, b in zip(INIT_WORDS, words)]
        self.counter = INIT_COUNTER ^ words[5]
        if not any(self.state):
            # the all-zero register is a fixed point of the xor-shift
            logger.debug("Seed cancels the shift register, using the start words")
            self.state = list(INIT_WORDS)

    def next_u32(self):
        """Advance one step and return the next 32-bit output word."""
        x, y, z, w, v = self.state
        t = x ^ (x >> 2)
        t ^= (t << 1) & MASK32
        t ^= v ^ ((v << 4) & MASK32)
        self.state = [y, z, w, v, t]
        self.counter = (self.counter + WEYL_INCREMENT) & MASK32
        return (t + self.counter) & MASK32

    def peek_next(self):
        # return next output without consuming it
        x, v = self.state[0], self.state[4]
        t = x ^ (x >> 2)
        t ^= (t << 1) & MASK32
        t ^= v ^ ((v << 4) & MASK32)
        return (t + self.counter + WEYL_INCREMENT) & MASK32

    def clone(self):
        """Return an independent generator that continues this stream."""
        twin = self.__class__.__new__(self.__class__)
        twin.state = list(self.state)
        twin.counter = self.counter
        return twin

    def __repr__(self):
        words = ', '.join(f'0x{word:08x}' for word in self.state)
        return f'{self.__class__.__name__}(state=[{words}], counter=0x{self.counter:08x})'

    # raw fixed-width draws

    def _bits(self, bits):
        if bits <= 32:
            return self.next_u32() & ((1 << bits) - 1)
        # least significant word first
        value = 0
        for i in range(bits // 32):
            value |= self.next_u32() << (32 * i)
        return value

    def _signed(self, bits):
        value = self._bits(bits)
        if value >> (bits - 1):
            value -= 1 << bits
        return value

    def u8(self):
        return self._bits(8)

    def i8(self):
        return self._signed(8)

    def u16(self):
        return self._bits(16)

    def i16(self):
        return self._signed(16)

    def u32(self):
        return self._bits(32)

    def i32(self):
        return self._signed(32)

    def u64(self):
        return self._bits(64)

    def i64(self):
        return self._signed(64)

    def u128(self):
        return self._bits(128)

    def i128(self):
        return self._signed(128)

    def f32(self):
        """Float in [0, 1) from the top 24 bits of one word."""
        return (self.next_u32() >> 8) * (1.0 / (1 << 24))

    def f64(self):
        """Float in [0, 1) from the top 53 bits of one u64."""
        return (self._bits(64) >> 11) * (1.0 / (1 << 53))

    def boolean(self):
        return self.next_u32() >> 31 == 1

    def sample_bytes(self, n):
        """Return ``n`` bytes, taken low byte first from ceil(n/4) words."""
        if n < 0:
            raise ValueError(f"byte count must be non-negative, got {n}")
        buf = bytearray()
        while len(buf) < n:
            buf += self.next_u32().to_bytes(4, 'little')
        return bytes(buf[:n])

    def sample(self, kind):
        """Sample one value of ``kind``, a :class:`Kind` or its string value."""
        try:
            sampler = _SAMPLERS[Kind(kind)]
        except (ValueError, TypeError):
            raise TypeError(f"cannot sample {kind!r}: not a supported kind") from None
        return sampler(self)


_SAMPLERS = {
    Kind.U8: Xorwow.u8,
    Kind.I8: Xorwow.i8,
    Kind.U16: Xorwow.u16,
    Kind.I16: Xorwow.i16,
    Kind.U32: Xorwow.u32,
    Kind.I32: Xorwow.i32,
    Kind.U64: Xorwow.u64,
    Kind.I64: Xorwow.i64,
    Kind.U128: Xorwow.u128,
    Kind.I128: Xorwow.i128,
    Kind.F32: Xorwow.f32,
    Kind.F64: Xorwow.f64,
    Kind.BOOL: Xorwow.boolean,
}
