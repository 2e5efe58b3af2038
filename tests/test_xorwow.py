"""Generator core tests: the advance step, seeding and state invariants."""

import pytest

from slimrand import INIT_COUNTER, INIT_WORDS, WEYL_INCREMENT, Kind, Xorwow

MASK32 = 0xFFFFFFFF

# first five output words for seed 0 (Marsaglia's start state)
SEED_ZERO_WORDS = [0x0EB70507, 0xDBF10AA0, 0x4B5FF98D, 0xE8DBAE01, 0x6F3BC4A7]


def reference_step(state, counter):
    x, y, z, w, v = state
    t = x
    s = v
    t ^= t >> 2
    t = (t ^ (t << 1)) & MASK32
    t = (t ^ s ^ (s << 4)) & MASK32
    counter = (counter + 362437) & MASK32
    return [y, z, w, v, t], counter, (t + counter) & MASK32


def pack_words(words):
    value = 0
    for i, word in enumerate(words):
        value |= word << (32 * i)
    return value


def test_weyl_increment_is_362437():
    assert WEYL_INCREMENT == 362437


def test_seed_zero_starts_from_published_words():
    rng = Xorwow.from_seed(0)
    assert rng.state == list(INIT_WORDS)
    assert rng.counter == INIT_COUNTER
    assert any(rng.state)


def test_seed_zero_first_u32_is_pinned():
    rng = Xorwow.from_seed(0)
    assert rng.sample(Kind.U32) == 246875399


def test_seed_zero_first_words():
    rng = Xorwow.from_seed(0)
    assert [rng.next_u32() for _ in range(5)] == SEED_ZERO_WORDS


def test_step_matches_reference_recurrence():
    rng = Xorwow.from_seed(0xDEADBEEF)
    state, counter = list(rng.state), rng.counter
    for _ in range(200):
        state, counter, expected = reference_step(state, counter)
        assert rng.next_u32() == expected
        assert rng.state == state
        assert rng.counter == counter


def test_sixty_four_bit_seed_low_byte():
    rng = Xorwow.from_seed(0x0123456789ABCDEF)
    first_word = Xorwow.from_seed(0x0123456789ABCDEF).next_u32()
    assert first_word == 0xF27A4853
    assert rng.u8() == first_word & 0xFF == 0x53


def test_same_seed_same_sequence():
    kinds = [Kind.U8, Kind.I64, Kind.U128, Kind.F64, Kind.BOOL, Kind.I16, Kind.U32]
    for seed in (0, 1, 42, 0xCAFEBABEDEADBEEF, -7, b"seed bytes", 1 << 300):
        a = Xorwow.from_seed(seed)
        b = Xorwow.from_seed(seed)
        assert [a.sample(k) for k in kinds * 20] == [b.sample(k) for k in kinds * 20]
        assert a.sample_bytes(13) == b.sample_bytes(13)


def test_different_seeds_differ():
    assert Xorwow.from_seed(1).u64() != Xorwow.from_seed(2).u64()


def test_constructor_with_seed_matches_from_seed():
    assert Xorwow(99).u64() == Xorwow.from_seed(99).u64()


def test_seed_words_fold_into_state():
    rng = Xorwow.from_seed(0x0123456789ABCDEF)
    assert rng.state[0] == INIT_WORDS[0] ^ 0x89ABCDEF
    assert rng.state[1] == INIT_WORDS[1] ^ 0x01234567
    assert rng.state[2:] == list(INIT_WORDS[2:])
    assert rng.counter == INIT_COUNTER


def test_sixth_seed_word_feeds_counter():
    rng = Xorwow.from_seed(5 << 160)
    assert rng.state == list(INIT_WORDS)
    assert rng.counter == INIT_COUNTER ^ 5


def test_wide_seeds_fold_back_into_first_word():
    assert Xorwow.from_seed(1 << 192).state == Xorwow.from_seed(1).state


def test_bytes_seed_is_little_endian():
    assert Xorwow.from_seed(b"\x01\x02").state == Xorwow.from_seed(0x0201).state
    assert Xorwow.from_seed(bytearray(b"\x07")).u64() == Xorwow.from_seed(7).u64()
    assert Xorwow.from_seed(b"").state == list(INIT_WORDS)


def test_negative_seed_is_192_bit_twos_complement():
    assert Xorwow.from_seed(-1).state == Xorwow.from_seed((1 << 192) - 1).state


@pytest.mark.parametrize("seed", [None, "abc", 1.5, [1, 2]])
def test_from_seed_rejects_unsupported_types(seed):
    with pytest.raises(TypeError):
        Xorwow.from_seed(seed)


def test_cancelling_seed_is_perturbed():
    rng = Xorwow.from_seed(pack_words(INIT_WORDS))
    assert any(rng.state)
    assert rng.state == list(INIT_WORDS)
    assert rng.next_u32() == SEED_ZERO_WORDS[0]


def test_cancelling_seed_keeps_seeded_counter():
    rng = Xorwow.from_seed(pack_words(INIT_WORDS) | 9 << 160)
    assert rng.state == list(INIT_WORDS)
    assert rng.counter == INIT_COUNTER ^ 9


def test_register_never_reaches_zero_and_does_not_cycle_early():
    rng = Xorwow.from_seed(0)
    seen = {tuple(rng.state)}
    for _ in range(10000):
        rng.next_u32()
        state = tuple(rng.state)
        assert any(state)
        assert state not in seen
        seen.add(state)


def test_counter_wraps_modulo_2_32():
    rng = Xorwow.from_seed(0)
    rng.counter = MASK32
    rng.next_u32()
    assert rng.counter == WEYL_INCREMENT - 1


def test_output_words_fit_in_32_bits():
    rng = Xorwow.from_seed(0xFFFFFFFF)
    for _ in range(1000):
        assert 0 <= rng.next_u32() <= MASK32


def test_peek_next_does_not_advance():
    rng = Xorwow.from_seed(3)
    before = (list(rng.state), rng.counter)
    peeked = rng.peek_next()
    assert (rng.state, rng.counter) == before
    assert rng.next_u32() == peeked


def test_clone_continues_stream_independently():
    rng = Xorwow.from_seed(11)
    rng.u64()
    twin = rng.clone()
    assert [twin.next_u32() for _ in range(10)] == [rng.next_u32() for _ in range(10)]
    twin.next_u32()
    assert twin.state != rng.state


def test_repr_shows_state_words():
    text = repr(Xorwow.from_seed(0))
    assert text.startswith("Xorwow(state=[0x075bcd15")
    assert "counter=0x0064f0c9" in text
