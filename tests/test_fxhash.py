import pytest
from hypothesis import given
from hypothesis import strategies as st

from sudautil.fxhash import SEED64, FxHasher64, fx_hash64


def test_fresh_hasher_is_zero():
    assert FxHasher64().finish() == 0


def test_empty_write_keeps_zero():
    assert fx_hash64(b"") == 0


def test_one_from_zero_gives_seed():
    h = FxHasher64()
    h.write_u64(1)
    assert h.finish() == SEED64


def test_one_from_zero_gives_pinned_seed_value():
    h = FxHasher64()
    h.write_u32(1)
    assert h.finish() == 0x517CC1B727220A95


@given(st.integers(min_value=0, max_value=255))
def test_single_byte_matches_word_writers(value):
    a, b, c, d = FxHasher64(), FxHasher64(), FxHasher64(), FxHasher64()
    a.write_u8(value)
    b.write_u64(value)
    c.write_usize(value)
    d.write(bytes([value]))
    assert a.finish() == b.finish() == c.finish() == d.finish()


@given(st.binary(min_size=2, max_size=2))
def test_two_bytes_match_u16(data):
    h = FxHasher64()
    h.write_u16(int.from_bytes(data, "little"))
    assert fx_hash64(data) == h.finish()


@given(st.binary(min_size=4, max_size=4))
def test_four_bytes_match_u32(data):
    h = FxHasher64()
    h.write_u32(int.from_bytes(data, "little"))
    assert fx_hash64(data) == h.finish()


@given(st.binary(min_size=11, max_size=11))
def test_tail_is_split_into_words(data):
    h = FxHasher64()
    h.write_u64(int.from_bytes(data[:8], "little"))
    h.write_u16(int.from_bytes(data[8:10], "little"))
    h.write_u8(data[10])
    assert fx_hash64(data) == h.finish()


@given(st.binary(max_size=64))
def test_hash_fits_64_bits_and_is_deterministic(data):
    value = fx_hash64(data)
    assert 0 <= value < 2**64
    assert fx_hash64(data) == value


@given(st.binary(max_size=32))
def test_write_accepts_bytearray(data):
    assert fx_hash64(bytearray(data)) == fx_hash64(data)


@pytest.mark.parametrize(
    "method, value",
    [("write_u8", 256), ("write_u16", 65536), ("write_u32", 2**32), ("write_u64", -1)],
)
def test_out_of_range_values_raise(method, value):
    with pytest.raises(ValueError):
        getattr(FxHasher64(), method)(value)