import pytest

from matrixcode.reedsol import (
    ReedSolomonError,
    generator_poly,
    gf_mult,
    gf_mult_antilog,
    rs_decode,
    rs_encode,
)
from matrixcode.symbol import SymbolAttribute, symbol_attribute

SIZE_10X10 = 0
SIZE_144X144 = 23


def _data_for(size_idx):
    count = symbol_attribute(SymbolAttribute.SYMBOL_DATA_WORDS, size_idx)
    return [(7 * i + 3) % 256 for i in range(count)]


def test_gf_mult_matches_table():
    assert gf_mult(2, 128) == 45
    assert gf_mult_antilog(1, 8) == 45


def test_gf_mult_zero_and_identity():
    for a in range(256):
        assert gf_mult(a, 0) == 0
        assert gf_mult(0, a) == 0
        assert gf_mult(a, 1) == a


def test_gf_mult_commutative_and_invertible():
    for a in range(1, 256):
        products = {gf_mult(a, b) for b in range(1, 256)}
        assert products == set(range(1, 256))
        assert gf_mult(a, 37) == gf_mult(37, a)


def test_generator_poly_five_words():
    assert generator_poly(5) == [228, 48, 15, 111, 62]


def test_generator_poly_length():
    assert len(generator_poly(68)) == 68


def test_encode_standard_example():
    code = rs_encode([142, 164, 186], SIZE_10X10)
    assert code == [142, 164, 186, 114, 25, 5, 88, 102]


def test_decode_clean_is_unchanged():
    code = rs_encode(_data_for(SIZE_10X10), SIZE_10X10)
    assert rs_decode(code, SIZE_10X10) == code


@pytest.mark.parametrize("size_idx", [0, 5, 14, 16, 20, 24, 29])
def test_round_trip_with_correctable_errors(size_idx):
    code = rs_encode(_data_for(size_idx), size_idx)
    stride = symbol_attribute(SymbolAttribute.INTERLEAVED_BLOCKS, size_idx)
    max_corr = symbol_attribute(SymbolAttribute.BLOCK_MAX_CORRECTABLE, size_idx)

    damaged = list(code)
    for block in range(stride):
        for k in range(max_corr):
            pos = block + stride * (2 * k)
            damaged[pos] ^= 0x5A
    assert damaged != code
    assert rs_decode(damaged, size_idx) == code


def test_round_trip_144x144_blocks():
    code = rs_encode(_data_for(SIZE_144X144), SIZE_144X144)
    assert len(code) == 1558 + 620

    damaged = list(code)
    for pos in (0, 9, 17, 1000, 1557, 1560, 2177):
        damaged[pos] ^= 0xFF
    assert rs_decode(damaged, SIZE_144X144) == code


def test_errors_in_error_words_are_repaired():
    code = rs_encode(_data_for(SIZE_10X10), SIZE_10X10)
    damaged = list(code)
    damaged[3] ^= 1
    damaged[7] ^= 0x80
    assert rs_decode(damaged, SIZE_10X10) == code


def test_too_many_errors_raise():
    code = rs_encode(_data_for(SIZE_10X10), SIZE_10X10)
    damaged = list(code)
    for pos in (0, 2, 4):
        damaged[pos] ^= 0x33
    with pytest.raises(ReedSolomonError):
        rs_decode(damaged, SIZE_10X10)


def test_encode_replaces_trailing_words():
    data = _data_for(SIZE_10X10)
    assert rs_encode(data + [0] * 5, SIZE_10X10) == rs_encode(data, SIZE_10X10)


def test_encode_too_short_raises():
    with pytest.raises(ValueError):
        rs_encode([1, 2], SIZE_10X10)


def test_decode_too_short_raises():
    with pytest.raises(ValueError):
        rs_decode([0] * 7, SIZE_10X10)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        rs_encode([1, 2, 3], 30)