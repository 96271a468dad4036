"""Data Matrix symbol size table and lookups."""

from enum import Enum, IntEnum, auto

SQUARE_COUNT = 24
RECT_COUNT = 6
SIZE_COUNT = SQUARE_COUNT + RECT_COUNT
SYMBOL_144X144 = 23


class SymbolShape(IntEnum):
    """Size requests that let the library pick an index automatically."""

    SHAPE_AUTO = -1
    SQUARE_AUTO = -2
    RECT_AUTO = -3


class SymbolAttribute(Enum):
    """Properties that can be read for a symbol size."""

    SYMBOL_ROWS = auto()
    SYMBOL_COLS = auto()
    DATA_REGION_ROWS = auto()
    DATA_REGION_COLS = auto()
    HORIZ_DATA_REGIONS = auto()
    VERT_DATA_REGIONS = auto()
    MAPPING_MATRIX_ROWS = auto()
    MAPPING_MATRIX_COLS = auto()
    INTERLEAVED_BLOCKS = auto()
    BLOCK_ERROR_WORDS = auto()
    BLOCK_MAX_CORRECTABLE = auto()
    SYMBOL_DATA_WORDS = auto()
    SYMBOL_ERROR_WORDS = auto()
    SYMBOL_MAX_CORRECTABLE = auto()


_SYMBOL_ROWS = (
    10, 12, 14, 16, 18, 20, 22, 24, 26,
    32, 36, 40, 44, 48, 52,
    64, 72, 80, 88, 96, 104,
    120, 132, 144,
    8, 8, 12, 12, 16, 16,
)

_SYMBOL_COLS = (
    10, 12, 14, 16, 18, 20, 22, 24, 26,
    32, 36, 40, 44, 48, 52,
    64, 72, 80, 88, 96, 104,
    120, 132, 144,
    18, 32, 26, 36, 36, 48,
)

_DATA_REGION_ROWS = (
    8, 10, 12, 14, 16, 18, 20, 22, 24,
    14, 16, 18, 20, 22, 24,
    14, 16, 18, 20, 22, 24,
    18, 20, 22,
    6, 6, 10, 10, 14, 14,
)

_DATA_REGION_COLS = (
    8, 10, 12, 14, 16, 18, 20, 22, 24,
    14, 16, 18, 20, 22, 24,
    14, 16, 18, 20, 22, 24,
    18, 20, 22,
    16, 14, 24, 16, 16, 22,
)

_HORIZ_DATA_REGIONS = (
    1, 1, 1, 1, 1, 1, 1, 1, 1,
    2, 2, 2, 2, 2, 2,
    4, 4, 4, 4, 4, 4,
    6, 6, 6,
    1, 2, 1, 2, 2, 2,
)

_INTERLEAVED_BLOCKS = (
    1, 1, 1, 1, 1, 1, 1, 1, 1,
    1, 1, 1, 1, 1, 2,
    2, 4, 4, 4, 4, 6,
    6, 8, 10,
    1, 1, 1, 1, 1, 1,
)

_SYMBOL_DATA_WORDS = (
    3, 5, 8, 12, 18, 22, 30, 36, 44,
    62, 86, 114, 144, 174, 204,
    280, 368, 456, 576, 696, 816,
    1050, 1304, 1558,
    5, 10, 16, 22, 32, 49,
)

_BLOCK_ERROR_WORDS = (
    5, 7, 10, 12, 14, 18, 20, 24, 28,
    36, 42, 48, 56, 68, 42,
    56, 36, 48, 56, 68, 56,
    68, 62, 62,
    7, 11, 14, 18, 24, 28,
)

_BLOCK_MAX_CORRECTABLE = (
    2, 3, 5, 6, 7, 9, 10, 12, 14,
    18, 21, 24, 28, 34, 21,
    28, 18, 24, 28, 34, 28,
    34, 31, 31,
    3, 5, 7, 9, 12, 14,
)


def _vert_data_regions(idx):
    return _HORIZ_DATA_REGIONS[idx] if idx < SQUARE_COUNT else 1


_LOOKUP = {
    SymbolAttribute.SYMBOL_ROWS: lambda i: _SYMBOL_ROWS[i],
    SymbolAttribute.SYMBOL_COLS: lambda i: _SYMBOL_COLS[i],
    SymbolAttribute.DATA_REGION_ROWS: lambda i: _DATA_REGION_ROWS[i],
    SymbolAttribute.DATA_REGION_COLS: lambda i: _DATA_REGION_COLS[i],
    SymbolAttribute.HORIZ_DATA_REGIONS: lambda i: _HORIZ_DATA_REGIONS[i],
    SymbolAttribute.VERT_DATA_REGIONS: _vert_data_regions,
    SymbolAttribute.MAPPING_MATRIX_ROWS: lambda i: _DATA_REGION_ROWS[i] * _vert_data_regions(i),
    SymbolAttribute.MAPPING_MATRIX_COLS: lambda i: _DATA_REGION_COLS[i] * _HORIZ_DATA_REGIONS[i],
    SymbolAttribute.INTERLEAVED_BLOCKS: lambda i: _INTERLEAVED_BLOCKS[i],
    SymbolAttribute.BLOCK_ERROR_WORDS: lambda i: _BLOCK_ERROR_WORDS[i],
    SymbolAttribute.BLOCK_MAX_CORRECTABLE: lambda i: _BLOCK_MAX_CORRECTABLE[i],
    SymbolAttribute.SYMBOL_DATA_WORDS: lambda i: _SYMBOL_DATA_WORDS[i],
    SymbolAttribute.SYMBOL_ERROR_WORDS: lambda i: _BLOCK_ERROR_WORDS[i] * _INTERLEAVED_BLOCKS[i],
    SymbolAttribute.SYMBOL_MAX_CORRECTABLE: lambda i: _BLOCK_MAX_CORRECTABLE[i] * _INTERLEAVED_BLOCKS[i],
}


def _check_index(size_idx):
    if not 0 <= size_idx < SIZE_COUNT:
        raise ValueError(f"invalid symbol size index: {size_idx}")


def symbol_attribute(attribute, size_idx):
    """Return the value of ``attribute`` for the symbol size ``size_idx``."""
    _check_index(size_idx)
    try:
        lookup = _LOOKUP[attribute]
    except KeyError:
        raise ValueError(f"unknown symbol attribute: {attribute!r}") from None
    return lookup(size_idx)


def block_data_size(size_idx, block_idx):
    """Return the number of data words held by one interleaved block."""
    _check_index(size_idx)
    count = _SYMBOL_DATA_WORDS[size_idx] // _INTERLEAVED_BLOCKS[size_idx]
    if size_idx == SYMBOL_144X144 and block_idx < 8:
        return count + 1
    return count


def find_symbol_size(data_words, size_request):
    """Pick the size index able to hold ``data_words``, or None if none fits."""
    if data_words <= 0:
        return None

    if size_request in (SymbolShape.SQUARE_AUTO, SymbolShape.RECT_AUTO):
        if size_request == SymbolShape.SQUARE_AUTO:
            candidates = range(0, SQUARE_COUNT)
        else:
            candidates = range(SQUARE_COUNT, SIZE_COUNT)
        return next(
            (idx for idx in candidates if _SYMBOL_DATA_WORDS[idx] >= data_words),
            None,
        )

    _check_index(size_request)
    if data_words > _SYMBOL_DATA_WORDS[size_request]:
        return None
    return int(size_request)


def size_idx_from_dimensions(rows, cols):
    """Return the size index of a rows x cols symbol, or None if there is none."""
    return next(
        (
            idx
            for idx, (r, c) in enumerate(zip(_SYMBOL_ROWS, _SYMBOL_COLS))
            if r == rows and c == cols
        ),
        None,
    )