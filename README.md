# matrixcode

Pure-Python building blocks for reading and writing Data Matrix (ECC 200)
symbols. It depends only on the standard library.

## Modules

### `matrixcode.symbol`

This module holds the ECC 200 symbol size table: 24 square sizes (indices
0–23) and 6 rectangular sizes (indices 24–29).

- `symbol_attribute(attribute, size_idx)` returns one property of a size.
  The property is given as a `SymbolAttribute` member, such as
  `SYMBOL_ROWS`, `SYMBOL_COLS`, `DATA_REGION_ROWS`, `MAPPING_MATRIX_COLS`,
  `INTERLEAVED_BLOCKS`, `BLOCK_ERROR_WORDS`, `SYMBOL_DATA_WORDS` or
  `SYMBOL_ERROR_WORDS`. An out-of-range `size_idx` raises `ValueError`.
- `block_data_size(size_idx, block_idx)` returns the number of data words
  in one interleaved block. In the 144x144 symbol, the first eight blocks
  carry one extra word.
- `find_symbol_size(data_words, size_request)` returns a size index that
  can hold `data_words`, or `None` if no size fits.
  - With `SymbolShape.SQUARE_AUTO` or `SymbolShape.RECT_AUTO`, it returns
    the smallest fitting size of that shape.
  - With an explicit index, it returns that index if the data fits.
- `size_idx_from_dimensions(rows, cols)` returns the size index for the
  given dimensions, or `None` if there is no such size.

### `matrixcode.reedsol`

This module does Reed-Solomon coding over GF(256) with primitive
polynomial 301. Interleaved blocks are handled as the symbol table
defines them.

- `rs_encode(codewords, size_idx)` takes the data codewords and returns a
  new list of data followed by error codewords. Any values past the data
  words are replaced.
- `rs_decode(codewords, size_idx)` returns a repaired copy of the
  codewords. If a block has more errors than can be corrected, it raises
  `ReedSolomonError`.
- `gf_mult(a, b)`, `gf_mult_antilog(a, b)` and
  `generator_poly(error_word_count)` expose the field arithmetic.

### `matrixcode.vector2`

- `Vector2` is an immutable 2D vector. It supports `+` and `-` and has
  `scaled`, `cross`, `dot`, `mag` and `normalized`. `normalized` raises
  `ValueError` for a zero-length vector.
- `Ray2` is a ray with origin `p` and unit direction `v`. It has:
  - `point_at(t)`;
  - `distance_from(q)`, which is perpendicular and signed;
  - `distance_along(q)`;
  - `intersect(other)`, which raises `ValueError` for parallel rays.

### `matrixcode.scangrid`

`ScanGrid(x_min, x_max, y_min, y_max, scan_gap, scale)` yields the pixel
locations to probe, in coarse-to-fine cross patterns. `pop_location()`
returns the next in-bounds `(x, y)`, or `None` when the grid is used up.
Iterating over the grid yields the same locations.

### `matrixcode.timing`

- `Timestamp` is a time in seconds and microseconds. Timestamps can be
  compared.
- `time_now()` returns the current time.
- `time_add(t, msec)` returns `t` moved by `msec` milliseconds.
- `time_exceeded(timeout)` tells whether the current time is past
  `timeout`.

## Example

```python
from matrixcode.symbol import size_idx_from_dimensions, symbol_attribute, SymbolAttribute
from matrixcode.reedsol import rs_encode, rs_decode

size_idx = size_idx_from_dimensions(12, 12)          # 1
error_words = symbol_attribute(SymbolAttribute.SYMBOL_ERROR_WORDS, size_idx)

codewords = [66, 67, 68, 69, 70] + [0] * error_words
codewords = rs_encode(codewords, size_idx)

damaged = list(codewords)
damaged[0] ^= 0x5A
assert rs_decode(damaged, size_idx) == codewords
```

```python
from matrixcode.scangrid import ScanGrid

grid = ScanGrid(x_min=0, x_max=99, y_min=0, y_max=99, scan_gap=1, scale=1)
for x, y in grid:
    ...  # probe pixel (x, y) for a barcode edge
```

## What it does not do

This package only provides the pieces listed above. It does not:

- read images or find barcode regions in them;
- turn text into codewords, or codewords back into text;
- place modules or render symbols.

It has no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```