"""Reed-Solomon error correction over GF(256) for Data Matrix codewords."""

from .symbol import SymbolAttribute, block_data_size, symbol_attribute

NN = 255
_PRIMITIVE_POLY = 301


class ReedSolomonError(Exception):
    """Raised when a block holds more errors than can be corrected."""


def _build_tables():
    antilog = []
    value = 1
    for _ in range(NN):
        antilog.append(value)
        value <<= 1
        if value & 0x100:
            value ^= _PRIMITIVE_POLY
    antilog.append(0)

    log = [NN] * 256
    for power, value in enumerate(antilog[:NN]):
        log[value] = power
    return tuple(log), tuple(antilog)


_LOG, _ANTILOG = _build_tables()


def gf_mult(a, b):
    """Multiply two field elements."""
    if a == 0 or b == 0:
        return 0
    return _ANTILOG[(_LOG[a] + _LOG[b]) % NN]


def gf_mult_antilog(a, b):
    """Multiply field element ``a`` by alpha raised to the power ``b``."""
    if a == 0:
        return 0
    return _ANTILOG[(_LOG[a] + b) % NN]


def generator_poly(error_word_count):
    """Return the generator polynomial coefficients, lowest order first.

    The leading coefficient (always 1) is implied and not included.
    """
    gen = [1] * error_word_count
    for i in range(error_word_count):
        for j in range(i, -1, -1):
            gen[j] = gf_mult_antilog(gen[j], i + 1)
            if j > 0:
                gen[j] ^= gen[j - 1]
    return gen


def _layout(size_idx):
    stride = symbol_attribute(SymbolAttribute.INTERLEAVED_BLOCKS, size_idx)
    block_error_words = symbol_attribute(SymbolAttribute.BLOCK_ERROR_WORDS, size_idx)
    data_words = symbol_attribute(SymbolAttribute.SYMBOL_DATA_WORDS, size_idx)
    error_words = symbol_attribute(SymbolAttribute.SYMBOL_ERROR_WORDS, size_idx)
    return stride, block_error_words, data_words, data_words + error_words


def rs_encode(codewords, size_idx):
    """Return the data codewords followed by their error correction words.

    ``codewords`` must hold at least the symbol's data words; anything past
    them is replaced by the computed error words.
    """
    stride, block_error_words, data_words, total_words = _layout(size_idx)
    if len(codewords) < data_words:
        raise ValueError(
            f"expected at least {data_words} data codewords, got {len(codewords)}"
        )

    code = list(codewords[:data_words]) + [0] * (total_words - data_words)
    gen = generator_poly(block_error_words)

    for block_idx in range(stride):
        ecc = [0] * block_error_words
        for word in code[block_idx:data_words:stride]:
            val = ecc[-1] ^ word
            for j in range(block_error_words - 1, 0, -1):
                ecc[j] = ecc[j - 1] ^ gf_mult(gen[j], val)
            ecc[0] = gf_mult(gen[0], val)

        positions = range(data_words + block_idx, total_words, stride)
        for pos, value in zip(positions, reversed(ecc)):
            code[pos] = value

    return code


def _syndromes(rec, block_error_words):
    syn = [0] * (block_error_words + 1)
    for i in range(1, block_error_words + 1):
        acc = 0
        for j, word in enumerate(rec):
            acc ^= gf_mult_antilog(word, i * j)
        syn[i] = acc
    return syn


def _error_locator_poly(syn, error_word_count, max_correctable):
    """Berlekamp-Massey: return the error locator polynomial, or None."""
    elp = [[1], [1]]
    dis = [1, syn[1]]

    i, i_next = 1, 2
    while True:
        if dis[i] == 0:
            elp.append(list(elp[i]))
        else:
            m = 0
            for m_cmp in range(1, i):
                if dis[m_cmp] != 0 and (m_cmp - len(elp[m_cmp])) >= (m - len(elp[m])):
                    m = m_cmp

            new_len = max(len(elp[i]), len(elp[m]) + i - m)
            poly = [0] * new_len
            shift = NN - _LOG[dis[m]] + _LOG[dis[i]]
            for j, coef in enumerate(elp[m]):
                poly[j + i - m] = 0 if coef == 0 else _ANTILOG[(shift + _LOG[coef]) % NN]
            for j, coef in enumerate(elp[i]):
                poly[j] ^= coef
            elp.append(poly)

        current = elp[i_next]
        lam = len(current) - 1
        if i == error_word_count or i >= lam + max_correctable:
            break

        dis_tmp = syn[i_next]
        for j in range(1, lam + 1):
            dis_tmp ^= gf_mult(syn[i_next - j], current[j])
        dis.append(dis_tmp)

        i = i_next
        i_next += 1

    return elp[i_next] if lam <= max_correctable else None


def _error_locations(elp):
    """Chien search: return error positions, or None if they do not all resolve."""
    lam = len(elp) - 1
    reg = list(elp)
    loc = []
    for i in range(1, NN + 1):
        q = 1
        for j in range(1, lam + 1):
            reg[j] = gf_mult_antilog(reg[j], j)
            q ^= reg[j]
        if q == 0:
            loc.append(NN - i)
    return loc if len(loc) == lam else None


def _repair(rec, loc, elp, syn):
    lam = len(elp) - 1

    z = [1]
    for i in range(1, lam + 1):
        z_val = syn[i] ^ elp[i]
        for j in range(1, i):
            z_val ^= gf_mult(elp[i - j], syn[j])
        z.append(z_val)

    for i, position in enumerate(loc):
        root = NN - position
        err = 1
        for j in range(1, lam + 1):
            err ^= gf_mult_antilog(z[j], j * root)
        if err == 0:
            continue

        q = sum(
            _LOG[1 ^ _ANTILOG[(other + root) % NN]]
            for j, other in enumerate(loc)
            if j != i
        ) % NN

        if position >= len(rec):
            raise ReedSolomonError("error located outside of the block")
        rec[position] ^= gf_mult_antilog(err, NN - q)


def rs_decode(codewords, size_idx):
    """Return the codewords with any correctable errors repaired.

    Raises ReedSolomonError if a block cannot be repaired.
    """
    stride, block_error_words, data_words, total_words = _layout(size_idx)
    max_correctable = symbol_attribute(SymbolAttribute.BLOCK_MAX_CORRECTABLE, size_idx)
    if len(codewords) < total_words:
        raise ValueError(
            f"expected at least {total_words} codewords, got {len(codewords)}"
        )

    code = list(codewords)

    for block_idx in range(stride):
        block_data_words = block_data_size(size_idx, block_idx)
        data_pos = range(block_idx, block_idx + stride * block_data_words, stride)
        error_pos = range(
            data_words + block_idx,
            data_words + block_idx + stride * block_error_words,
            stride,
        )

        rec = [code[p] for p in reversed(error_pos)] + [code[p] for p in reversed(data_pos)]

        syn = _syndromes(rec, block_error_words)
        if any(syn[1:]):
            elp = _error_locator_poly(syn, block_error_words, max_correctable)
            if elp is None:
                raise ReedSolomonError(f"block {block_idx} has too many errors")
            loc = _error_locations(elp)
            if loc is None:
                raise ReedSolomonError(f"block {block_idx} has unresolvable errors")
            _repair(rec, loc, elp, syn)

        block = rec[::-1]
        for pos, value in zip(list(data_pos) + list(error_pos), block):
            code[pos] = value

    return code