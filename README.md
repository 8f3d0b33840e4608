# sudautil

Two small building blocks for reading binary dictionaries: a copy-on-write
array of little-endian integers, and the fast 64-bit Fx hash.

The package has no dependencies beyond the standard library.

## Installation

    pip install sudautil

To run the test suite, install the `test` extra and run `pytest`:

    pip install "sudautil[test]"
    pytest

## `sudautil.cow_array`

`CowArray` is a read-only sequence of integers decoded from a byte buffer. It
borrows the buffer until it is first changed, and then works on its own copy;
the buffer itself is never written to.

```python
from sudautil.cow_array import CowArray, ElementType

raw = bytes([1, 0, 2, 0, 3, 0])
arr = CowArray.from_bytes(raw, 0, 3, ElementType.I16)
list(arr)          # [1, 2, 3]
arr.is_owned()     # False: values are decoded from raw
arr.set(1, 42)     # copies, then updates
arr.is_owned()     # True
arr == [1, 42, 3]  # True

owned = CowArray.from_owned([7, 8, 9])
owned.is_owned()   # True
```

- `ElementType.I16` (signed 16-bit) and `ElementType.U32` (unsigned 32-bit)
  are the element types that can be read.
- `CowArray.from_bytes(data, offset, size, kind)` reads `size` values starting
  at byte `offset`. When `offset` is a multiple of the element width the bytes
  are borrowed; otherwise they are copied at once. A negative offset or size
  raises `ValueError`; a range past the end of `data` raises `IndexError`.
- `CowArray.set(offset, value)` raises `IndexError` for an index outside the
  array and, for arrays read with an element type, `ValueError` for a value
  that does not fit that type.
- A `CowArray` supports `len()`, indexing (including negative indices and
  slices), iteration, and comparison with other arrays, lists and tuples.

Helpers:

- `is_aligned(offset, alignment)` tells whether `offset` is a multiple of
  `alignment`, which must be a power of two (`ValueError` otherwise).
- `copy_of_bytes(data, kind)` decodes a packed run of little-endian values
  into a list; `ValueError` if the length is not a multiple of the width.

## `sudautil.fxhash`

The Fx hash: fast and non-cryptographic, consuming input a word at a time.

```python
from sudautil.fxhash import FxHasher64, fx_hash64

h = FxHasher64()
h.write(b"hello")
h.write_u32(7)
h.finish()

fx_hash64(b"hello")   # same as a fresh hasher fed b"hello"
fx_hash64(b"")        # 0
```

`write` reads 8-byte little-endian words, then a 4-, 2- and 1-byte tail.
`write_u8`, `write_u16`, `write_u32`, `write_u64` and `write_usize` each mix
in a single integer and raise `ValueError` if it does not fit the unsigned
width (64 bits for `write_usize`).

Do not use it where collision attacks are a concern.

## What this package does not do

It does not read, validate or build dictionary files, and it has no
part-of-speech handling or tokenizer. It provides only the array and hashing
pieces described above.