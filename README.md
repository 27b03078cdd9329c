# pqcodec

`pqcodec` is a small library of pure-Python encoders and decoders for the
encodings used inside Parquet data pages. It needs nothing outside the
standard library.

## What is included

- `pqcodec.encoding.uleb128` and `pqcodec.encoding.zigzag_leb128`: variable
  length integers, unsigned and zig-zag signed (`encode`, `decode`).
- `pqcodec.encoding.bitpacking`: packing of unsigned integers into a fixed
  number of bits, in blocks of 32 values (`encode`, `encode_pack`, `Decoder`).
- `pqcodec.encoding.bitmap`: LSB-first bitmaps of booleans (`BitmapIter`,
  `encode_bool`, `set_bit`).
- `pqcodec.encoding.hybrid_runs`: splitting RLE / bit-packing hybrid data into
  its runs (`RunDecoder`, yielding `Bitpacked` and `Rle`).
- `pqcodec.encoding.hybrid_encoder`: writing hybrid data as a single
  bit-packed run (`encode_u32`, `encode_bool`).
- `pqcodec.encoding.hybrid_rle`: decoding hybrid data into integers
  (`HybridRleDecoder`); once the data runs out, or when the bit width is zero,
  it yields zeros.
- `pqcodec.encoding.delta_bitpacked`: `DELTA_BINARY_PACKED` integers
  (`encode`, `Decoder` with `consumed_bytes()`).
- `pqcodec.encoding.delta_length_byte_array`: `DELTA_LENGTH_BYTE_ARRAY`
  (`encode`, `Decoder` with `into_values()`).
- `pqcodec.encoding.delta_byte_array`: prefix lengths of `DELTA_BYTE_ARRAY`
  (`Decoder` with `into_lengths()`).
- `pqcodec.encoding.plain_byte_array`: `PLAIN` length-prefixed byte arrays
  (`Decoder`).
- `pqcodec.encoding.util`: `get_length` (little-endian `u32` prefix) and
  `ceil8`.
- `pqcodec.page`: splitting a data page buffer into repetition levels,
  definition levels and values (`split_buffer_v1`, `split_buffer_v2`).
- `pqcodec.levels.get_bit_width`: the bit width needed for a maximum level.
- `pqcodec.errors`: `ParquetError` and its subclasses `GeneralError`,
  `FeatureNotActiveError`, `OutOfSpecError` and `ExternalError`, plus the
  `Feature` enum.

## Installation

```
pip install pqcodec
```

## Examples

Round-trip integers through the hybrid RLE encoding:

```python
from pqcodec.encoding.hybrid_encoder import encode_u32
from pqcodec.encoding.hybrid_rle import HybridRleDecoder

data = list(range(1000))
encoded = encode_u32(data, 10)
assert list(HybridRleDecoder(encoded, 10, len(data))) == data
```

Delta-encode a column of integers:

```python
from pqcodec.encoding import delta_bitpacked

encoded = delta_bitpacked.encode([1, 3, -1, 2, 3])
decoder = delta_bitpacked.Decoder(encoded)
assert list(decoder) == [1, 3, -1, 2, 3]
assert decoder.consumed_bytes() == len(encoded)
```

Read lengths and values of a delta-length byte array:

```python
from pqcodec.encoding import delta_length_byte_array

encoded = delta_length_byte_array.encode([b"aa", b"bbb", b"a"])
decoder = delta_length_byte_array.Decoder(encoded)
assert list(decoder) == [2, 3, 1]
assert decoder.into_values() == b"aabbba"
```

## Errors

Data that breaks the format, such as a truncated buffer or a bad header,
raises `pqcodec.errors.OutOfSpecError`, a subclass of `ParquetError`.
Arguments outside their valid range (a bit width above 32, a value that does
not fit in its bit width, an empty sequence for `delta_bitpacked.encode`)
raise `ValueError`.

## What it does not do

`pqcodec` works on byte strings that already hold page data. It does not
open or write Parquet files, read the file footer or its metadata, parse
page headers, decompress pages or read dictionary pages. The encoders write
hybrid data only as bit-packed runs, never as RLE runs.

## Running the tests

```
pip install -e ".[test]"
pytest
```