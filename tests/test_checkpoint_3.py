"""Checkpoint 3: Block Transcoder and Full Codec Verification."""

import sys
import os
import io

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest
from ctecodec.codec import CteDecoder, CteEncoder, CteImage, read_cte, write_cte
from ctecodec.errors import InvalidHeader, WidthNotMultipleOf8, HeightNotMultipleOf8
from ctecodec.formats import FormatVariant
from ctecodec.io.header import pack_header
from ctecodec.transform import BLOCK_ORDER, decode_blocks, encode_blocks, iter_block_origins


def make_cte(width, height, payload):
    """Canonical header followed by the given payload."""
    return pack_header(FormatVariant.A8, width, height) + bytes(payload)


def test_block_origins():
    """Test payload block order: bottom block-row first, left to right."""
    print("=" * 60)
    print("Test 1: Block Origins")
    print("=" * 60)

    origins = list(iter_block_origins(16, 24))
    assert origins == [(0, 16), (8, 16), (0, 8), (8, 8), (0, 0), (8, 0)]
    assert list(iter_block_origins(0, 0)) == []
    print(f"   ✓ 16x24: {origins}")
    print("✅ Block origins test passed")


def test_zero_payload():
    """Test that an all-zero payload decodes to transparent black."""
    print("\n" + "=" * 60)
    print("Test 2: Zero Payload")
    print("=" * 60)

    for w, h in [(8, 8), (16, 8), (8, 24), (32, 16)]:
        cte = CteDecoder().decode(make_cte(w, h, bytes(w * h)))

        assert (cte.width, cte.height) == (w, h)
        assert cte.image.shape == (h, w, 4)
        assert cte.image.dtype == np.uint8
        assert not cte.image.any()
        assert cte.original_format is FormatVariant.A8
        print(f"   ✓ {w}x{h}: all (0, 0, 0, 0)")

    print("✅ Zero payload test passed")


def test_horizontal_block_order():
    """Test that file blocks map left to right within a block-row."""
    print("\n" + "=" * 60)
    print("Test 3: Horizontal Block Order (16x8)")
    print("=" * 60)

    payload = bytes([0x11] * 64 + [0x22] * 64)
    image = CteDecoder().decode(make_cte(16, 8, payload)).image

    assert np.all(image[:, :8] == [1, 1, 1, 16]), "First block should be x in [0, 8)"
    assert np.all(image[:, 8:] == [2, 2, 2, 32]), "Second block should be x in [8, 16)"
    print("   ✓ First block -> left, second block -> right")
    print("✅ Horizontal block order test passed")


def test_vertical_block_order():
    """Test that block-rows are stored bottom to top."""
    print("\n" + "=" * 60)
    print("Test 4: Vertical Block Order (8x16)")
    print("=" * 60)

    payload = bytes([0x11] * 64 + [0x22] * 64)
    image = CteDecoder().decode(make_cte(8, 16, payload)).image

    assert np.all(image[8:] == [1, 1, 1, 16]), "First block should be the bottom block-row"
    assert np.all(image[:8] == [2, 2, 2, 32]), "Second block should be the top block-row"
    print("   ✓ First block -> bottom row, second block -> top row")
    print("✅ Vertical block order test passed")


def test_pixel_placement():
    """Test that each payload byte lands at its Z-order position."""
    print("\n" + "=" * 60)
    print("Test 5: Pixel Placement Within a Block")
    print("=" * 60)

    image = CteDecoder().decode(make_cte(8, 8, range(64))).image

    for i, (dx, dy) in enumerate(BLOCK_ORDER.tolist()):
        assert image[dy, dx].tolist() == [i // 16, i // 16, i // 16, (i % 16) * 16], \
            f"Byte {i} misplaced"

    # Byte 42 is the block origin, byte 0 the bottom-left corner
    assert image[0, 0].tolist() == [2, 2, 2, 160]
    assert image[7, 0].tolist() == [0, 0, 0, 0]
    assert image[7, 1].tolist() == [0, 0, 0, 16]
    print("   ✓ All 64 bytes placed through the traversal table")
    print("✅ Pixel placement test passed")


def test_encode_layout():
    """Test encoder output size, header and payload order."""
    print("\n" + "=" * 60)
    print("Test 6: Encode Layout")
    print("=" * 60)

    image = np.zeros((8, 16, 4), dtype=np.uint8)
    image[:, :8] = [1, 1, 1, 16]
    image[:, 8:] = [2, 2, 2, 32]

    data = CteEncoder().encode(image)

    assert len(data) == 128 + 16 * 8
    assert data[:128] == pack_header(FormatVariant.A8, 16, 8)
    assert data[128:] == bytes([0x11] * 64 + [0x22] * 64)
    print(f"   ✓ {len(data)} bytes: 128 header + 128 payload")

    # Origin pixel of the block is written as the 43rd payload byte
    image = np.zeros((8, 8, 4), dtype=np.uint8)
    image[0, 0] = [5, 5, 5, 80]
    payload = CteEncoder().encode(image)[128:]
    assert payload[42] == 0x55
    assert payload.count(0) == 63
    print("   ✓ Block origin packed at payload index 42")
    print("✅ Encode layout test passed")


def test_decode_encode_identity():
    """Test that re-encoding a decoded file reproduces its payload."""
    print("\n" + "=" * 60)
    print("Test 7: Decode -> Encode Payload Identity")
    print("=" * 60)

    rng = np.random.default_rng(0)
    payload = rng.integers(0, 256, 32 * 24, dtype=np.uint8).tobytes()

    # Non-canonical offset and reserved value on input
    original = bytearray(make_cte(32, 24, b''))[:28]
    original[20:24] = (7).to_bytes(4, 'little')
    original[24:28] = (40).to_bytes(4, 'little')
    original = bytes(original) + b'\xEE' * 12 + payload

    cte = CteImage.decode(original)
    reencoded = cte.encode()

    assert reencoded == make_cte(32, 24, payload)
    print("   ✓ Payload identical, header normalised to 128 bytes")
    print("✅ Decode/encode identity test passed")


def test_lossy_encode():
    """Test that encode then decode quantizes as documented."""
    print("\n" + "=" * 60)
    print("Test 8: Lossy Encode/Decode")
    print("=" * 60)

    image = np.full((8, 8, 4), 255, dtype=np.uint8)
    restored = CteImage.decode(CteEncoder().encode(image)).image

    assert np.all(restored == [15, 15, 15, 240])
    assert not np.array_equal(restored, image)
    print("   ✓ Opaque white -> (15, 15, 15, 240)")
    print("✅ Lossy encode test passed")


def test_encode_invalid_dimensions():
    """Test that images that do not tile are rejected before writing."""
    print("\n" + "=" * 60)
    print("Test 9: Encode Invalid Dimensions")
    print("=" * 60)

    encoder = CteEncoder()

    stream = io.BytesIO()
    with pytest.raises(WidthNotMultipleOf8) as exc:
        encoder.encode_to(stream, np.zeros((8, 12, 4), dtype=np.uint8))
    assert exc.value.width == 12
    assert stream.getvalue() == b''

    with pytest.raises(HeightNotMultipleOf8) as exc:
        encoder.encode(np.zeros((9, 8, 4), dtype=np.uint8))
    assert exc.value.height == 9

    with pytest.raises(ValueError):
        encoder.encode(np.zeros((8, 8), dtype=np.uint8))

    with pytest.raises(WidthNotMultipleOf8):
        CteImage(np.zeros((8, 4, 4), dtype=np.uint8))
    print("   ✓ Width, height and shape errors raised")
    print("✅ Invalid dimensions test passed")


def test_decode_errors():
    """Test decode failures: bad magic and truncated payload."""
    print("\n" + "=" * 60)
    print("Test 10: Decode Errors")
    print("=" * 60)

    with pytest.raises(InvalidHeader):
        CteDecoder().decode(b'\x89PNG' + bytes(200))

    with pytest.raises(EOFError):
        CteDecoder().decode(make_cte(16, 16, bytes(255)))

    with pytest.raises(EOFError):
        decode_blocks(io.BytesIO(bytes(63)), 8, 8, FormatVariant.A8)
    print("   ✓ Bad magic and short payloads rejected")
    print("✅ Decode errors test passed")


def test_block_transcoder_streams():
    """Test the transcoder directly on streams."""
    print("\n" + "=" * 60)
    print("Test 11: Block Transcoder Streams")
    print("=" * 60)

    stream = io.BytesIO(bytes(range(128)) + b'tail')
    image = decode_blocks(stream, 8, 16, FormatVariant.A8)
    assert stream.read() == b'tail', "Exactly the payload should be consumed"

    out = io.BytesIO()
    encode_blocks(out, image, FormatVariant.A8)
    assert out.getvalue() == bytes(range(128))
    print("   ✓ Payload consumed and reproduced exactly")
    print("✅ Block transcoder test passed")


def test_file_helpers(tmp_path):
    """Test reading and writing CTE files on disk."""
    path = tmp_path / "font.img"

    image = np.zeros((16, 8, 4), dtype=np.uint8)
    image[:8] = [7, 7, 7, 112]
    write_cte(CteImage(image), str(path))

    assert path.stat().st_size == 128 + 128
    cte = read_cte(str(path))
    assert np.array_equal(cte.image, image)
    assert repr(cte) == "CteImage(8x16, format=A8)"


def main():
    """Run all Checkpoint 3 tests."""
    print("\n" + "=" * 60)
    print("CHECKPOINT 3: BLOCK TRANSCODER AND CODEC VERIFICATION")
    print("=" * 60 + "\n")

    tests = [
        ("Block Origins", test_block_origins),
        ("Zero Payload", test_zero_payload),
        ("Horizontal Block Order", test_horizontal_block_order),
        ("Vertical Block Order", test_vertical_block_order),
        ("Pixel Placement", test_pixel_placement),
        ("Encode Layout", test_encode_layout),
        ("Decode/Encode Identity", test_decode_encode_identity),
        ("Lossy Encode", test_lossy_encode),
        ("Invalid Dimensions", test_encode_invalid_dimensions),
        ("Decode Errors", test_decode_errors),
        ("Block Transcoder", test_block_transcoder_streams),
    ]

    results = []
    for name, test in tests:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"❌ {name} failed: {e}")
            results.append((name, False))

    # Summary
    print("\n" + "=" * 60)
    print("CHECKPOINT 3 SUMMARY")
    print("=" * 60)

    all_passed = all(passed for _, passed in results)
    for name, passed in results:
        status = "✅ PASS" if passed else "❌ FAIL"
        print(f"   {name}: {status}")

    print("\n" + "=" * 60)
    if all_passed:
        print("🎉 CHECKPOINT 3 PASSED - All tests successful!")
    else:
        print("⚠️  CHECKPOINT 3 FAILED - Some tests did not pass")
    print("=" * 60 + "\n")

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
