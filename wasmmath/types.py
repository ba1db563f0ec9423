import math
import struct

# Both Wasm float types are Python floats at runtime. f32 values are always
# exactly representable binary32 numbers, widened losslessly to binary64.
type f32 = float
type f64 = float


def to_f32(value: float) -> f32:
    """Round a binary64 value to the nearest binary32 value (ties to even).

    Args:
        value (float): Any Python float.

    Returns:
        float: The binary32 value, widened back to a Python float. Values too large for binary32 become an infinity of the same sign.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def f32_to_bits(value: float) -> int:
    """Convert a float to its IEEE 754 binary32 bit pattern (uint32)."""
    return struct.unpack("<I", struct.pack("<f", to_f32(value)))[0]


def bits_to_f32(bits: int) -> f32:
    return struct.unpack("<f", struct.pack("<I", bits & 0xFFFF_FFFF))[0]


def f64_to_bits(value: float) -> int:
    """Convert a float to its IEEE 754 binary64 bit pattern (uint64)."""
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def bits_to_f64(bits: int) -> f64:
    return struct.unpack("<d", struct.pack("<Q", bits & 0xFFFF_FFFF_FFFF_FFFF))[0]


def is_negative_zero(value: float) -> bool:
    # -0.0 == 0.0 under IEEE comparison, only the sign bit tells them apart
    return value == 0 and math.copysign(1.0, value) < 0
