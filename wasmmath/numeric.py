import math

from .types import f32, f64, is_negative_zero, to_f32


def wasm_min(x: f64, y: f64) -> f64:
    """Wasm `f64.min`. Unlike the builtin `min`, a NaN operand always wins, even against -inf, and -0.0 is smaller than +0.0."""
    if math.isnan(x) or math.isnan(y):
        return math.nan
    if x == -math.inf or y == -math.inf:
        return -math.inf
    if x == 0 and y == 0:
        if is_negative_zero(x):
            return x
        return y
    if x < y:
        return x
    return y


def wasm_max(x: f64, y: f64) -> f64:
    """Wasm `f64.max`. A NaN operand always wins, even against +inf, and +0.0 is larger than -0.0."""
    if math.isnan(x) or math.isnan(y):
        return math.nan
    if x == math.inf or y == math.inf:
        return math.inf
    if x == 0 and y == 0:
        if is_negative_zero(x):
            return y
        return x
    if x > y:
        return x
    return y


def _round_half_to_even(f: float) -> float:
    if f == 0 or math.isinf(f) or math.isnan(f) or f.is_integer():
        return f

    # Non-integral floats are below 2**52 in magnitude, so both bounds are exact
    ceil = float(math.ceil(f))
    floor = float(math.floor(f))
    dist_to_ceil = abs(f - ceil)
    dist_to_floor = abs(f - floor)

    if dist_to_ceil < dist_to_floor:
        result = ceil
    elif dist_to_ceil == dist_to_floor and (ceil / 2).is_integer():
        result = ceil
    else:
        result = floor

    # math.ceil and math.floor return ints, which drops the sign of a zero result
    return math.copysign(result, f)


def wasm_nearest_f32(f: f32) -> f32:
    """Wasm `f32.nearest`: round to the nearest integral value, ties to even.

    The argument is first rounded to binary32. Every binary32 value widens to
    binary64 exactly, and the integral neighbours of a non-integral binary32
    value fit in binary32, so the result matches a pure binary32 computation.
    """
    return to_f32(_round_half_to_even(to_f32(f)))


def wasm_nearest_f64(f: f64) -> f64:
    """Wasm `f64.nearest`: round to the nearest integral value, ties to even.

    For example 1.9 becomes 2.0, 2.5 becomes 2.0 and -4.5 becomes -4.0 (the
    builtin schoolbook rounding would give -5.0). Zeros, infinities and NaN are
    returned unchanged, and results keep the sign of the input, so -0.5
    rounds to -0.0.
    """
    return _round_half_to_even(f)
