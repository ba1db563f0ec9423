from .numeric import wasm_max, wasm_min, wasm_nearest_f32, wasm_nearest_f64

__all__ = ["wasm_min", "wasm_max", "wasm_nearest_f32", "wasm_nearest_f64"]
