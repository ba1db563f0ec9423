"""Reference implementations backed by a real Wasm engine.

The module built here exports one function per operation in `wasmmath`, each
a single native instruction (`f64.min`, `f64.max`, `f32.nearest`,
`f64.nearest`). Running it under wasmtime gives the ground truth the Python
implementations are checked against.
"""
from typing import Any, Callable

import binaryen
from wasmtime import Instance, Module, Store

type BinaryenType = binaryen.internals.BinaryenType
Float32 = binaryen.type.Float32
Float64 = binaryen.type.Float64

# export name -> (operation factory, parameter types, result type)
REFERENCE_FUNCTIONS: dict[str, tuple[Callable[[], Any], list[BinaryenType], BinaryenType]] = {
    "wasm_min": (binaryen.operations.MinFloat64, [Float64, Float64], Float64),
    "wasm_max": (binaryen.operations.MaxFloat64, [Float64, Float64], Float64),
    "wasm_nearest_f32": (binaryen.operations.NearestFloat32, [Float32], Float32),
    "wasm_nearest_f64": (binaryen.operations.NearestFloat64, [Float64], Float64),
}


def build_reference_module(optimise=False) -> binaryen.Module:
    """Build a binaryen module exporting every function in `REFERENCE_FUNCTIONS`.

    Args:
        optimise (bool, optional): Run the binaryen optimiser on the module. Defaults to False.

    Raises:
        RuntimeError: If the generated module does not validate.
    """
    module = binaryen.Module()

    for name, (operation, parameter_types, result_type) in REFERENCE_FUNCTIONS.items():
        arguments = [
            module.local_get(index, parameter_type)
            for index, parameter_type in enumerate(parameter_types)
        ]

        match arguments:
            case [value]:
                body = module.unary(operation(), value)
            case [left, right]:
                body = module.binary(operation(), left, right)
            case _:
                raise RuntimeError(f"Unsupported arity for {name}: {len(arguments)}")

        ascii_name = name.encode("ascii")
        module.add_function(
            ascii_name,
            binaryen.type.create(parameter_types),
            result_type,
            [],
            body,
        )
        module.add_function_export(ascii_name, ascii_name)

    if not module.validate():
        module.print()
        raise RuntimeError("Wasm module is not valid!")

    if optimise:
        module.optimize()

    return module


def get_reference_runner(module: binaryen.Module | None = None):
    """Instantiate a reference module with wasmtime.

    Args:
        module (binaryen.Module, optional): Module to run. Defaults to a freshly built `build_reference_module()`.

    Returns:
        Callable[[str, Sequence[float]], float]: `run(function_name, arguments)` calling the named export.
    """
    if module is None:
        module = build_reference_module()

    wasm_store = Store()
    wasm_module = Module(wasm_store.engine, module.emit_binary())
    wasm_instance = Instance(wasm_store, wasm_module, [])
    exports = wasm_instance.exports(wasm_store)

    def run_wasm_func(function_name, arguments):
        if function_name not in REFERENCE_FUNCTIONS:
            raise KeyError(f"No reference function named {function_name}")
        wasm_func = exports[function_name]
        return wasm_func(wasm_store, *arguments)

    return run_wasm_func
