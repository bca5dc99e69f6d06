# (C) 2024 Irreducible Inc.

import functools
import os
import pathlib
import types
from collections.abc import Callable, Iterable

import pytest
from hypothesis import settings

settings.register_profile("dev", deadline=None)
settings.register_profile("ci", deadline=None, max_examples=500)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_pycollect_makemodule(module_path: pathlib.Path, parent) -> pytest.Module:
    """
    Collects a test module as pytest would, then expands every function carrying
    @pytest.mark.parametrize_hypothesis into one test per keyword of the marker.
    """
    mod: pytest.Module = pytest.Module.from_parent(parent, path=module_path)
    expand_parametrize_hypothesis(mod)
    return mod


def expand_parametrize_hypothesis(mod: pytest.Module) -> None:
    """
    For `@pytest.mark.parametrize_hypothesis(fast=(...), slow=(...))` on `test_x`, replaces `test_x` in the module
    by `test_x_fast` and `test_x_slow`. Each copy is wrapped in the decorators listed for its keyword (typically a
    hypothesis `settings(...)` and `given(...)`) and carries the marker named by the keyword, so `-m "not slow"`
    selects the cheap variants.

    Args:
        mod (pytest.Module): the collected module
    """
    marked = {
        name: obj
        for name, obj in getattr(mod.obj, "__dict__", {}).items()
        if callable(obj) and any(mark.name == "parametrize_hypothesis" for mark in getattr(obj, "pytestmark", []))
    }

    for name, test_func in marked.items():
        delattr(mod.obj, name)
        mark = next(m for m in test_func.pytestmark if m.name == "parametrize_hypothesis")
        if mark.args:
            raise ValueError(f"@pytest.mark.parametrize_hypothesis on '{mod.name}.{name}' takes keyword arguments only")

        for variant, decorators in mark.kwargs.items():
            if not isinstance(decorators, (list, tuple, set)) or not all(callable(d) for d in decorators):
                raise ValueError(
                    f"@pytest.mark.parametrize_hypothesis on '{mod.name}.{name}': "
                    + f"'{variant}' must be a list of decorators, got {decorators!r}"
                )
            variant_name = f"{name}_{variant}"
            variant_func = getattr(pytest.mark, variant)(copy_and_decorate(test_func, variant_name, decorators))
            setattr(mod.obj, variant_name, variant_func)


def copy_and_decorate(test_func: Callable, new_name: str, decorators: Iterable[Callable]) -> Callable:
    """
    Returns a copy of `test_func` named `new_name`, with its metadata and marks, wrapped in `decorators` in order.
    """
    new_func: Callable = types.FunctionType(
        code=test_func.__code__,
        globals=test_func.__globals__,
        name=new_name,
        argdefs=test_func.__defaults__,
        closure=test_func.__closure__,
    )
    new_func = functools.update_wrapper(new_func, test_func)
    new_func.__name__ = new_name
    for decorator in decorators:
        new_func = decorator(new_func)
    return new_func
