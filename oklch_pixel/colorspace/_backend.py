"""Backend dispatch for numpy/torch compatibility.

Provides unified math operations that work with python floats, numpy arrays
and torch tensors. Torch is imported lazily on first use so the scalar
pipeline never loads it.
"""

import numpy as np
from typing import Any

Array = Any  # float, numpy.ndarray or torch.Tensor

# Lazy torch reference - only imported when needed
_torch = None


def _get_torch():
    """Get torch module, importing it on first use."""
    global _torch
    if _torch is None:
        import torch
        _torch = torch
    return _torch


def is_torch(x: Array) -> bool:
    """Check if x is a torch tensor."""
    return type(x).__module__.startswith('torch')


# === Dispatched operations ===

def sin(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().sin(x)
    return np.sin(x)


def cos(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().cos(x)
    return np.cos(x)


def pow(x: Array, exp: float) -> Array:
    if is_torch(x):
        return _get_torch().pow(x, exp)
    return np.power(x, exp)


def clip(x: Array, lo: float, hi: float) -> Array:
    if is_torch(x):
        return _get_torch().clamp(x, lo, hi)
    return np.clip(x, lo, hi)


def where(cond: Array, true_val: Array, false_val: Array) -> Array:
    if is_torch(cond):
        return _get_torch().where(cond, true_val, false_val)
    return np.where(cond, true_val, false_val)


def maximum(x: Array, y: Array) -> Array:
    if is_torch(x):
        return _get_torch().maximum(x, y)
    return np.maximum(x, y)


def full_like(x: Array, value: float) -> Array:
    if is_torch(x):
        return _get_torch().full_like(x, value)
    x = np.asarray(x)
    dtype = x.dtype if np.issubdtype(x.dtype, np.floating) else np.float64
    return np.full_like(x, value, dtype=dtype)

