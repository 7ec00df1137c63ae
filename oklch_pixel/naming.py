"""Default output file names."""

import numpy as np


def format_component(value: float) -> str:
    """Shortest round-trip decimal, never in exponent form.

    Examples:
        >>> format_component(1.0)
        '1'
        >>> format_component(0.0000001)
        '0.0000001'
        >>> format_component(-0.0)
        '0'
    """
    text = np.format_float_positional(float(value), trim='-')
    if text == '-0':
        text = '0'
    return text


def default_output_name(L: float, C: float, H: float, alpha: float | None = None) -> str:
    """File name mirroring the CSS oklch() notation, e.g. 'oklch(0.7 0.15 30).png'.

    L is expected already normalized to 0..1. The alpha separator is U+2215
    (division slash) because '/' cannot appear in a file name.
    """
    parts = f"{format_component(L)} {format_component(C)} {format_component(H)}"
    if alpha is not None:
        parts += f" ∕ {format_component(alpha)}"
    return f"oklch({parts}).png"
