"""Plain-text dumps of matrices and vectors for debugging."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

import numpy as np

__all__ = ["format_matrix", "format_vec", "print_matrix", "print_vec"]


def _fmt(value: float) -> str:
    return f"{float(value):g}"


def format_matrix(m: np.ndarray) -> str:
    """One line per column of ``m``, each value followed by a space."""
    arr = np.asarray(m, dtype=float)
    if arr.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
    return "".join(
        "".join(f"{_fmt(value)} " for value in column) + "\n" for column in arr.T
    )


def format_vec(v: Sequence[float]) -> str:
    """Render a 3- or 4-component vector as ``(x, y, z[, w])``."""
    values = list(np.asarray(v, dtype=float).ravel())
    if len(values) not in (3, 4):
        raise ValueError(f"expected 3 or 4 components, got {len(values)}")
    return "(" + ", ".join(_fmt(value) for value in values) + ")"


def print_matrix(m: np.ndarray, file: TextIO | None = None) -> None:
    """Write ``m`` followed by a blank line."""
    out = file if file is not None else sys.stdout
    out.write(format_matrix(m))
    out.write("\n")


def print_vec(v: Sequence[float], file: TextIO | None = None) -> None:
    out = file if file is not None else sys.stdout
    out.write(format_vec(v) + "\n")