"""Dense non-negative integer matrix used for capacities and flows.

`DenseMatrix` wraps an ``n x n`` ``numpy.int64`` array. Every access goes
through index validation and every write through an integer, range and sign
check, so the wrapped array never holds a truncated or negative entry. Readers
that need whole rows or columns use ``array``, a read-only view.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

import numpy as np

from dinicflow.errors import DomainError, NodeIndexError

DTYPE = np.int64
MAX_ENTRY = int(np.iinfo(DTYPE).max)


class DenseMatrix:
    """Square matrix of non-negative integers indexed by node.

    Attributes:
        label: Name of the stored quantity ("capacity", "flow"), used in
            error messages.
    """

    __slots__ = ("_data", "label")

    def __init__(self, size: int, data: Optional[np.ndarray] = None, label: str = "capacity") -> None:
        if data is None:
            data = np.zeros((size, size), dtype=DTYPE)
        elif data.shape != (size, size):
            raise DomainError(
                f"Expected a {size}x{size} {label} matrix, got shape {data.shape}"
            )
        self._data = data
        self.label = label

    @classmethod
    def from_array(cls, values, label: str = "capacity") -> "DenseMatrix":
        """Build a matrix from any square array-like, copying the data.

        Raises:
            DomainError: If the input is not square or holds a negative or
                non-integral entry.
        """
        raw = np.asarray(values)
        if raw.dtype.kind not in "biu" and not (
            raw.dtype.kind == "f" and np.all(np.isfinite(raw)) and np.array_equal(raw, np.floor(raw))
        ):
            raise DomainError(f"{label.capitalize()} entries must be integers")
        data = np.array(raw, dtype=DTYPE, copy=True)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise DomainError(f"{label.capitalize()} matrix must be square, got shape {data.shape}")
        if data.size and data.min() < 0:
            raise DomainError(f"{label.capitalize()} cannot be negative")
        return cls(data.shape[0], data, label=label)

    @property
    def size(self) -> int:
        return self._data.shape[0]

    @property
    def array(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def check_index(self, index: int) -> None:
        if not 0 <= index < self._data.shape[0]:
            raise NodeIndexError(index, self._data.shape[0], what=self._index_kind())

    def get(self, u: int, v: int) -> int:
        self.check_index(u)
        self.check_index(v)
        return int(self._data[u, v])

    def set(self, u: int, v: int, value: int) -> None:
        self.check_index(u)
        self.check_index(v)
        self._data[u, v] = self._checked_value(value)

    def clear(self) -> None:
        self._data.fill(0)

    def copy(self) -> "DenseMatrix":
        return DenseMatrix(self.size, self._data.copy(), label=self.label)

    def nonzero(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(u, v, value)`` for positive entries in row-major order."""
        rows, cols = np.nonzero(self._data)
        for u, v in zip(rows.tolist(), cols.tolist()):
            yield u, v, int(self._data[u, v])

    def _checked_value(self, value) -> int:
        name = self.label.capitalize()
        try:
            entry = int(value)
        except (TypeError, ValueError, OverflowError):
            raise DomainError(f"{name} must be an integer, got {value!r}") from None
        if entry != value:
            raise DomainError(f"{name} must be an integer, got {value!r}")
        if entry < 0:
            raise DomainError(f"{name} cannot be negative: {value}")
        if entry > MAX_ENTRY:
            raise DomainError(f"{name} {value} exceeds the maximum of {MAX_ENTRY}")
        return entry

    def _index_kind(self) -> str:
        return "vertex" if self.label == "capacity" else self.label

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(
            " ".join(str(value) for value in row) + "\n" for row in self._data.tolist()
        )

    def __repr__(self) -> str:
        return f"DenseMatrix(size={self.size}, label={self.label!r})"
