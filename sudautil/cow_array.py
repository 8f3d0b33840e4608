"""Copy-on-write arrays of little-endian integers read from byte buffers."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum


class ElementType(Enum):
    """Element types that can be read from little-endian bytes."""

    I16 = ("<h", 2)
    U32 = ("<I", 4)

    def __init__(self, fmt: str, width: int) -> None:
        self.fmt = fmt
        self.width = width

    def validate(self, value: int) -> None:
        try:
            struct.pack(self.fmt, value)
        except struct.error as exc:
            raise ValueError(f"{value!r} does not fit {self.name}") from exc


def is_aligned(offset: int, alignment: int) -> bool:
    """Return whether ``offset`` is a multiple of the power-of-two ``alignment``."""
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment must be a power of two, got {alignment}")
    return offset % alignment == 0


def copy_of_bytes(data: bytes, kind: ElementType) -> list[int]:
    """Decode ``data`` as a packed run of little-endian ``kind`` values."""
    if len(data) % kind.width:
        raise ValueError(
            f"byte length {len(data)} is not a multiple of {kind.width}"
        )
    return [value for (value,) in struct.iter_unpack(kind.fmt, data)]


class CowArray(Sequence):
    """An integer array that borrows its bytes until it is first modified.

    A borrowed array decodes values straight from the underlying buffer;
    ``set`` makes a private copy before writing, so the buffer is never changed.
    """

    __slots__ = ("_view", "_kind", "_length", "_storage")

    def __init__(
        self,
        *,
        storage: list[int] | None = None,
        view: memoryview | None = None,
        kind: ElementType | None = None,
        length: int = 0,
    ) -> None:
        self._storage = storage
        self._view = view
        self._kind = kind
        self._length = length

    @classmethod
    def from_owned(cls, data: Iterable[int]) -> CowArray:
        """Create an array that owns a copy of ``data``."""
        return cls(storage=list(data))

    @classmethod
    def from_bytes(
        cls, data: bytes, offset: int, size: int, kind: ElementType
    ) -> CowArray:
        """Read ``size`` values of ``kind`` starting at byte ``offset``.

        Aligned data is borrowed; unaligned data is copied.
        """
        if offset < 0 or size < 0:
            raise ValueError("offset and size must not be negative")
        view = memoryview(data).cast("B")
        end = offset + size * kind.width
        if end > len(view):
            raise IndexError(
                f"range {offset}..{end} is out of bounds for {len(view)} bytes"
            )
        chunk = view[offset:end]
        if is_aligned(offset, kind.width):
            return cls(view=chunk, kind=kind, length=size)
        return cls(storage=copy_of_bytes(chunk.tobytes(), kind), kind=kind)

    def is_owned(self) -> bool:
        """Return whether the array holds its own copy of the data."""
        return self._storage is not None

    def set(self, offset: int, value: int) -> None:
        """Store ``value`` at ``offset``, copying borrowed data first."""
        if not 0 <= offset < len(self):
            raise IndexError(f"index {offset} out of range for length {len(self)}")
        if self._kind is not None:
            self._kind.validate(value)
        if self._storage is None:
            self._storage = list(self)
            self._view = None
        self._storage[offset] = value

    def __len__(self) -> int:
        if self._storage is not None:
            return len(self._storage)
        return self._length

    def __getitem__(self, index):
        if self._storage is not None:
            return self._storage[index]
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("CowArray index out of range")
        return struct.unpack_from(self._kind.fmt, self._view, index * self._kind.width)[0]

    def __iter__(self) -> Iterator[int]:
        if self._storage is not None:
            return iter(self._storage)
        return (value for (value,) in struct.iter_unpack(self._kind.fmt, self._view))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (CowArray, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"CowArray({list(self)!r}, owned={self.is_owned()})"