"""The Fx hash: a fast, non-cryptographic 64-bit hash working on words."""

from __future__ import annotations

from dataclasses import dataclass

ROTATE = 5
SEED64 = 0x51_7C_C1_B7_27_22_0A_95
_MASK64 = (1 << 64) - 1


def _hash_word(state: int, word: int) -> int:
    rotated = ((state << ROTATE) | (state >> (64 - ROTATE))) & _MASK64
    return ((rotated ^ word) * SEED64) & _MASK64


def _check_range(value: int, bits: int) -> int:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{value!r} does not fit an unsigned {bits}-bit integer")
    return value


@dataclass
class FxHasher64:
    """Incremental 64-bit Fx hasher; words are read little-endian."""

    hash: int = 0

    def finish(self) -> int:
        """Return the current hash value."""
        return self.hash

    def write(self, data: bytes) -> None:
        """Feed a byte string: 8-byte words, then a 4, 2 and 1 byte tail."""
        view = memoryview(data).cast("B")
        state = self.hash
        while len(view) >= 8:
            state = _hash_word(state, int.from_bytes(view[:8], "little"))
            view = view[8:]
        for width in (4, 2, 1):
            if len(view) >= width:
                state = _hash_word(state, int.from_bytes(view[:width], "little"))
                view = view[width:]
        self.hash = state

    def write_u8(self, value: int) -> None:
        self.hash = _hash_word(self.hash, _check_range(value, 8))

    def write_u16(self, value: int) -> None:
        self.hash = _hash_word(self.hash, _check_range(value, 16))

    def write_u32(self, value: int) -> None:
        self.hash = _hash_word(self.hash, _check_range(value, 32))

    def write_u64(self, value: int) -> None:
        self.hash = _hash_word(self.hash, _check_range(value, 64))

    def write_usize(self, value: int) -> None:
        self.hash = _hash_word(self.hash, _check_range(value, 64))


def fx_hash64(data: bytes) -> int:
    """Hash ``data`` with a fresh hasher."""
    hasher = FxHasher64()
    hasher.write(data)
    return hasher.finish()