"""32-bit string hash processing two bytes per step."""

from typing import Final

HASH_SEED: Final[int] = 0x9E3779B9
HASH_MASK: Final[int] = 0xFFFFFFFF


def _signed(byte: int) -> int:
    # Bytes are mixed as signed chars.
    return byte - 0x100 if byte & 0x80 else byte


def _step(value: int, low: int, high: int) -> int:
    value = (value + low) & HASH_MASK
    value = ((value << 16) ^ ((high << 11) ^ value)) & HASH_MASK
    return (value + (value >> 11)) & HASH_MASK


def string_hash(data: bytes | memoryview) -> int:
    """Compute the 32-bit hash of a byte sequence.

    The value is seeded with the golden ratio constant and no final avalanche is applied, so the
    result is bit-exact with any previously persisted hash.

    Args:
        data: The bytes to hash.

    Returns:
        The 32-bit hash, 0 for an empty sequence.
    """
    length: Final[int] = len(data)
    if not length:
        return 0

    value: int = HASH_SEED
    for index in range(0, length - 1, 2):
        value = _step(value, _signed(data[index]), _signed(data[index + 1]))

    if length & 1:
        last: Final[int] = _signed(data[length - 1])
        value = _step(value, last, last)

    return value
