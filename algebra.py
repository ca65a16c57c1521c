from numbers import Integral
from typing import Optional

from matrix_errors import InvalidModulus


def check_modulus(modulus: Optional[int]) -> None:
    if modulus is None:
        return
    if isinstance(modulus, bool) or not isinstance(modulus, Integral) or modulus < 1:
        raise InvalidModulus(f"Modulus must be a positive integer, got {modulus!r}")


def mod(value: int, modulus: Optional[int] = None) -> int:
    """
    Canonical representative of value in [0, modulus), or value itself when no modulus is given.
    """
    if modulus is None:
        return value
    check_modulus(modulus)
    if value < 0:
        return (modulus + value % modulus) % modulus
    return value % modulus


def gcd(a: int, b: int) -> int:
    while b != 0:
        a, b = b, a % b
    return abs(a)
