import numpy as np


def determinant_bareiss(sub: np.ndarray) -> int:
    """
    Exact integer determinant by fraction-free (Bareiss) elimination.
    Every division is exact, so entries stay integers throughout.
    """
    m = sub.copy()
    n = m.shape[0]
    if n == 0:
        return 1
    sign = 1
    prev = 1
    for i in range(n - 1):
        if m[i, i] == 0:
            pivot = None
            for r in range(i + 1, n):
                if m[r, i] != 0:
                    pivot = r
                    break
            if pivot is None:
                return 0
            m[[i, pivot]] = m[[pivot, i]]
            sign = -sign
        for r in range(i + 1, n):
            for c in range(i + 1, n):
                m[r, c] = (m[r, c] * m[i, i] - m[r, i] * m[i, c]) // prev
        prev = m[i, i]
    return sign * m[n - 1, n - 1]
