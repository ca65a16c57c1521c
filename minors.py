import numpy as np

from row_col import RowCol


def cofactor_determinant(mat: np.ndarray, rc: RowCol) -> int:
    """
    Laplace expansion along the first selected row of the minor described by rc.
    Exponential in rc.dimension; the recursion depth equals rc.dimension.
    """
    size = rc.dimension
    if size == 0:
        return 1
    r0 = rc.rows[0]
    if size == 1:
        return mat[r0, rc.cols[0]]
    if size == 2:
        r1 = rc.rows[1]
        c0, c1 = rc.cols
        return mat[r0, c0] * mat[r1, c1] - mat[r0, c1] * mat[r1, c0]
    det = 0
    for i, col in enumerate(rc.cols):
        entry = mat[r0, col]
        if entry == 0:
            continue
        sign = 1 if i % 2 == 0 else -1
        det += sign * entry * cofactor_determinant(mat, rc.without(0, i))
    return det


def adjugate(mat: np.ndarray) -> np.ndarray:
    """
    Transposed cofactor matrix: adj[j, i] = (-1)^(i+j) * det(minor without row i and column j).
    """
    n = mat.shape[0]
    full = RowCol(n).init()
    adj = np.zeros((n, n), dtype=object)
    for i in range(n):
        for j in range(n):
            sign = 1 if (i + j) % 2 == 0 else -1
            adj[j, i] = sign * cofactor_determinant(mat, full.without(i, j))
    return adj
