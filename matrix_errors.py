class MatrixError(ValueError):
    pass


class InvalidModulus(MatrixError):
    pass


class ShapeError(MatrixError):
    pass


class DimensionError(MatrixError):
    pass


class NotSquareError(MatrixError):
    pass


class NotInvertibleError(MatrixError):
    pass
