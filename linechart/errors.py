class LineChartError(Exception):
    def __init__(self, message: str):
        super().__init__(message)


class InvalidInputError(LineChartError, ValueError):
    """Series input that cannot be read as points (null, scalar, missing columns)."""


class SurfaceResolutionError(LineChartError, TypeError):
    """Container that does not resolve to a drawable surface."""


class RendererError(LineChartError):
    pass
