class BuildMatrixError(ValueError):
    pass


class MalformedImageType(BuildMatrixError):
    pass


class MalformedVariantId(BuildMatrixError):
    pass


class MatrixMismatch(Exception):
    pass


class ChecksumUnavailable(Exception):
    pass


class PhaseFailed(Exception):
    def __init__(self, phase: str, failures: list[str] | None = None):
        self.phase: str = phase
        self.failures: list[str] = failures or []
        details = f": {', '.join(self.failures)}" if self.failures else ""
        super().__init__(f"{phase.capitalize()} stage failed{details}")
