from .build_configuration import BuildConfiguration
from .build_definition import BuildDefinitionFile, BuildSpec, ServiceDefinition
from .build_matrix import BuildMatrix, MatrixEntry
from .errors import (
    BuildMatrixError,
    ChecksumUnavailable,
    MalformedImageType,
    MalformedVariantId,
    MatrixMismatch,
    PhaseFailed,
)
from .image_test_result import ImageTestResult
from .image_type import ImageType
from .tag_discrepancy import TagDiscrepancy

__all__ = [
    "BuildConfiguration",
    "BuildDefinitionFile",
    "BuildSpec",
    "ServiceDefinition",
    "BuildMatrix",
    "MatrixEntry",
    "BuildMatrixError",
    "ChecksumUnavailable",
    "MalformedImageType",
    "MalformedVariantId",
    "MatrixMismatch",
    "PhaseFailed",
    "ImageTestResult",
    "ImageType",
    "TagDiscrepancy",
]
