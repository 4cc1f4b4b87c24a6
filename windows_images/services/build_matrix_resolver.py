import re
from collections.abc import Iterable

from windows_images.models import BuildMatrix, ImageType, MatrixEntry
from windows_images.models.errors import BuildMatrixError, MalformedVariantId

VARIANT_PREFIX = "jdk"
VARIANT_ID_RE = re.compile(rf"{VARIANT_PREFIX}([0-9]+)")


def jdk_major(variant_id: str) -> str:
    match = VARIANT_ID_RE.fullmatch(variant_id)
    if not match:
        raise MalformedVariantId(
            f"Variant id '{variant_id}' must be '{VARIANT_PREFIX}' followed by the JDK major version"
        )
    return match.group(1)


def image_id(major: str, image_type: ImageType) -> str:
    return f"{major}-hotspot-{image_type}"


def tag_set(major: str, image_type: ImageType, artifact_version: str, default_jdk: str) -> tuple[str, ...]:
    qualified = image_id(major, image_type)
    tags = [qualified, f"{artifact_version}-{qualified}"]
    if major == default_jdk:
        tags.extend([str(image_type), f"{artifact_version}-{image_type}"])
    return tuple(tags)


def resolve(
    image_type: str | ImageType,
    artifact_version: str,
    variant_ids: Iterable[str],
    default_jdk: str,
) -> BuildMatrix:
    """Compute the image ids to build and the tags each of them is published under.

    Variants are visited in lexicographic order of their id so that identical
    inputs always give an identical matrix. Every input is validated before the
    first entry is computed, a malformed one raises a ``BuildMatrixError``.
    """
    if not isinstance(image_type, ImageType):
        image_type = ImageType.parse(image_type)
    if not artifact_version:
        raise BuildMatrixError("Artifact version must not be empty")

    majors = [(variant_id, jdk_major(variant_id)) for variant_id in sorted(set(variant_ids))]
    return BuildMatrix(entries=tuple(
        MatrixEntry(
            variant_id=variant_id,
            jdk_major=major,
            image_id=image_id(major, image_type),
            tags=tag_set(major, image_type, artifact_version, default_jdk),
        )
        for variant_id, major in majors
    ))
