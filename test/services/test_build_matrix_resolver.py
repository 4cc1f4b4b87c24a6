import pytest

from windows_images.models import ImageType
from windows_images.models.errors import BuildMatrixError, MalformedImageType, MalformedVariantId
from windows_images.services.build_matrix_resolver import jdk_major, resolve

VARIANTS = {"jdk8", "jdk11", "jdk17", "jdk21"}


@pytest.fixture
def matrix():
    return resolve("windowsservercore-ltsc2019", "2.431", VARIANTS, "17")


def test_matrix_has_one_entry_per_variant(matrix):
    assert len(matrix) == 4


def test_default_jdk_gets_bare_tags(matrix):
    assert matrix.as_dict()["17-hotspot-windowsservercore-ltsc2019"] == [
        "17-hotspot-windowsservercore-ltsc2019",
        "2.431-17-hotspot-windowsservercore-ltsc2019",
        "windowsservercore-ltsc2019",
        "2.431-windowsservercore-ltsc2019",
    ]


def test_other_variants_have_qualified_tags_only(matrix):
    for entry in matrix:
        if entry.jdk_major == "17":
            continue
        assert entry.tags == (entry.image_id, f"2.431-{entry.image_id}")
        assert "windowsservercore-ltsc2019" not in entry.tags


def test_variants_in_lexicographic_order(matrix):
    assert [e.variant_id for e in matrix] == ["jdk11", "jdk17", "jdk21", "jdk8"]


def test_resolve_is_idempotent():
    first = resolve("windowsservercore-ltsc2019", "2.431", ["jdk21", "jdk17", "jdk11"], "17")
    second = resolve("windowsservercore-ltsc2019", "2.431", ["jdk11", "jdk17", "jdk21"], "17")
    assert first == second
    assert first.as_dict() == second.as_dict()
    assert list(first.as_dict()) == list(second.as_dict())


def test_changing_artifact_version_keeps_image_ids(matrix):
    other = resolve("windowsservercore-ltsc2019", "2.440", VARIANTS, "17")
    assert other.image_ids() == matrix.image_ids()
    for old, new in zip(matrix, other):
        for old_tag, new_tag in zip(old.tags, new.tags):
            if old_tag.startswith("2.431-"):
                assert new_tag == "2.440-" + old_tag.removeprefix("2.431-")
            else:
                assert new_tag == old_tag


def test_accepts_parsed_image_type():
    matrix = resolve(ImageType(flavor="nanoserver", version="1809"), "2.431", {"jdk17"}, "17")
    assert matrix.as_dict() == {
        "17-hotspot-nanoserver-1809": [
            "17-hotspot-nanoserver-1809",
            "2.431-17-hotspot-nanoserver-1809",
            "nanoserver-1809",
            "2.431-nanoserver-1809",
        ]
    }


def test_no_default_jdk_variant_means_no_bare_tags():
    matrix = resolve("windowsservercore-ltsc2022", "2.431", {"jdk11", "jdk21"}, "17")
    assert all(len(e.tags) == 2 for e in matrix)


@pytest.mark.parametrize("image_type", ["windowsservercore", "windowsservercore-", "-ltsc2019", "a-b-c", ""])
def test_malformed_image_type(image_type):
    with pytest.raises(MalformedImageType):
        resolve(image_type, "2.431", VARIANTS, "17")


@pytest.mark.parametrize("variant_id", ["foo17", "jdk", "jdk17a", "JDK17", "17", "jdk17\n", "jdk\u0661\u0667"])
def test_malformed_variant_id(variant_id):
    with pytest.raises(MalformedVariantId):
        resolve("windowsservercore-ltsc2019", "2.431", {"jdk11", variant_id}, "17")


def test_empty_artifact_version():
    with pytest.raises(BuildMatrixError):
        resolve("windowsservercore-ltsc2019", "", VARIANTS, "17")


def test_structural_errors_are_value_errors():
    with pytest.raises(ValueError):
        resolve("windowsservercore", "2.431", VARIANTS, "17")


def test_jdk_major():
    assert jdk_major("jdk21") == "21"


def test_repeated_variant_ids_resolve_once():
    matrix = resolve("windowsservercore-ltsc2019", "2.431", ["jdk17", "jdk11", "jdk17"], "17")
    assert [e.variant_id for e in matrix] == ["jdk11", "jdk17"]
