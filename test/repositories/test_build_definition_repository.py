import os
import shutil

import pytest

from windows_images.repositories import BuildDefinitionRepository, parse_build_definition
from windows_images.utils.yaml_loader import load_yaml_text

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")


@pytest.fixture
def definition_file(tmp_path):
    source_file = os.path.join(ASSETS_DIR, "build-windows.yaml")
    dest_file = tmp_path / "build-windows.yaml"
    shutil.copy(source_file, dest_file)
    return dest_file


def test_find_all(definition_file):
    repo = BuildDefinitionRepository(str(definition_file))
    services = repo.find_all()

    assert [s.name for s in services] == ["jdk11", "jdk17", "jdk21"]
    jdk17 = services[1]
    assert jdk17.image.endswith(":17-hotspot-${WINDOWS_FLAVOR}-${WINDOWS_VERSION}")
    assert jdk17.build.dockerfile == "./windows/${WINDOWS_FLAVOR}/hotspot/Dockerfile"
    assert len(jdk17.build.tags) == 3


def test_variant_ids(definition_file):
    repo = BuildDefinitionRepository(str(definition_file))
    assert repo.variant_ids() == {"jdk11", "jdk17", "jdk21"}


def test_build_args(definition_file):
    repo = BuildDefinitionRepository(str(definition_file))
    jdk21 = next(s for s in repo.find_all() if s.name == "jdk21")
    assert jdk21.build.args["JAVA_HOME"] == "C:/openjdk-21"


def test_missing_file_returns_empty(tmp_path):
    repo = BuildDefinitionRepository(str(tmp_path / "missing.yaml"))
    assert repo.find_all() == []
    assert repo.variant_ids() == set()


def test_invalid_build_definition(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("services:\n  jdk17:\n    build:\n      context: .\n")

    repo = BuildDefinitionRepository(str(bad_file))
    with pytest.raises(ValueError, match="Invalid build definition"):
        repo.find_all()


def test_missing_services_key():
    with pytest.raises(ValueError, match="missing 'services'"):
        parse_build_definition({"volumes": {}})


def test_rendered_definition_declared_tags():
    with open(os.path.join(ASSETS_DIR, "build-windows.rendered.yaml")) as f:
        services = parse_build_definition(load_yaml_text(f.read())).services

    jdk17 = next(s for s in services if s.name == "jdk17")
    assert jdk17.declared_tags() == [
        "17-hotspot-windowsservercore-ltsc2019",
        "2.431-17-hotspot-windowsservercore-ltsc2019",
        "windowsservercore-ltsc2019",
        "2.431-windowsservercore-ltsc2019",
    ]
