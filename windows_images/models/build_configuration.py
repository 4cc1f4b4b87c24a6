from collections.abc import Mapping
from dataclasses import replace

from pydantic.dataclasses import dataclass

from windows_images.models.image_type import ImageType

DEFAULT_ORGANISATION = "jenkins"
DEFAULT_REPOSITORY = "jenkins"
DEFAULT_IMAGE_TYPE = "windowsservercore-ltsc2019"
DEFAULT_JENKINS_VERSION = "2.431"
DEFAULT_JDK = "17"


@dataclass(frozen=True)
class BuildConfiguration:
    organisation: str = DEFAULT_ORGANISATION
    repository: str = DEFAULT_REPOSITORY
    image_type: str = DEFAULT_IMAGE_TYPE
    jenkins_version: str = DEFAULT_JENKINS_VERSION
    default_jdk: str = DEFAULT_JDK
    dry_run: bool = False
    jenkins_sha: str | None = None
    compose_file: str = "build-windows.yaml"
    tests_dir: str = "tests"
    target_dir: str = "target"
    test_workers: int = 8

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str],
        jenkins_version: str | None = None,
        dry_run: bool = False,
    ) -> "BuildConfiguration":
        def value(name: str, default: str) -> str:
            v = environ.get(name, "")
            return v.strip() if v and v.strip() else default

        return cls(
            organisation=value("DOCKERHUB_ORGANISATION", DEFAULT_ORGANISATION),
            repository=value("DOCKERHUB_REPO", DEFAULT_REPOSITORY),
            image_type=value("IMAGE_TYPE", DEFAULT_IMAGE_TYPE),
            jenkins_version=jenkins_version or value("JENKINS_VERSION", DEFAULT_JENKINS_VERSION),
            default_jdk=value("DEFAULT_JDK", DEFAULT_JDK),
            dry_run=dry_run,
            compose_file=value("BUILD_DEFINITION_FILE", "build-windows.yaml"),
            tests_dir=value("TESTS_DIR", "tests"),
            target_dir=value("TARGET_DIR", "target"),
            test_workers=int(value("TEST_WORKERS", "8")),
        )

    @property
    def parsed_image_type(self) -> ImageType:
        return ImageType.parse(self.image_type)

    def with_checksum(self, sha: str) -> "BuildConfiguration":
        return replace(self, jenkins_sha=sha)

    def image_ref(self, tag: str) -> str:
        return f"{self.organisation}/{self.repository}:{tag}"

    def to_env(self) -> dict[str, str]:
        image_type = self.parsed_image_type
        env = {
            "DOCKERHUB_ORGANISATION": self.organisation,
            "DOCKERHUB_REPO": self.repository,
            "JENKINS_VERSION": self.jenkins_version,
            "WINDOWS_FLAVOR": image_type.flavor,
            "WINDOWS_VERSION": image_type.version,
            "TOOLS_WINDOWS_VERSION": image_type.tools_version,
        }
        if self.jenkins_sha:
            env["JENKINS_SHA"] = self.jenkins_sha
        return env
