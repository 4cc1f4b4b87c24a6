from pydantic.dataclasses import dataclass

from windows_images.models.errors import MalformedImageType

# Base OS image tags whose tool images are published under another name
TOOLS_VERSION_OVERRIDES: dict[str, str] = {
    "ltsc2019": "1809",
}


@dataclass(frozen=True)
class ImageType:
    flavor: str
    version: str

    @classmethod
    def parse(cls, value: str) -> "ImageType":
        parts = value.split("-")
        if len(parts) != 2 or not all(parts):
            raise MalformedImageType(
                f"Image type '{value}' must have the form <flavor>-<version>"
            )
        return cls(flavor=parts[0], version=parts[1])

    @property
    def tools_version(self) -> str:
        return TOOLS_VERSION_OVERRIDES.get(self.version, self.version)

    @property
    def dockerfile(self) -> str:
        return f"windows/{self.flavor}/hotspot/Dockerfile"

    def __str__(self) -> str:
        return f"{self.flavor}-{self.version}"
