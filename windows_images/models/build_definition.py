from dataclasses import field

from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class BuildSpec:
    context: str = "."
    dockerfile: str | None = None
    args: dict[str, str | int | float | None] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ServiceDefinition:
    name: str
    image: str
    build: BuildSpec | None = None

    def image_refs(self) -> list[str]:
        refs = [self.image]
        if self.build:
            refs.extend(self.build.tags)
        return refs

    def declared_tags(self) -> list[str]:
        # registry hosts may carry a port, the tag is after the last colon
        return [ref.rsplit(":", 1)[1] for ref in self.image_refs() if ":" in ref.rsplit("/", 1)[-1]]


@dataclass(frozen=True)
class BuildDefinitionFile:
    services: list[ServiceDefinition]
