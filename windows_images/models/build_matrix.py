from collections.abc import Iterator

from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class MatrixEntry:
    variant_id: str
    jdk_major: str
    image_id: str
    tags: tuple[str, ...]


@dataclass(frozen=True)
class BuildMatrix:
    entries: tuple[MatrixEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[MatrixEntry]:
        return iter(self.entries)

    def image_ids(self) -> list[str]:
        return [e.image_id for e in self.entries]

    def as_dict(self) -> dict[str, list[str]]:
        return {e.image_id: list(e.tags) for e in self.entries}
