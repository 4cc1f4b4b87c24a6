from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class TagDiscrepancy:
    variant_id: str
    expected: list[str]
    declared: list[str]
