from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ImageTestResult:
    image_id: str
    test_file: str
    status: str #can be either successful or failed
    junit_path: str | None = None
    total: int = 0
    failures: int = 0

    @property
    def successful(self) -> bool:
        return self.status == "successful"
