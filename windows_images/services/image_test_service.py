import glob
import logging
import os
import shutil
import xml.etree.ElementTree as ET
from concurrent.futures import ThreadPoolExecutor
from typing import override

from windows_images.clients.pester_client import PesterClient
from windows_images.models import BuildConfiguration, BuildMatrix, ImageTestResult
from windows_images.models.errors import PhaseFailed
from windows_images.services.service import Service
from windows_images.utils.environment import scoped_environment
from windows_images.utils.logging import setup_logger


def read_junit_counts(path: str) -> tuple[int, int]:
    """Return (total, failed) from a JUnit XML report, (0, 0) if unreadable."""
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError):
        return 0, 0
    try:
        suites = [root] if root.get("tests") is not None else root.findall("testsuite")
        total = sum(int(s.get("tests", 0)) for s in suites)
        failed = sum(int(s.get("failures", 0)) + int(s.get("errors", 0)) for s in suites)
    except ValueError:
        return 0, 0
    return total, failed


class ImageTestService(Service):
    def __init__(
        self,
        config: BuildConfiguration,
        matrix: BuildMatrix,
        pester: PesterClient | None = None,
        base_env: dict[str, str] | None = None,
    ):
        self.config: BuildConfiguration = config
        self.matrix: BuildMatrix = matrix
        self.pester: PesterClient = pester or PesterClient()
        self.base_env: dict[str, str] = dict(os.environ if base_env is None else base_env)
        self.logger: logging.Logger = setup_logger("ImageTestService")

    def test_files(self) -> list[str]:
        return sorted(glob.glob(os.path.join(self.config.tests_dir, "*.Tests.ps1")))

    def tasks(self) -> list[tuple[str, str]]:
        return [(image_id, f) for image_id in self.matrix.image_ids() for f in self.test_files()]

    def output_dir(self, image_id: str) -> str:
        return os.path.join(self.config.target_dir, image_id)

    def prepare_output_dirs(self) -> None:
        for image_id in self.matrix.image_ids():
            path = self.output_dir(image_id)
            if os.path.isdir(path):
                shutil.rmtree(path)
            os.makedirs(path)

    @override
    def run(self) -> list[ImageTestResult]:
        tasks = self.tasks()
        if self.config.dry_run:
            for image_id, test_file in tasks:
                self.logger.info(f"= TEST: (dry-run) {test_file} against {image_id}")
            return []

        if not tasks:
            raise PhaseFailed("test", [f"no *.Tests.ps1 files found in {self.config.tests_dir}"])

        self.logger.info(f"= TEST: Testing all images ({len(tasks)} test runs)...")
        self.prepare_output_dirs()
        with ThreadPoolExecutor(max_workers=self.config.test_workers) as executor:
            futures = [executor.submit(self.run_task, image_id, f) for image_id, f in tasks]
            results = [future.result() for future in futures]

        failed = [r for r in results if not r.successful]
        for r in results:
            self.logger.info(
                f"= TEST: {r.image_id} {os.path.basename(r.test_file)}: {r.status} "
                f"({r.failures} failed out of {r.total})"
            )
        if failed:
            raise PhaseFailed("test", [f"{r.image_id} {os.path.basename(r.test_file)}" for r in failed])
        self.logger.info("= TEST: Test stage passed!")
        return results

    def run_task(self, image_id: str, test_file: str) -> ImageTestResult:
        name = os.path.basename(test_file).removesuffix(".Tests.ps1")
        junit_path = os.path.join(self.output_dir(image_id), f"junit-results-{name}.xml")
        with scoped_environment(
            {**self.base_env, **self.config.to_env()},
            CONTROLLER_IMAGE=image_id,
            DOCKERFILE=self.config.parsed_image_type.dockerfile,
        ) as env:
            try:
                self.pester.run_tests(test_file, junit_path, env)
                status = "successful"
            except Exception as e:
                self.logger.error(f"= TEST: {test_file} against {image_id} failed: {e}")
                status = "failed"

        total, failures = read_junit_counts(junit_path)
        return ImageTestResult(
            image_id=image_id,
            test_file=test_file,
            status=status,
            junit_path=junit_path if os.path.isfile(junit_path) else None,
            total=total,
            failures=failures,
        )
