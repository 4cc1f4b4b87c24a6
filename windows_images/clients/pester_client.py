import logging
import subprocess
from collections.abc import Mapping

logger = logging.getLogger(__name__)

PESTER_SCRIPT = """
$ErrorActionPreference = 'Stop'
Import-Module Pester -MinimumVersion {min_version}
$configuration = [PesterConfiguration]::Default
$configuration.Run.Path = '{test_file}'
$configuration.Run.PassThru = $true
$configuration.Run.Exit = $true
$configuration.TestResult.Enabled = $true
$configuration.TestResult.OutputFormat = 'JUnitXml'
$configuration.TestResult.OutputPath = '{output_path}'
$configuration.Output.Verbosity = 'Diagnostic'
$configuration.CodeCoverage.Enabled = $false
Invoke-Pester -Configuration $configuration
"""


class PesterClient:
    def __init__(self, shell: str = "pwsh", min_version: str = "5.3.0"):
        self.shell: str = shell
        self.min_version: str = min_version

    def command(self, test_file: str, output_path: str) -> list[str]:
        script = PESTER_SCRIPT.format(
            min_version=self.min_version,
            test_file=test_file.replace("'", "''"),
            output_path=output_path.replace("'", "''"),
        )
        return [self.shell, "-NoLogo", "-NoProfile", "-NonInteractive", "-Command", script]

    def run_tests(self, test_file: str, output_path: str, env: Mapping[str, str]) -> None:
        try:
            result = subprocess.run(self.command(test_file, output_path), check=False, env=dict(env))
        except OSError as e:
            raise RuntimeError(f"Could not run {self.shell}: {e}") from e
        if result.returncode != 0:
            logger.error(f"Pester run of {test_file} failed with code {result.returncode}")
            raise RuntimeError(f"Pester tests failed: {test_file}")
