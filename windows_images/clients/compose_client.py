import logging
import subprocess
from collections.abc import Mapping

logger = logging.getLogger(__name__)


class ComposeClient:
    def __init__(self, compose_file: str, docker: str = "docker"):
        self.compose_file: str = compose_file
        self.docker: str = docker

    def base_command(self) -> list[str]:
        return [self.docker, "compose", f"--file={self.compose_file}"]

    def build_command(self) -> list[str]:
        return [*self.base_command(), "build", "--pull"]

    def config(self, env: Mapping[str, str]) -> str:
        cmd = [*self.base_command(), "config"]
        try:
            result = subprocess.run(cmd, check=False, env=dict(env), capture_output=True, text=True)
        except OSError as e:
            raise RuntimeError(f"Could not run {self.docker} compose: {e}") from e
        if result.returncode != 0:
            logger.error(f"docker compose config failed with code {result.returncode}: {result.stderr}")
            raise RuntimeError(f"Failed to render {self.compose_file}")
        return result.stdout

    def build(self, env: Mapping[str, str]) -> None:
        try:
            result = subprocess.run(self.build_command(), check=False, env=dict(env))
        except OSError as e:
            raise RuntimeError(f"Could not run {self.docker} compose: {e}") from e
        if result.returncode != 0:
            logger.error(f"docker compose build failed with code {result.returncode}")
            raise RuntimeError("Image build failed")
