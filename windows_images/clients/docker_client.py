import logging
import subprocess

logger = logging.getLogger(__name__)


class DockerClient:
    def __init__(self, docker: str = "docker"):
        self.docker: str = docker

    def tag(self, source: str, target: str) -> None:
        self._run([self.docker, "tag", source, target])

    def push(self, image: str) -> None:
        self._run([self.docker, "push", image])

    def _run(self, cmd: list[str]) -> None:
        try:
            result = subprocess.run(cmd, check=False)
        except OSError as e:
            raise RuntimeError(f"Could not run {self.docker}: {e}") from e
        if result.returncode != 0:
            logger.error(f"{' '.join(cmd)} failed with code {result.returncode}")
            raise RuntimeError(f"{cmd[1]} failed for {cmd[-1]}")
