import logging
import os
from typing import override

from windows_images.clients.compose_client import ComposeClient
from windows_images.models import BuildConfiguration, BuildMatrix
from windows_images.models.errors import PhaseFailed
from windows_images.services.service import Service
from windows_images.utils.logging import setup_logger


class BuildService(Service):
    def __init__(self, config: BuildConfiguration, matrix: BuildMatrix, compose: ComposeClient | None = None):
        self.config: BuildConfiguration = config
        self.matrix: BuildMatrix = matrix
        self.compose: ComposeClient = compose or ComposeClient(config.compose_file)
        self.logger: logging.Logger = setup_logger("BuildService")

    @override
    def run(self) -> None:
        self.logger.info(f"= BUILD: Building all images ({', '.join(self.matrix.image_ids())})...")
        if self.config.dry_run:
            self.logger.info(f"= BUILD: (dry-run) {' '.join(self.compose.build_command())}")
            return

        try:
            self.compose.build({**os.environ, **self.config.to_env()})
        except (RuntimeError, OSError) as e:
            raise PhaseFailed("build", [str(e)]) from e
        self.logger.info("= BUILD: Finished building all images.")
