import logging
from typing import override

from windows_images.clients.docker_client import DockerClient
from windows_images.models import BuildConfiguration, BuildMatrix
from windows_images.models.errors import PhaseFailed
from windows_images.services.service import Service
from windows_images.utils.logging import setup_logger


class PublishService(Service):
    def __init__(self, config: BuildConfiguration, matrix: BuildMatrix, docker: DockerClient | None = None):
        self.config: BuildConfiguration = config
        self.matrix: BuildMatrix = matrix
        self.docker: DockerClient = docker or DockerClient()
        self.logger: logging.Logger = setup_logger("PublishService")

    @override
    def run(self) -> list[str]:
        published: list[str] = []
        failed: list[str] = []
        for entry in self.matrix:
            source = self.config.image_ref(entry.image_id)
            for tag in entry.tags:
                target = self.config.image_ref(tag)
                if self.config.dry_run:
                    self.logger.info(f"= PUBLISH: (dry-run) docker tag then publish '{source} {target}'")
                    continue
                try:
                    self.publish_image(source, target)
                    published.append(target)
                except (RuntimeError, OSError) as e:
                    self.logger.error(f"= PUBLISH: Failed to publish {target}: {e}")
                    failed.append(target)

        # only fail once every tag has been attempted
        if failed:
            raise PhaseFailed("publish", failed)
        return published

    def publish_image(self, source: str, target: str) -> None:
        self.logger.info(f"= PUBLISH: Tagging {source} => full name = {target}")
        self.docker.tag(source, target)
        self.logger.info(f"= PUBLISH: Publishing {target}...")
        self.docker.push(target)
