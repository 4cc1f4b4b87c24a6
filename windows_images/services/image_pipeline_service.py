import json
import logging
import os
from typing import override

from windows_images.clients.checksum_client import ChecksumClient
from windows_images.clients.compose_client import ComposeClient
from windows_images.clients.docker_client import DockerClient
from windows_images.clients.pester_client import PesterClient
from windows_images.models import BuildConfiguration, BuildMatrix
from windows_images.repositories import BuildDefinitionRepository, parse_build_definition
from windows_images.services import build_matrix_resolver
from windows_images.services.build_service import BuildService
from windows_images.services.image_test_service import ImageTestService
from windows_images.services.matrix_reconciliation_service import MatrixReconciliationService
from windows_images.services.publish_service import PublishService
from windows_images.services.service import Service
from windows_images.utils.logging import setup_logger
from windows_images.utils.yaml_loader import load_yaml_text

TARGETS = ("build", "test", "publish")


class ImagePipelineService(Service):
    def __init__(self, config: BuildConfiguration, target: str = "build"):
        if target not in TARGETS:
            raise ValueError(f"Unknown target '{target}', expected one of {', '.join(TARGETS)}")
        self.config: BuildConfiguration = config
        self.target: str = target
        self.checksums: ChecksumClient = ChecksumClient()
        self.definitions: BuildDefinitionRepository = BuildDefinitionRepository(config.compose_file)
        self.compose: ComposeClient = ComposeClient(config.compose_file)
        self.docker: DockerClient = DockerClient()
        self.pester: PesterClient = PesterClient()
        self.logger: logging.Logger = setup_logger("ImagePipelineService")

    def prepare(self) -> tuple[BuildConfiguration, BuildMatrix]:
        sha = self.checksums.fetch(self.config.jenkins_version)
        config = self.config.with_checksum(sha)

        variant_ids = self.definitions.variant_ids()
        if not variant_ids:
            raise ValueError(f"No build variants declared in {config.compose_file}")
        matrix = build_matrix_resolver.resolve(
            config.image_type, config.jenkins_version, variant_ids, config.default_jdk
        )

        self.logger.info(
            f"= PREPARE: List of {config.organisation}/{config.repository} images and tags to be processed:"
        )
        for entry in matrix:
            self.logger.info(f"= PREPARE: {entry.image_id}: {', '.join(entry.tags)}")
        if config.dry_run:
            print(json.dumps(matrix.as_dict(), indent=2))

        rendered = self.compose.config({**os.environ, **config.to_env()})
        services = parse_build_definition(load_yaml_text(rendered)).services
        MatrixReconciliationService(matrix, services, config.default_jdk).run()
        return config, matrix

    @override
    def run(self) -> None:
        config, matrix = self.prepare()
        BuildService(config, matrix, self.compose).run()
        if self.target == "test":
            ImageTestService(config, matrix, self.pester).run()
        elif self.target == "publish":
            PublishService(config, matrix, self.docker).run()
