import logging
from typing import override

from windows_images.models import BuildMatrix, ServiceDefinition, TagDiscrepancy
from windows_images.models.errors import MatrixMismatch
from windows_images.services.service import Service
from windows_images.utils.logging import setup_logger


class MatrixReconciliationService(Service):
    def __init__(self, matrix: BuildMatrix, services: list[ServiceDefinition], default_jdk: str):
        self.matrix: BuildMatrix = matrix
        self.services: list[ServiceDefinition] = services
        self.default_jdk: str = default_jdk
        self.logger: logging.Logger = setup_logger("MatrixReconciliationService")

    def discrepancies(self) -> list[TagDiscrepancy]:
        declared_by_variant = {s.name: s.declared_tags() for s in self.services}
        found: list[TagDiscrepancy] = []
        for entry in self.matrix:
            declared = declared_by_variant.get(entry.variant_id, [])
            if sorted(declared) != sorted(entry.tags):
                found.append(TagDiscrepancy(
                    variant_id=entry.variant_id,
                    expected=list(entry.tags),
                    declared=declared,
                ))
        return found

    @override
    def run(self) -> list[TagDiscrepancy]:
        found = self.discrepancies()
        for d in found:
            self.logger.warning(
                f"= PREPARE: {d.variant_id} declares tags {d.declared}, resolved tags are {d.expected}"
            )
        default_variant = next((e.variant_id for e in self.matrix if e.jdk_major == self.default_jdk), None)
        if any(d.variant_id == default_variant for d in found):
            raise MatrixMismatch(
                f"Build definition and resolved matrix disagree on the tags of {default_variant}"
            )
        return found
