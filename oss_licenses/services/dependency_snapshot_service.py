import logging
import os
from typing import override

from oss_licenses.clients.resolution_client import ResolutionClient
from oss_licenses.repositories import ArtifactSnapshotRepository, DependencyGraphRepository
from oss_licenses.services.artifact_resolver import ArtifactResolver
from oss_licenses.services.metadata_locator import MetadataLocator
from oss_licenses.services.service import Service
from oss_licenses.services.snapshot_aggregator import SnapshotAggregator
from oss_licenses.utils.logging import setup_logger


class DependencySnapshotService(Service):
    def __init__(
        self,
        graph_file_path: str,
        output_file_path: str,
        metadata_locator: MetadataLocator,
        dry_run: bool = False,
        max_workers: int = 1,
    ):
        self.graph_repository: DependencyGraphRepository = DependencyGraphRepository(graph_file_path)
        self.snapshot_repository: ArtifactSnapshotRepository = ArtifactSnapshotRepository(output_file_path)
        resolution_client = ResolutionClient(os.path.dirname(os.path.abspath(graph_file_path)))
        self.aggregator: SnapshotAggregator = SnapshotAggregator(
            ArtifactResolver(resolution_client, metadata_locator),
            max_workers=max_workers,
        )
        self.logger: logging.Logger = setup_logger("DependencySnapshotService")
        self.dry_run: bool = dry_run

    @override
    def run(self) -> None:
        scopes = self.graph_repository.find_all()
        if not scopes:
            self.logger.warning("No dependency scopes found in the dependency graph")

        snapshot = self.aggregator.aggregate(scopes)
        self.logger.info(f"Collected {len(snapshot.artifacts)} artifacts from {len(scopes)} scopes")

        if self.dry_run:
            print(self.snapshot_repository.serialize(snapshot), end="")
            return

        if self.snapshot_repository.commit(snapshot):
            self.logger.info("Dependency snapshot has changed")
        else:
            self.logger.info("Dependency snapshot is unchanged")
