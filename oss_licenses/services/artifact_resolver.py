import logging

from oss_licenses.clients.resolution_client import ResolutionClient
from oss_licenses.models import (
    ArtifactInfo,
    DependencyScope,
    Failed,
    Resolved,
    ResolvedArtifact,
    ScopeResolution,
    contribution,
)
from oss_licenses.services.configuration_classifier import is_eligible
from oss_licenses.services.metadata_locator import MetadataLocator
from oss_licenses.utils.logging import setup_logger


class ArtifactResolver:
    def __init__(self, resolution_client: ResolutionClient, metadata_locator: MetadataLocator):
        self.resolution_client: ResolutionClient = resolution_client
        self.metadata_locator: MetadataLocator = metadata_locator
        self.logger: logging.Logger = setup_logger("ArtifactResolver")

    def resolve(self, scope: DependencyScope) -> frozenset[ArtifactInfo]:
        return contribution(self.resolve_scope(scope))

    def resolve_scope(self, scope: DependencyScope) -> ScopeResolution:
        if not is_eligible(scope):
            self.logger.debug(f"Skipping scope {scope.name}")
            return Resolved(scope=scope.name, artifacts=frozenset())

        # POM lookups share the scope's failure boundary: any error drops the whole scope
        try:
            infos: set[ArtifactInfo] = set()
            for artifact in self.resolution_client.resolve(scope):
                infos.update(self.artifact_infos(artifact))
        except Exception as e:
            self.logger.warning(f"Failed to resolve scope {scope.name}: {e}")
            return Failed(scope=scope.name, cause=e)

        self.logger.info(f"Resolved {len(infos)} artifacts in scope {scope.name}")
        return Resolved(scope=scope.name, artifacts=frozenset(infos))

    def artifact_infos(self, artifact: ResolvedArtifact) -> list[ArtifactInfo]:
        candidates = self.metadata_locator.locate_descriptors(artifact.group, artifact.name, artifact.version)
        if not candidates:
            # without a POM the artifact is left out of the report
            self.logger.debug(f"Dropping {artifact.coordinate}: no POM found")
        return [
            ArtifactInfo(
                group=artifact.group,
                name=artifact.name,
                version=artifact.version,
                descriptor_location=c.file_location,
                binary_location=artifact.file_location,
            )
            for c in candidates
        ]
