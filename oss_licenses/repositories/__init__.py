from .artifact_snapshot_repository import ArtifactSnapshotRepository
from .dependency_graph_repository import DependencyGraphRepository

__all__ = [
    'ArtifactSnapshotRepository',
    'DependencyGraphRepository'
]
