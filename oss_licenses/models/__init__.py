from .artifact_info import ArtifactInfo
from .dependency_scope import DeclaredArtifact, DependencyScope
from .descriptor_candidate import DescriptorCandidate
from .resolved_artifact import ResolvedArtifact
from .scope_resolution import Failed, Resolved, ScopeResolution, contribution
from .snapshot import Snapshot
from .wrappers import ArtifactRecord, DependencyGraphFile

__all__ = [
    "ArtifactInfo",
    "ArtifactRecord",
    "DeclaredArtifact",
    "DependencyGraphFile",
    "DependencyScope",
    "DescriptorCandidate",
    "Failed",
    "Resolved",
    "ResolvedArtifact",
    "ScopeResolution",
    "Snapshot",
    "contribution",
]
