from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from oss_licenses.models import DependencyScope, Snapshot
from oss_licenses.services.artifact_resolver import ArtifactResolver


class SnapshotAggregator:
    def __init__(self, resolver: ArtifactResolver, max_workers: int = 1):
        self.resolver: ArtifactResolver = resolver
        self.max_workers: int = max_workers

    def aggregate(self, scopes: Iterable[DependencyScope]) -> Snapshot:
        if self.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                contributions = list(executor.map(self.resolver.resolve, scopes))
        else:
            contributions = [self.resolver.resolve(scope) for scope in scopes]
        return Snapshot(artifacts=frozenset().union(*contributions))
