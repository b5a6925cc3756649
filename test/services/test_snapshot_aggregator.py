from unittest.mock import MagicMock

import pytest
from oss_licenses.errors import ResolutionError
from oss_licenses.models import DependencyScope, DescriptorCandidate, ResolvedArtifact, Snapshot
from oss_licenses.services.artifact_resolver import ArtifactResolver
from oss_licenses.services.snapshot_aggregator import SnapshotAggregator

OKIO = ResolvedArtifact(group="com.squareup.okio", name="okio", version="3.6.0", file_location="/libs/okio.jar")
GSON = ResolvedArtifact(group="com.google.code.gson", name="gson", version="2.10.1", file_location="/libs/gson.jar")


def resolve_scope(scope):
    artifacts = {
        "compile": [OKIO, GSON],
        "implementation": [OKIO],
        "api": [GSON],
        "testCompile": [ResolvedArtifact(group="junit", name="junit", version="4.13.2", file_location="/libs/junit.jar")],
    }
    if scope.name == "compileBroken":
        raise ResolutionError("Could not resolve scope compileBroken")
    return artifacts[scope.name]


@pytest.fixture
def resolver():
    client = MagicMock()
    client.resolve.side_effect = resolve_scope
    locator = MagicMock()
    locator.locate_descriptors.side_effect = lambda group, name, version: [
        DescriptorCandidate(source="m2", file_location=f"/m2/{name}-{version}.pom")
    ]
    svc = ArtifactResolver(client, locator)
    svc.logger = MagicMock()
    return svc


def test_aggregate_deduplicates_across_scopes(resolver):
    snapshot = SnapshotAggregator(resolver).aggregate([
        DependencyScope(name="implementation"),
        DependencyScope(name="api"),
        DependencyScope(name="compile"),
    ])

    assert len(snapshot.artifacts) == 2
    assert {a.name for a in snapshot.artifacts} == {"okio", "gson"}


def test_aggregate_is_order_independent(resolver):
    scopes = [DependencyScope(name="implementation"), DependencyScope(name="api")]
    aggregator = SnapshotAggregator(resolver)

    assert aggregator.aggregate(scopes) == aggregator.aggregate(list(reversed(scopes)))


def test_aggregate_failed_scope_does_not_abort_pass(resolver):
    snapshot = SnapshotAggregator(resolver).aggregate([
        DependencyScope(name="compileBroken"),
        DependencyScope(name="implementation"),
        DependencyScope(name="testCompile"),
    ])

    assert [a.name for a in snapshot.artifacts] == ["okio"]


def test_aggregate_empty():
    assert SnapshotAggregator(MagicMock()).aggregate([]) == Snapshot()


def test_aggregate_parallel_matches_sequential(resolver):
    scopes = [DependencyScope(name=n) for n in ["compile", "compileBroken", "api", "implementation", "testCompile"]]

    sequential = SnapshotAggregator(resolver).aggregate(scopes)
    parallel = SnapshotAggregator(resolver, max_workers=4).aggregate(scopes)

    assert parallel == sequential
    assert len(parallel.artifacts) == 2
