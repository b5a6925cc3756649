import json

import pytest
from unittest.mock import MagicMock

from oss_licenses.services.dependency_snapshot_service import DependencySnapshotService
from oss_licenses.services.metadata_locator import MetadataLocator

GRAPH = """\
scopes:
  - name: implementation
    artifacts:
      - group: com.squareup.okio
        name: okio
        version: "3.6.0"
        file: libs/okio-3.6.0.jar
      - group: org.example
        name: nopom
        version: "1.0"
        file: libs/nopom-1.0.jar
  - name: api
    ancestors: [api]
    artifacts:
      - group: com.squareup.okio
        name: okio
        version: "3.6.0"
        file: libs/okio-3.6.0.jar
  - name: testImplementation
    artifacts:
      - group: junit
        name: junit
        version: "4.13.2"
        file: libs/junit-4.13.2.jar
  - name: compile
    error: "Could not find com.example:missing:1.0"
"""


@pytest.fixture
def workspace(tmp_path):
    libs = tmp_path / "libs"
    libs.mkdir()
    for jar in ["okio-3.6.0.jar", "nopom-1.0.jar", "junit-4.13.2.jar"]:
        (libs / jar).write_bytes(b"jar")
    (tmp_path / "dependency-graph.yaml").write_text(GRAPH)
    for group_path, name, version in [("com/squareup/okio", "okio", "3.6.0"), ("junit", "junit", "4.13.2")]:
        pom_dir = tmp_path / "m2" / group_path / name / version
        pom_dir.mkdir(parents=True)
        (pom_dir / f"{name}-{version}.pom").write_text("<project/>")
    return tmp_path


@pytest.fixture
def output_file(workspace):
    return workspace / "build" / "generated" / "dependencies.json"


def create_service(workspace, output_file, dry_run=False):
    svc = DependencySnapshotService(
        str(workspace / "dependency-graph.yaml"),
        str(output_file),
        MetadataLocator(maven_repositories=[str(workspace / "m2")]),
        dry_run=dry_run,
    )
    svc.logger = MagicMock()
    return svc


def test_run_writes_snapshot(workspace, output_file):
    create_service(workspace, output_file).run()

    records = json.loads(output_file.read_text())
    assert records == [{
        "group": "com.squareup.okio",
        "name": "okio",
        "version": "3.6.0",
        "pomLocation": str(workspace / "m2" / "com" / "squareup" / "okio" / "okio" / "3.6.0" / "okio-3.6.0.pom"),
        "fileLocation": str(workspace / "libs" / "okio-3.6.0.jar"),
    }]


def test_run_twice_does_not_rewrite(workspace, output_file):
    create_service(workspace, output_file).run()
    mtime = output_file.stat().st_mtime_ns

    svc = create_service(workspace, output_file)
    svc.run()

    assert output_file.stat().st_mtime_ns == mtime
    svc.logger.info.assert_any_call("Dependency snapshot is unchanged")


def test_run_dry_run(workspace, output_file, capsys):
    create_service(workspace, output_file, dry_run=True).run()

    assert not output_file.exists()
    records = json.loads(capsys.readouterr().out)
    assert [r["name"] for r in records] == ["okio"]


def test_run_missing_graph_writes_empty_snapshot(tmp_path):
    output_file = tmp_path / "dependencies.json"
    svc = DependencySnapshotService(str(tmp_path / "missing.yaml"), str(output_file), MetadataLocator())
    svc.logger = MagicMock()

    svc.run()

    assert json.loads(output_file.read_text()) == []
    svc.logger.warning.assert_called_once_with("No dependency scopes found in the dependency graph")
