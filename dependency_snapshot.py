#!/usr/bin/env python3
import argparse
import os
import sys
from oss_licenses.clients.maven_repository_client import MAVEN_CENTRAL_URL, MavenRepositoryClient
from oss_licenses.services.dependency_snapshot_service import DependencySnapshotService
from oss_licenses.services.metadata_locator import MetadataLocator
from oss_licenses.utils.logging import setup_logger

ROOT_DIR = os.getcwd()


def build_metadata_locator() -> MetadataLocator:
    maven_local = os.environ.get("MAVEN_LOCAL_REPOSITORY", os.path.expanduser("~/.m2/repository"))
    gradle_cache = os.environ.get("GRADLE_CACHE_DIR", os.path.expanduser("~/.gradle/caches/modules-2/files-2.1"))
    remote_url = os.environ.get("MAVEN_REMOTE_REPOSITORY", MAVEN_CENTRAL_URL)
    pom_cache = os.environ.get("POM_CACHE_DIR", f"{ROOT_DIR}/build/pom-cache")
    remote = MavenRepositoryClient(pom_cache, remote_url) if remote_url else None
    return MetadataLocator(maven_repositories=[maven_local], gradle_caches=[gradle_cache], remote=remote)


def main():
    parser = argparse.ArgumentParser(description="Dependency License Snapshot")
    parser.add_argument('--dry-run', action='store_true', help='Print the snapshot instead of writing it')
    parser.add_argument('--workers', type=int, default=1, help='Number of scopes resolved in parallel')
    args = parser.parse_args()
    logger = setup_logger("DependencySnapshot")
    try:
        graph_file = os.environ.get("DEPENDENCY_GRAPH_FILE", f"{ROOT_DIR}/build/dependency-graph.yaml")
        output_file = os.environ.get(
            "LICENSES_OUTPUT_FILE", f"{ROOT_DIR}/build/generated/third_party_licenses/dependencies.json"
        )
        logger.info(f"Starting dependency snapshot with graph file: {graph_file} and output file {output_file}")
        service = DependencySnapshotService(
            graph_file,
            output_file,
            build_metadata_locator(),
            dry_run=args.dry_run,
            max_workers=args.workers,
        )
        service.run()
        logger.info("Dependency snapshot completed successfully")
        return 0
    except Exception as e:
        logger.error(f"Dependency snapshot failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
