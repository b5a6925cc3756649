import glob
import logging
import os

from oss_licenses.clients.maven_repository_client import MavenRepositoryClient
from oss_licenses.models import DescriptorCandidate
from oss_licenses.utils.logging import setup_logger

POM_EXTENSION = ".pom"


class MetadataLocator:
    """Finds the POM file belonging to a module coordinate.

    Local Maven repositories and Gradle module caches are searched in order; the
    remote repository is only asked when none of them holds a matching POM.
    """

    def __init__(
        self,
        maven_repositories: list[str] | None = None,
        gradle_caches: list[str] | None = None,
        remote: MavenRepositoryClient | None = None,
    ):
        self.maven_repositories: list[str] = maven_repositories or []
        self.gradle_caches: list[str] = gradle_caches or []
        self.remote: MavenRepositoryClient | None = remote
        self.logger: logging.Logger = setup_logger("MetadataLocator")

    def locate_descriptors(self, group: str, name: str, version: str) -> list[DescriptorCandidate]:
        # first source holding a matching POM wins, so one coordinate yields at most one record
        expected = f"{name}-{version}{POM_EXTENSION}"
        match = next((c for c in self.query_local(group, name, version) if self._matches(c, expected)), None)
        if match is None and self.remote is not None:
            match = next((c for c in self.query_remote(group, name, version) if self._matches(c, expected)), None)
        if match is None:
            self.logger.debug(f"No POM found for {group}:{name}:{version}")
            return []
        return [match]

    def query_local(self, group: str, name: str, version: str) -> list[DescriptorCandidate]:
        candidates: list[DescriptorCandidate] = []
        for root in self.maven_repositories:
            path = os.path.join(root, *group.split("."), name, version, f"{name}-{version}{POM_EXTENSION}")
            if os.path.isfile(path):
                candidates.append(DescriptorCandidate(source=root, file_location=os.path.abspath(path)))
            else:
                candidates.append(DescriptorCandidate(source=root, failure=f"{path} does not exist"))
        for root in self.gradle_caches:
            pattern = os.path.join(glob.escape(os.path.join(root, group, name, version)), "*", f"*{POM_EXTENSION}")
            for path in sorted(glob.glob(pattern)):
                candidates.append(DescriptorCandidate(source=root, file_location=os.path.abspath(path)))
        return candidates

    def query_remote(self, group: str, name: str, version: str) -> list[DescriptorCandidate]:
        url = self.remote.pom_url(group, name, version)
        path = self.remote.download_pom(group, name, version)
        if path is None:
            return [DescriptorCandidate(source=url, failure="not found")]
        return [DescriptorCandidate(source=url, file_location=path)]

    @staticmethod
    def _matches(candidate: DescriptorCandidate, expected: str) -> bool:
        return candidate.resolved and candidate.file_name == expected
