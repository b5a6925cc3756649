import logging
import os
import tempfile

import requests

from oss_licenses.errors import ResolutionError

logger = logging.getLogger(__name__)

MAVEN_CENTRAL_URL = "https://repo.maven.apache.org/maven2"


class MavenRepositoryClient:
    def __init__(self, cache_dir: str, repository_url: str = MAVEN_CENTRAL_URL):
        self.cache_dir: str = cache_dir
        self.repository_url: str = repository_url.rstrip("/")

    def pom_path(self, group: str, name: str, version: str) -> str:
        return "/".join([*group.split("."), name, version, f"{name}-{version}.pom"])

    def pom_url(self, group: str, name: str, version: str) -> str:
        return f"{self.repository_url}/{self.pom_path(group, name, version)}"

    def download_pom(self, group: str, name: str, version: str) -> str | None:
        target = os.path.abspath(os.path.join(self.cache_dir, *self.pom_path(group, name, version).split("/")))
        if os.path.isfile(target):
            return target

        url = self.pom_url(group, name, version)
        try:
            response = requests.get(url=url, timeout=10)
        except requests.RequestException as e:
            raise ResolutionError(f"Error fetching POM for {group}:{name}:{version}: {e}") from e

        if response.status_code != 200:
            logger.warning(f"Failed to fetch POM: {url} (status code {response.status_code})")
            return None

        self._write_pom(target, response.content)
        logger.info(f"Downloaded POM for {group}:{name}:{version} to {target}")
        return target

    def _write_pom(self, target: str, content: bytes) -> None:
        # concurrent downloads of the same POM each replace the file with complete content
        directory = os.path.dirname(target)
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            with tempfile.NamedTemporaryFile(dir=directory, prefix=".pom-", suffix=".tmp", delete=False) as f:
                tmp_path = f.name
                f.write(content)
            os.replace(tmp_path, target)
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise ResolutionError(f"Error caching POM {target}: {e}") from e
