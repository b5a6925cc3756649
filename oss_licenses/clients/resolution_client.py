import logging
import os

from oss_licenses.errors import ResolutionError
from oss_licenses.models import DependencyScope, ResolvedArtifact

logger = logging.getLogger(__name__)


class ResolutionClient:
    """Resolves the artifacts a dependency graph export declares for a scope.

    Relative artifact paths are taken relative to ``base_dir`` (usually the
    directory holding the export). A scope resolves only if the host did not
    report an error for it and every declared artifact file is present.
    """

    def __init__(self, base_dir: str = "."):
        self.base_dir: str = base_dir

    def resolve(self, scope: DependencyScope) -> list[ResolvedArtifact]:
        if scope.error:
            raise ResolutionError(f"Could not resolve scope {scope.name}: {scope.error}")

        resolved: list[ResolvedArtifact] = []
        for declared in scope.artifacts:
            path = os.path.abspath(os.path.join(self.base_dir, os.path.expanduser(declared.file)))
            if not os.path.isfile(path):
                raise ResolutionError(
                    f"Could not resolve {declared.group}:{declared.name}:{declared.version} "
                    f"in scope {scope.name}: {path} does not exist"
                )
            resolved.append(ResolvedArtifact(
                group=declared.group,
                name=declared.name,
                version=declared.version,
                file_location=path,
            ))
        logger.debug(f"Resolved {len(resolved)} artifacts in scope {scope.name}")
        return resolved
