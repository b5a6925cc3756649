import json
import logging
import os
import tempfile
from dataclasses import asdict

from pydantic import TypeAdapter

from oss_licenses.errors import MalformedSnapshotError, StorageWriteError
from oss_licenses.models import ArtifactInfo, ArtifactRecord, Snapshot
from oss_licenses.utils.logging import setup_logger

RECORDS_ADAPTER = TypeAdapter(list[ArtifactRecord])


def _sort_key(info: ArtifactInfo) -> tuple:
    return (
        info.group,
        info.name,
        info.version,
        info.descriptor_location is not None,
        info.descriptor_location or "",
        info.binary_location,
    )


class ArtifactSnapshotRepository:
    """Stores the license snapshot as a JSON array and rewrites it only when its content changes.

    An unchanged snapshot leaves the file untouched, so its modification time
    tells downstream tasks whether the set of dependencies moved.
    """

    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.logger: logging.Logger = setup_logger("ArtifactSnapshotRepository")

    def find(self) -> Snapshot | None:
        if not os.path.isfile(self.file_path):
            return None
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                return self.parse(f.read())
        except (OSError, ValueError) as e:
            self.logger.warning(f"Ignoring unreadable snapshot {self.file_path}: {e}")
            return None

    def commit(self, snapshot: Snapshot) -> bool:
        if self.find() == snapshot:
            self.logger.info(f"Snapshot {self.file_path} is up to date")
            return False
        self._write_snapshot(snapshot)
        self.logger.info(f"Wrote {len(snapshot.artifacts)} artifacts to {self.file_path}")
        return True

    @staticmethod
    def parse(content: str) -> Snapshot:
        try:
            records = RECORDS_ADAPTER.validate_python(json.loads(content))
        except ValueError as e:
            raise MalformedSnapshotError(f"Invalid snapshot file: {e}") from e
        return Snapshot(artifacts=frozenset(r.to_artifact_info() for r in records))

    @staticmethod
    def serialize(snapshot: Snapshot) -> str:
        records = [asdict(ArtifactRecord.from_artifact_info(a)) for a in sorted(snapshot.artifacts, key=_sort_key)]
        return json.dumps(records, indent=4) + "\n"

    def _write_snapshot(self, snapshot: Snapshot) -> None:
        content = self.serialize(snapshot)
        directory = os.path.dirname(os.path.abspath(self.file_path))
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory, prefix=".dependencies-", suffix=".tmp", delete=False
            ) as f:
                tmp_path = f.name
                f.write(content)
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageWriteError(f"Error writing snapshot {self.file_path}: {e}") from e
