import os

from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class DescriptorCandidate:
    source: str
    file_location: str | None = None
    failure: str | None = None

    @property
    def resolved(self) -> bool:
        return self.file_location is not None and self.failure is None

    @property
    def file_name(self) -> str | None:
        if self.file_location is None:
            return None
        return os.path.basename(self.file_location)
