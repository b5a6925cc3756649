from pydantic import field_validator
from pydantic.dataclasses import dataclass

YAML_NULLS = frozenset({"", "~", "null", "Null", "NULL"})


@dataclass(frozen=True)
class DeclaredArtifact:
    group: str
    name: str
    version: str
    file: str


@dataclass(frozen=True)
class DependencyScope:
    name: str
    # graph exports from hosts that cannot tell whether a scope is resolvable omit the flag
    resolvable: bool = True
    ancestors: frozenset[str] = frozenset()
    artifacts: tuple[DeclaredArtifact, ...] = ()
    error: str | None = None

    @field_validator("error", mode="before")
    @classmethod
    def _yaml_null(cls, value):
        if isinstance(value, str) and value in YAML_NULLS:
            return None
        return value
