"""Immutable set of sources a registry allows."""

from pydantic import BaseModel, ConfigDict, Field

from paramregistry.exceptions import StructuralError

from .enums import AllowedSource


class SourcePolicy(BaseModel):
    """
    Which loading and mutation pathways are legal for one registry.

    Fixed at registry construction. An empty policy allows only declared
    defaults.
    """

    model_config = ConfigDict(frozen=True)

    sources: frozenset[AllowedSource] = Field(default_factory=frozenset)

    @classmethod
    def from_flags(cls, *flags: AllowedSource) -> "SourcePolicy":
        """
        Build a policy from individual flags.

        Raises:
            StructuralError: If a flag is repeated or is not an AllowedSource
        """
        seen: set[AllowedSource] = set()
        for flag in flags:
            if not isinstance(flag, AllowedSource):
                raise StructuralError(f"Not a source flag: {flag!r}")
            if flag in seen:
                raise StructuralError(f"Duplicate flag: {flag.name}")
            seen.add(flag)
        return cls(sources=frozenset(seen))

    def allows(self, source: AllowedSource) -> bool:
        return source in self.sources

    @property
    def file(self) -> bool:
        return AllowedSource.FROM_FILE in self.sources

    @property
    def cmdline(self) -> bool:
        return AllowedSource.FROM_CMDLINE in self.sources

    @property
    def dynamic(self) -> bool:
        return AllowedSource.DYNAMIC in self.sources

    def __str__(self) -> str:
        names = sorted(s.name for s in self.sources)
        return "{" + ", ".join(names) + "}"
