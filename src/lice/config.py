import os
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Tuple

# Worker count used when the platform cannot report its parallelism
FALLBACK_JOBS = 4
# Target used when no paths are given on the command line
DEFAULT_TARGETS: Tuple[str, ...] = (".",)


class ConfigError(ValueError):
    """Raised for configuration values that cannot start a run."""


@dataclass(frozen=True)
class LiceConfig:
    license_file: str
    targets: Tuple[str, ...] = DEFAULT_TARGETS
    # Exact path components to skip (no globbing)
    excludes: FrozenSet[str] = field(default_factory=frozenset)
    # None => resolve from the platform at run time
    jobs: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.license_file:
            raise ConfigError("Missing required argument: -f/--file")
        if self.jobs is not None and self.jobs < 1:
            raise ConfigError(f"Invalid number for -j: {self.jobs} (must be >= 1)")
        # Normalise caller-supplied iterables so the value stays hashable/immutable.
        object.__setattr__(self, "targets", tuple(self.targets) or DEFAULT_TARGETS)
        object.__setattr__(self, "excludes", frozenset(self.excludes))

    @classmethod
    def build(
        cls,
        license_file: str,
        targets: Optional[Iterable[str]] = None,
        excludes: Optional[Iterable[str]] = None,
        jobs: Optional[int] = None,
    ) -> "LiceConfig":
        return cls(
            license_file=license_file,
            targets=tuple(targets or ()),
            excludes=frozenset(excludes or ()),
            jobs=jobs,
        )


def resolve_jobs(jobs: Optional[int] = None) -> int:
    """Explicit override, else the CPU count the OS reports, else FALLBACK_JOBS."""
    if jobs is not None:
        return jobs
    return os.cpu_count() or FALLBACK_JOBS
