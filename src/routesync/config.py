"""routesync configuration.

SitemapConfig is the central configuration object, frozen after creation.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from routesync._errors import ConfigError
from routesync._types import CHANGE_FREQUENCIES, AdditionalPathsProvider, ChangeFrequency

DEFAULT_API_URL = "https://api.uptrademedia.com"


@dataclass(frozen=True, slots=True)
class SitemapConfig:
    """Configuration for sitemap generation and Portal sync.

    Attributes:
        base_url: Public site URL prepended to every path (required by the
            generator).  A trailing slash is stripped on construction.
        exclude: Extra exclusion patterns, added to the built-in defaults.
        default_priority: Priority for paths three or more segments deep.
        default_change_frequency: Change frequency for every entry that does
            not carry its own.
        additional_paths: Optional sync or async callable returning extra
            routes (``AdditionalPath`` objects or mappings with ``path``,
            ``priority``, ``changeFrequency``).
        priorities: Pattern -> priority overrides, first match wins.
        api_url: Portal API base URL.  Falls back to the environment, then
            ``DEFAULT_API_URL``.
        api_key: Portal API key.  Falls back to the environment; sync is
            skipped when no key can be found.
        disable_sync: Never contact the Portal API.
        root: Project root containing ``app/`` or ``src/app/``.  Always
            resolved to an absolute path on construction.

    """

    base_url: str = ""
    exclude: tuple[str, ...] = ()
    default_priority: float = 0.5
    default_change_frequency: ChangeFrequency = "weekly"
    additional_paths: AdditionalPathsProvider | None = None
    priorities: Mapping[str, float] = field(default_factory=dict)
    api_url: str | None = None
    api_key: str | None = None
    disable_sync: bool = False
    root: Path = field(default_factory=Path.cwd)

    def __post_init__(self) -> None:
        if self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

        if self.exclude is None:
            object.__setattr__(self, "exclude", ())
        if isinstance(self.exclude, str):
            msg = "exclude must be a sequence of patterns, not a single string"
            raise ConfigError(msg)
        try:
            patterns = tuple(self.exclude)
        except TypeError as exc:
            msg = f"exclude must be a sequence of patterns, got {type(self.exclude).__name__}"
            raise ConfigError(msg) from exc
        object.__setattr__(self, "exclude", patterns)

        if self.default_change_frequency not in CHANGE_FREQUENCIES:
            msg = (
                f"Invalid default_change_frequency {self.default_change_frequency!r}; "
                f"expected one of {sorted(CHANGE_FREQUENCIES)}"
            )
            raise ConfigError(msg)

        object.__setattr__(
            self, "default_priority", _as_priority("default_priority", self.default_priority),
        )

        if self.priorities is None:
            object.__setattr__(self, "priorities", {})
        if not isinstance(self.priorities, Mapping):
            msg = f"priorities must be a mapping, got {type(self.priorities).__name__}"
            raise ConfigError(msg)

        # Freeze overrides, keeping insertion order
        checked = {
            str(pattern): _as_priority(f"priorities[{pattern!r}]", value)
            for pattern, value in self.priorities.items()
        }
        object.__setattr__(self, "priorities", MappingProxyType(checked))

        if not isinstance(self.root, Path):
            object.__setattr__(self, "root", Path(self.root))
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())


def _as_priority(name: str, value: object) -> float:
    """Coerce a configured priority to float, rejecting non-numbers."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"{name} must be a number, got {type(value).__name__}"
        raise ConfigError(msg)
    return float(value)
