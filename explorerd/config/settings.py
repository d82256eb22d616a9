"""Settings models for explorerd.

Contract:
- Inputs: Environment variables, YAML files
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from pathlib import Path

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from explorer_library.models import RootSpec
from explorer_library.models import TraversalOptions

STATIC_DIR = Path(__file__).parent.parent / "static"


class RootConfig(BaseModel):
    """One directory exposed by the listing endpoint."""

    path: str = Field(..., description="Directory to list, relative to the daemon's cwd or absolute")
    label: str | None = Field(None, description="Display name; falls back to the root's position")
    ignore: list[str] = Field(default_factory=list, description="Bare names hidden at every depth")

    def to_spec(self) -> RootSpec:
        return RootSpec(path=self.path, label=self.label, ignore_names=frozenset(self.ignore))


class ListingConfig(BaseModel):
    """Switches between listing variants."""

    include_ids: bool = Field(default=True, description="Tag every entry with a random id")
    group_by_label: bool = Field(default=False, description="Key roots by label instead of returning a list")
    sort_entries: bool = Field(default=True, description="Folders first, then files, each by name")
    max_concurrency: int = Field(
        default=16,
        ge=1,
        le=256,
        description="Maximum directory scans in flight per request",
    )

    def to_options(self) -> TraversalOptions:
        return TraversalOptions(
            include_ids=self.include_ids,
            group_by_label=self.group_by_label,
            sort_entries=self.sort_entries,
            max_concurrency=self.max_concurrency,
        )


class ExplorerSettings(BaseSettings):
    """Configuration for the explorerd daemon.

    Attributes:
        host: Listen address (default: 127.0.0.1)
        port: Listen port (default: 8430)
        log_level: Logging level (default: info)
        workers: Number of uvicorn workers (default: 1)
        cors_origins: Origins allowed to call the API
        static_dir: Directory holding file-explorer.html (default: bundled page)
        roots: Directories exposed by GET /files
        listing: Listing variant switches

    Example:
        >>> settings = ExplorerSettings()
        >>> assert settings.port == 8430
        >>> assert settings.roots[0].label == "@root"
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPLORERD_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = Field(default=8430, ge=1, le=65535)
    log_level: str = "info"
    workers: int = Field(default=1, ge=1, le=16)
    cors_origins: list[str] = Field(default_factory=list)
    static_dir: str | None = None

    roots: list[RootConfig] = Field(
        default_factory=lambda: [RootConfig(label="@root", path=".", ignore=["node_modules"])]
    )
    listing: ListingConfig = Field(default_factory=ListingConfig)

    @field_validator("static_dir")
    @classmethod
    def expand_and_resolve_path(cls, v: str | None) -> str | None:
        """Expand ~ and resolve to absolute path."""
        if v is None:
            return None
        return str(Path(v).expanduser().resolve())

    def get_static_dir(self) -> Path:
        return Path(self.static_dir) if self.static_dir else STATIC_DIR

    def root_specs(self) -> list[RootSpec]:
        return [root.to_spec() for root in self.roots]
