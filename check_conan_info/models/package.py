"""Package record and listing summary models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

GITHUB_PREFIX = "https://github.com/"


class PackageInfo(BaseModel):
    """Version and source URLs taken from a package's first version."""

    model_config = ConfigDict(frozen=True)

    name: str
    first_version: str
    first_urls: list[str] = Field(default_factory=list)

    @property
    def has_github_origin(self) -> bool:
        """True when the primary URL is hosted on github.com (literal prefix match)."""
        return bool(self.first_urls) and self.first_urls[0].startswith(GITHUB_PREFIX)

    def render(self) -> str:
        """Render the fixed three-line text block."""
        urls = " ".join(self.first_urls)
        return "\n".join(
            [
                f"Package: {self.name}",
                f"Version: {self.first_version}",
                f"URLs: [{urls}]",
            ]
        )


class ListingReport(BaseModel):
    """Outcome of a listing run over a package directory."""

    directory: str
    start: int = 0
    end: int = 0
    total: int = 0
    github_count: int = 0
    error_count: int = 0
    processed: list[str] = Field(default_factory=list)
    failures: dict[str, str] = Field(default_factory=dict)

    @property
    def span(self) -> int:
        """Number of directory entries covered by the requested range."""
        return self.end - self.start
