"""Data models."""

from check_conan_info.models.package import GITHUB_PREFIX, ListingReport, PackageInfo

__all__ = ["GITHUB_PREFIX", "ListingReport", "PackageInfo"]
