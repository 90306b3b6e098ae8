"""Extract the first version and source URLs of a package."""

from __future__ import annotations

import logging
from pathlib import Path

from check_conan_info.core.layout import (
    POINTER_FILENAME,
    first_version_dir,
    read_pointer,
    read_text,
)
from check_conan_info.core.yaml_view import NodeKind, parse_document
from check_conan_info.errors import (
    ConanInfoError,
    KeyNotFoundError,
    TypeMismatchError,
    UnsupportedFormatError,
    YamlParseError,
)
from check_conan_info.models.package import PackageInfo

logger = logging.getLogger(__name__)


def extract_sources(text: str) -> tuple[str, list[str]]:
    """Return ``(first_version, first_urls)`` from conandata YAML text.

    The first entry of the top-level ``sources`` mapping is used, in document
    order. Its ``url`` may be a single string or a list of strings.

    Raises:
        YamlParseError: If the text is not valid YAML
        KeyNotFoundError: If ``sources`` or ``url`` is missing
        TypeMismatchError: If the first sources entry is not a mapping
        UnsupportedFormatError: If ``url`` is neither a scalar nor a sequence
    """
    root = parse_document(text)

    try:
        sources = root.get("sources")
        version_node, version_map = sources.first_item()
    except KeyNotFoundError as exc:
        raise KeyNotFoundError(f"failed to get sources: {exc}") from exc

    if version_map.kind is not NodeKind.MAPPING:
        raise TypeMismatchError(
            f"sources first version is not a mapping node: {version_map.describe()}"
        )

    try:
        url_node = version_map.get("url")
    except KeyNotFoundError as exc:
        raise KeyNotFoundError(f"failed to get url: {exc}") from exc

    if url_node.kind is NodeKind.SEQUENCE:
        urls = [element.text for element in url_node.elements()]
    elif url_node.kind is NodeKind.SCALAR:
        urls = [url_node.text]
    else:
        raise UnsupportedFormatError(f"unsupported URL format: {url_node.kind}")

    return version_node.text, urls


def read_package_info(name: str, base: str | Path) -> PackageInfo:
    """Run the full lookup chain for one package.

    ``<base>/<name>/<first version>/data.path`` names a YAML file whose first
    ``sources`` entry supplies the version and URLs.
    """
    version_dir = first_version_dir(base, name)

    pointer_file = version_dir / POINTER_FILENAME
    try:
        target = read_pointer(pointer_file)
    except ConanInfoError as exc:
        raise type(exc)(f"failed to read {POINTER_FILENAME}: {exc} {pointer_file}") from exc
    logger.debug("Package %s: %s points to %s", name, pointer_file, target)

    try:
        content = read_text(target)
    except ConanInfoError as exc:
        raise type(exc)(f"failed to read file content: {exc} {target}") from exc

    try:
        first_version, first_urls = extract_sources(content)
    except YamlParseError as exc:
        raise YamlParseError(f"failed to parse YAML content: {exc} {target}") from exc
    except ConanInfoError as exc:
        raise type(exc)(f"{exc} ({target})") from exc

    return PackageInfo(name=name, first_version=first_version, first_urls=first_urls)
