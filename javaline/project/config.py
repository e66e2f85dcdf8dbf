"""
javaline.project.config - Project root discovery and package manifests

This module locates the root of a javaline project and loads the
pack_def.toml manifests that declare package names.

A project root is any directory containing a .java_line marker directory:

    my-app/
    ├── .java_line/        # marks my-app/ as the project root
    ├── Main.java
    └── util/
        ├── pack_def.toml  # name = "util"
        └── Strings.java

The root is never stored anywhere; it is recomputed by walking upward from
the starting directory every time it is needed.
"""

import os
import tomllib
from dataclasses import dataclass
from typing import Optional

import tomli_w

MARKER_NAME = ".java_line"
MANIFEST_FILENAME = "pack_def.toml"
CLASS_EXTENSION = ".java"


class NotInProjectError(FileNotFoundError):
    """Raised when an operation requires a project but no marker was found."""

    def __init__(self, start_dir: str):
        self.start_dir = start_dir
        super().__init__(
            f"Not inside a javaline project (no {MARKER_NAME} directory found "
            f"in {start_dir} or any parent directory)"
        )


class ManifestError(ValueError):
    """Raised when a pack_def.toml file exists but cannot be used."""


def _find_marker(directory: str) -> Optional[str]:
    """
    Scan the immediate children of directory for the marker.

    Children that cannot be canonicalized (broken symlinks, symlink loops,
    entries removed mid-scan) are skipped. Failing to list directory itself
    raises OSError.

    Returns:
        The canonical directory holding the marker, or None.
    """
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                canonical = os.path.realpath(entry.path, strict=True)
            except OSError:
                continue
            if os.path.basename(canonical) == MARKER_NAME:
                return os.path.dirname(canonical)
    return None


def find_project_root(start_dir: Optional[str] = None) -> Optional[str]:
    """
    Find the project root by walking up the directory tree looking for .java_line.

    The nearest marker wins: the start directory is checked first, then each
    ancestor in turn up to the filesystem root.

    Args:
        start_dir: Directory to start searching from. If None, uses the current
                   working directory.

    Returns:
        Canonical absolute path of the directory containing .java_line, or None
        if no ancestor has one.

    Raises:
        OSError: If a directory on the way up cannot be listed.
    """
    if start_dir is None:
        start_dir = os.getcwd()
    current = os.path.realpath(start_dir)

    while True:
        root = _find_marker(current)
        if root is not None:
            return root

        parent = os.path.dirname(current)
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def is_inside_project(start_dir: Optional[str] = None) -> bool:
    """Return True if start_dir (default: cwd) is within a javaline project."""
    return find_project_root(start_dir) is not None


def is_project_root(start_dir: Optional[str] = None) -> bool:
    """Return True if start_dir (default: cwd) is itself the project root."""
    if start_dir is None:
        start_dir = os.getcwd()
    return find_project_root(start_dir) == os.path.realpath(start_dir)


@dataclass
class PackageManifest:
    """
    A package declaration loaded from pack_def.toml.

    Fields:
        name: Package name used as the import qualifier of generated classes
        path: Absolute path to the manifest file
    """

    name: str
    path: str

    @classmethod
    def load(cls, directory: str) -> Optional["PackageManifest"]:
        """
        Load the manifest stored in directory.

        Args:
            directory: Package directory that may contain pack_def.toml.

        Returns:
            Loaded PackageManifest, or None if the directory has no manifest.

        Raises:
            ManifestError: If the manifest is not valid UTF-8 TOML or lacks a string
                           name.
        """
        manifest_path = os.path.abspath(os.path.join(directory, MANIFEST_FILENAME))

        try:
            with open(manifest_path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            return None
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise ManifestError(f"Failed to parse {manifest_path}: {e}") from e

        if "name" not in data:
            raise ManifestError(f"{manifest_path} is missing required field 'name'")
        name = data["name"]
        if not isinstance(name, str):
            raise ManifestError(
                f"'name' in {manifest_path} must be a string, got {type(name).__name__}"
            )

        return cls(name=name, path=manifest_path)

    @classmethod
    def write(cls, directory: str, name: str) -> "PackageManifest":
        """Write a manifest declaring name into directory, replacing any existing one."""
        manifest_path = os.path.abspath(os.path.join(directory, MANIFEST_FILENAME))
        # Encode before opening so an unencodable name leaves no partial file
        content = tomli_w.dumps({"name": name}).encode("utf-8")
        with open(manifest_path, "wb") as f:
            f.write(content)
        return cls(name=name, path=manifest_path)


def get_package_info(directory: str) -> str:
    """
    Return the package name declared in directory's manifest.

    Returns an empty string when the directory has no pack_def.toml. A manifest
    that exists but cannot be parsed raises ManifestError.
    """
    manifest = PackageManifest.load(directory)
    if manifest is None:
        return ""
    return manifest.name
