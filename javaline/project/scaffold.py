"""
javaline.project.scaffold - Project scaffolding

This module provides the file-creating operations behind 'javaline init'
and 'javaline add'. All of them take an explicit cwd so they can be driven
from any directory without changing process state.

Generated class files look like:

    import util;

    class Greeter {
        public static void main(String[] args) {
        }
    }

The import line is only present when the target directory carries a
pack_def.toml manifest.
"""

import os
from dataclasses import dataclass
from typing import Optional

from javaline.project.config import (
    CLASS_EXTENSION,
    MARKER_NAME,
    NotInProjectError,
    PackageManifest,
    find_project_root,
    get_package_info,
)


@dataclass
class ClassResult:
    """Result of adding a class file."""

    path: str
    class_name: str
    qualifier: Optional[str] = None
    overwritten: bool = False


@dataclass
class PackageResult:
    """Result of adding a package directory."""

    path: str
    manifest: PackageManifest
    created: bool


def _resolve_cwd(cwd: Optional[str]) -> str:
    if cwd is None:
        return os.getcwd()
    return os.path.abspath(cwd)


def _require_project(cwd: str) -> str:
    root = find_project_root(cwd)
    if root is None:
        raise NotInProjectError(cwd)
    return root


def class_name_from_identifier(identifier: str) -> str:
    """
    Derive a class name by upper-casing the first character of identifier.

    The remainder is kept verbatim, so "fooBar" becomes "FooBar". An empty
    identifier yields an empty class name.
    """
    return identifier[:1].upper() + identifier[1:]


def generate_class(class_name: str, qualifier: Optional[str] = None) -> str:
    """
    Generate the source of a class with an empty main method.

    Args:
        class_name: Name of the class
        qualifier: Package name to import, or None for no import line

    Returns:
        The .java file content
    """
    import_block = ""
    if qualifier:
        import_block = f"import {qualifier};\n\n"

    return f"""{import_block}class {class_name} {{
    public static void main(String[] args) {{
    }}
}}
"""


def init_project(cwd: Optional[str] = None) -> bool:
    """
    Mark cwd as a project root by creating the .java_line directory.

    Returns:
        True if the marker was created, False if it already existed.

    Raises:
        OSError: If the marker cannot be created for any other reason.
    """
    marker_path = os.path.join(_resolve_cwd(cwd), MARKER_NAME)
    try:
        os.mkdir(marker_path)
    except FileExistsError:
        return False
    return True


def add_class(
    identifier: str,
    target_directory: Optional[str] = None,
    cwd: Optional[str] = None,
) -> ClassResult:
    """
    Create a new class file inside the current project.

    Args:
        identifier: Class identifier; its first character is capitalized
        target_directory: Directory to create the class in, relative to cwd.
                          Its manifest, if any, supplies the import qualifier.
        cwd: Working directory (default: current directory)

    Returns:
        ClassResult describing the written file

    Raises:
        NotInProjectError: If cwd is not inside a javaline project
        ManifestError: If target_directory has a malformed manifest
        OSError: If the file cannot be written
    """
    cwd = _resolve_cwd(cwd)
    _require_project(cwd)

    class_name = class_name_from_identifier(identifier)

    qualifier = None
    if target_directory is not None:
        out_dir = os.path.join(cwd, target_directory)
        qualifier = get_package_info(out_dir) or None
    else:
        out_dir = cwd

    class_path = os.path.join(out_dir, class_name + CLASS_EXTENSION)
    overwritten = os.path.exists(class_path)

    with open(class_path, "w", encoding="utf-8") as f:
        f.write(generate_class(class_name, qualifier))

    return ClassResult(
        path=class_path,
        class_name=class_name,
        qualifier=qualifier,
        overwritten=overwritten,
    )


def add_package(name: str, cwd: Optional[str] = None) -> PackageResult:
    """
    Create a package directory with a pack_def.toml manifest.

    An existing directory is reused; the manifest is always (re)written.
    Nothing is rolled back if writing the manifest fails.

    Args:
        name: Package name, also used as the directory name
        cwd: Working directory (default: current directory)

    Returns:
        PackageResult with created=False when the directory already existed

    Raises:
        NotInProjectError: If cwd is not inside a javaline project
        OSError: If the directory or manifest cannot be written
    """
    cwd = _resolve_cwd(cwd)
    _require_project(cwd)

    package_path = os.path.join(cwd, name)
    try:
        os.mkdir(package_path)
        created = True
    except FileExistsError:
        created = False

    manifest = PackageManifest.write(package_path, name)
    return PackageResult(path=package_path, manifest=manifest, created=created)
