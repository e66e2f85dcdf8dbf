"""
javaline.project - Javaline Project System

This package contains the project management system for javaline:

- config.py: Project root discovery and pack_def.toml manifests
- scaffold.py: File generation for 'javaline init' and 'javaline add'

Usage:
    from javaline.project import find_project_root, add_class

    # Locate the project containing the current directory
    root = find_project_root()  # Searches upward for .java_line

    # Create Greeter.java in the current directory
    add_class("greeter")
"""

from javaline.project.config import (
    CLASS_EXTENSION,
    MANIFEST_FILENAME,
    MARKER_NAME,
    ManifestError,
    NotInProjectError,
    PackageManifest,
    find_project_root,
    get_package_info,
    is_inside_project,
    is_project_root,
)
from javaline.project.scaffold import (
    ClassResult,
    PackageResult,
    add_class,
    add_package,
    class_name_from_identifier,
    generate_class,
    init_project,
)

__all__ = [
    # Config
    "find_project_root",
    "is_inside_project",
    "is_project_root",
    "get_package_info",
    "PackageManifest",
    "NotInProjectError",
    "ManifestError",
    "MARKER_NAME",
    "MANIFEST_FILENAME",
    "CLASS_EXTENSION",
    # Scaffold
    "init_project",
    "add_class",
    "add_package",
    "class_name_from_identifier",
    "generate_class",
    "ClassResult",
    "PackageResult",
]
