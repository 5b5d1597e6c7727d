#!/usr/bin/env python3
"""
Version bumper for the mpvex editor

This script bumps the version number in pyproject.toml and in the package's
__init__.py, ensuring they stay in sync.
"""

import argparse
import re
from pathlib import Path


def check_version_consistency(pyproject_path, init_path):
    """Check if pyproject.toml and __init__.py carry the same version."""
    versions = {}

    try:
        versions[str(pyproject_path)] = read_version(pyproject_path)
    except (OSError, ValueError):
        versions[str(pyproject_path)] = "VERSION NOT FOUND"

    try:
        versions[str(init_path)] = read_init_version(init_path)
    except (OSError, ValueError):
        versions[str(init_path)] = "VERSION NOT FOUND"

    unique_versions = set(v for v in versions.values() if v != "VERSION NOT FOUND")
    return unique_versions, versions


def read_version(file_path):
    """Read the current version from a pyproject.toml file."""
    with open(file_path, 'r') as f:
        content = f.read()

    match = re.search(r'^version\s*=\s*"([^"]+)"', content, re.MULTILINE)
    if match:
        return match.group(1)
    raise ValueError(f"Could not find version in {file_path}")


def read_init_version(init_path):
    """Read __version__ from an __init__.py file."""
    with open(init_path, 'r') as f:
        content = f.read()

    match = re.search(r'__version__\s*=\s*"([^"]+)"', content)
    if match:
        return match.group(1)
    raise ValueError(f"Could not find __version__ in {init_path}")


def bump_version(version, bump_type):
    """Bump a version number based on semantic versioning."""
    major, minor, patch = map(int, version.split('.'))

    if bump_type == 'major':
        major += 1
        minor = 0
        patch = 0
    elif bump_type == 'minor':
        minor += 1
        patch = 0
    else:  # patch
        patch += 1

    return f"{major}.{minor}.{patch}"


def update_version_in_file(file_path, new_version):
    """Update the version line in a pyproject.toml file."""
    with open(file_path, 'r') as f:
        content = f.read()

    # Lambda replacement keeps backslashes in the version literal
    version_pattern = re.compile(r'^(version\s*=\s*)"([^"]+)"', re.MULTILINE)
    updated_content = version_pattern.sub(lambda m: f'{m.group(1)}"{new_version}"', content, count=1)

    with open(file_path, 'w') as f:
        f.write(updated_content)


def update_version_in_init(init_path, new_version):
    """Update the __version__ in an __init__.py file."""
    with open(init_path, 'r') as f:
        content = f.read()

    version_pattern = re.compile(r'(__version__\s*=\s*)"([^"]+)"')
    updated_content = version_pattern.sub(lambda m: f'{m.group(1)}"{new_version}"', content)

    with open(init_path, 'w') as f:
        f.write(updated_content)


def main():
    parser = argparse.ArgumentParser(description="Bump version for the mpvex editor")
    parser.add_argument(
        "bump_type",
        choices=["patch", "minor", "major", "custom"],
        help="The type of version bump to perform following semantic versioning, or 'custom' to specify a specific version"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be done without making changes"
    )
    parser.add_argument(
        "--version",
        help="Custom version to set when using the 'custom' bump type"
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Force version bump even if inconsistencies are detected"
    )
    args = parser.parse_args()

    repo_root = Path(__file__).parent.parent.absolute()
    pyproject_path = repo_root / "pyproject.toml"
    init_path = repo_root / "mpvex_editor" / "__init__.py"

    print("Checking version consistency across files...")
    unique_versions, all_versions = check_version_consistency(pyproject_path, init_path)

    if len(unique_versions) > 1:
        print("\nWARNING: Version inconsistency detected!")
        for file_path, version in all_versions.items():
            print(f"  - {file_path}: {version}")

        if not args.force:
            print("\nOperation aborted. Use --force to proceed with version bump despite inconsistencies.")
            return
        print("\nProceeding with version bump despite inconsistencies (--force flag used).")
    else:
        print("\nAll files have consistent versions.")

    current_version = read_version(pyproject_path)
    print(f"Current version: {current_version}")

    if args.bump_type == "custom":
        if not args.version:
            parser.error("--version is required when using 'custom' bump type")
        new_version = args.version
        if not re.match(r'^\d+\.\d+\.\d+$', new_version):
            parser.error(f"Invalid version format: {new_version}. Expected format: X.Y.Z")
    else:
        new_version = bump_version(current_version, args.bump_type)

    print(f"New version: {new_version}")

    if args.dry_run:
        print("Dry run - no changes made.")
        return

    print(f"Updating {pyproject_path}")
    update_version_in_file(pyproject_path, new_version)

    print(f"Updating {init_path}")
    update_version_in_init(init_path, new_version)

    print(f"Version bump complete! {current_version} -> {new_version}")
    print("\nNext steps:")
    print(f"1. Commit the changes: git commit -am \"Bump version to {new_version}\"")
    print(f"2. Create a tag: git tag -a v{new_version} -m \"Version {new_version}\"")
    print("3. Push changes: git push && git push --tags")


if __name__ == "__main__":
    main()
