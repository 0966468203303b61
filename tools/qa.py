#!/usr/bin/env python3
"""Run repository quality checks.

Checks included:
- UTF-8 validation on source/docs/config files
- Python bytecode compilation for the package and tools
- Version consistency between pyproject.toml and APP_VERSION
- Unit tests in tests/
"""

from __future__ import annotations

import argparse
import compileall
import re
import subprocess
import sys
from pathlib import Path

TEXT_EXTENSIONS = {".py", ".md", ".toml", ".txt"}

DEFAULT_SCAN_PATHS = [
    "fileexplorer",
    "tests",
    "tools",
    "DESIGN.md",
    "SPEC_FULL.md",
    "pyproject.toml",
]

COMPILE_PATHS = [
    "fileexplorer",
    "tools",
]

VERSION_FILE = Path("fileexplorer/constants.py")


def _iter_text_files(paths: list[str]) -> list[Path]:
    files: set[Path] = set()
    for raw_path in paths:
        path = Path(raw_path)
        if path.is_file():
            candidates = [path]
        elif path.is_dir():
            candidates = [child for child in path.rglob("*") if child.is_file()]
        else:
            continue
        files.update(child for child in candidates if child.suffix.lower() in TEXT_EXTENSIONS)
    return sorted(files)


def check_utf8(paths: list[str]) -> int:
    """Validate UTF-8 decoding for known text files."""
    bad_files: list[str] = []
    for file_path in _iter_text_files(paths):
        try:
            file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            bad_files.append(f"{file_path}: {exc}")

    if bad_files:
        print("[FAIL] UTF-8 validation failed:")
        for line in bad_files:
            print(f"  - {line}")
        return 1

    print("[OK] UTF-8 validation passed.")
    return 0


def check_compile(paths: list[str]) -> int:
    """Compile Python files to bytecode to catch syntax errors."""
    success = True
    for path in paths:
        if not Path(path).exists():
            continue
        if not compileall.compile_dir(path, quiet=1, force=False):
            success = False

    if success:
        print("[OK] compileall passed.")
        return 0

    print("[FAIL] compileall failed.")
    return 1


def check_tests() -> int:
    """Run unit tests."""
    cmd = [sys.executable, "-m", "unittest", "discover", "-s", "tests", "-v"]
    result = subprocess.run(cmd, check=False)
    if result.returncode == 0:
        print("[OK] unit tests passed.")
        return 0

    print("[FAIL] unit tests failed.")
    return result.returncode


def check_version_sync() -> int:
    """Verify pyproject.toml and APP_VERSION agree."""
    pyproject = Path("pyproject.toml")
    if not pyproject.exists() or not VERSION_FILE.exists():
        print("[FAIL] version sync check: required files missing.")
        return 1

    project_text = pyproject.read_text(encoding="utf-8")
    constants_text = VERSION_FILE.read_text(encoding="utf-8")

    project_match = re.search(r'^\s*version\s*=\s*"([^"]+)"', project_text, flags=re.MULTILINE)
    app_match = re.search(r"^APP_VERSION\s*=\s*['\"]([^'\"]+)['\"]", constants_text, flags=re.MULTILINE)

    if not project_match or not app_match:
        print("[FAIL] version sync check: unable to parse version fields.")
        return 1

    project_version = project_match.group(1)
    app_version = app_match.group(1)
    if project_version != app_version:
        print(
            "[FAIL] version sync mismatch: "
            f"pyproject.toml={project_version} vs {VERSION_FILE}={app_version}"
        )
        return 1

    print(f"[OK] version sync passed ({project_version}).")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Run File Explorer quality checks.")
    parser.add_argument("--skip-encoding", action="store_true", help="Skip UTF-8 validation.")
    parser.add_argument("--skip-compile", action="store_true", help="Skip compileall check.")
    parser.add_argument("--skip-version-sync", action="store_true", help="Skip version consistency check.")
    parser.add_argument("--skip-tests", action="store_true", help="Skip unit tests.")
    args = parser.parse_args()

    exit_code = 0
    if not args.skip_encoding:
        exit_code |= check_utf8(DEFAULT_SCAN_PATHS)
    if not args.skip_compile:
        exit_code |= check_compile(COMPILE_PATHS)
    if not args.skip_version_sync:
        exit_code |= check_version_sync()
    if not args.skip_tests:
        exit_code |= check_tests()

    if exit_code == 0:
        print("[OK] all quality checks passed.")
    else:
        print("[FAIL] one or more quality checks failed.")
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
