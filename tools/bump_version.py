"""
Set the structview release number in ``src/structview/_version.py`` and ``pyproject.toml``.

Usage: ``python tools/bump_version.py 0.2.0 [--tag]``. With ``--tag`` both files are
committed and a ``v<version>`` git tag is created unless it already exists.
"""

import argparse
import re
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
VERSION_MODULE = ROOT / "src" / "structview" / "_version.py"
PYPROJECT = ROOT / "pyproject.toml"

RELEASE_PATTERN = re.compile(r"\d+\.\d+\.\d+(?:[.\-]?[A-Za-z0-9]+)*")
PROJECT_VERSION_LINE = re.compile(r'^version = "[^"]*"$', flags=re.MULTILINE)


def write_release(release: str) -> list[Path]:
    """Write ``release`` into the version module and the project table; return the touched files."""
    VERSION_MODULE.write_text(f'__version__ = "{release}"\n')

    metadata, replaced = PROJECT_VERSION_LINE.subn(f'version = "{release}"', PYPROJECT.read_text(), count=1)
    if not replaced:
        raise SystemExit(f"No version line found in {PYPROJECT.name}")
    PYPROJECT.write_text(metadata)
    return [VERSION_MODULE, PYPROJECT]


def tag_release(release: str, changed: list[Path]) -> None:
    """Commit ``changed`` and tag the commit as ``v<release>``."""
    tag = f"v{release}"
    tags = subprocess.run(["git", "tag", "--list", tag], capture_output=True, text=True, check=True).stdout
    if tag in tags.split():
        print(f"{tag} is already tagged; leaving git alone.")
        return

    subprocess.run(["git", "add", *map(str, changed)], check=True)
    subprocess.run(["git", "commit", "-m", f"Release {tag}"], check=True)
    subprocess.run(["git", "tag", tag], check=True)
    print(f"Created tag {tag}")


def main(argv: list[str] | None = None) -> int:
    cli = argparse.ArgumentParser(description="Set the structview release number.")
    cli.add_argument("release", help="release number such as 0.2.0 or 0.2.0rc1")
    cli.add_argument("--tag", action="store_true", help="commit the version files and tag the release")
    args = cli.parse_args(argv)

    if not RELEASE_PATTERN.fullmatch(args.release):
        print(f"Not a release number: {args.release!r} (expected X.Y.Z)", file=sys.stderr)
        return 1

    changed = write_release(args.release)
    print(f"structview {args.release}: updated {', '.join(path.name for path in changed)}")
    if args.tag:
        tag_release(args.release, changed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
