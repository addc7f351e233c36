from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

DEMOS_DIR = Path(__file__).resolve().parent / "demos"


def list_demos(demos_dir: Path = DEMOS_DIR) -> list[str]:
    names: list[str] = []
    for p in demos_dir.iterdir():
        if p.name.startswith("_") or not (p / "__main__.py").is_file():
            continue
        names.append(p.name)
    return sorted(names)


def demo_command(demo: str, demo_args: list[str]) -> list[str]:
    return [sys.executable, "-m", f"glsketch.demos.{demo}", *demo_args]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="demo", description="Run one of the glsketch demos.")
    parser.add_argument("--list", action="store_true", help="List available demos and exit.")
    parser.add_argument("demo", nargs="?", help="Demo name (e.g. artview, snake).")
    parser.add_argument(
        "demo_args",
        nargs=argparse.REMAINDER,
        help="Arguments forwarded to the demo. Use `--` before the first forwarded arg.",
    )

    ns = parser.parse_args(argv)
    available = list_demos()

    if ns.list or ns.demo is None:
        for name in available:
            print(name)
        return 0 if ns.list else 2

    if ns.demo not in available:
        print(f"error: unknown demo: {ns.demo}", file=sys.stderr)
        if available:
            print("\navailable demos:", file=sys.stderr)
            for name in available:
                print(f"  {name}", file=sys.stderr)
        return 2

    demo_args = list(ns.demo_args)
    if demo_args and demo_args[0] == "--":
        demo_args = demo_args[1:]

    # Subprocess so each demo owns its pygame/OpenGL context and __main__.
    return subprocess.call(demo_command(ns.demo, demo_args))


if __name__ == "__main__":
    raise SystemExit(main())
