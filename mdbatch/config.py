import json
import os
from typing import Optional

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
DEPENDENCIES_PATH = os.path.join(ROOT_DIR, "config", "dependencies.json")


def _resolve_path(base: str, relative: str) -> str:
    return os.path.abspath(os.path.join(base, relative))


def configure_dependencies(deps_path: str = DEPENDENCIES_PATH) -> Optional[str]:
    """Resolve the pandoc executable from config/dependencies.json.

    Returns the absolute path to pandoc when the config names an existing file,
    otherwise None so the caller falls back to whatever pandoc is on PATH.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(deps_path)))

    pandoc_abs: Optional[str] = None

    if not os.path.exists(deps_path):
        return pandoc_abs

    try:
        with open(deps_path, "r", encoding="utf-8") as deps_file:
            deps = json.load(deps_file) or {}
    except (OSError, ValueError) as exc:
        print(f"Warning: Could not load dependencies from {deps_path}: {exc}")
        return pandoc_abs

    pandoc_rel = deps.get("pandoc_path")
    if pandoc_rel:
        candidate = _resolve_path(project_root, pandoc_rel)
        if os.path.isfile(candidate):
            pandoc_abs = candidate
        else:
            print(f"Warning: Pandoc path from config does not exist: {candidate}")

    return pandoc_abs
