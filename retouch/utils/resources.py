from __future__ import annotations

import json
from importlib import resources
from typing import Any


def resource_dir(*parts: str) -> resources.abc.Traversable:
    base = resources.files("retouch")
    return base.joinpath(*parts)


def resource_exists(*parts: str) -> bool:
    try:
        return resource_dir(*parts).is_file()
    except (OSError, ModuleNotFoundError):
        return False


def read_json_resource(*parts: str) -> Any:
    return json.loads(resource_dir(*parts).read_text(encoding="utf-8"))
