"""Playbook lookup and YAML loading.

Hides where playbooks come from: the built-in table or a YAML document
with the same shape as the Playbook model.
"""

from pathlib import Path
from typing import Any

import yaml

from .builtin import BUILTIN_PLAYBOOKS
from .models import Playbook

PLAYBOOK_SUFFIXES = (".yaml", ".yml")


def load_playbook(path: str | Path) -> Playbook:
    """Load a playbook from a YAML file.

    Args:
        path: Path to the YAML document

    Returns:
        Validated Playbook

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the document is not valid YAML or not a mapping
        pydantic.ValidationError: If fields are missing or invalid
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Playbook file not found: {path}")

    with path.open(encoding="utf-8") as handle:
        try:
            data: Any = yaml.safe_load(handle)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid playbook YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Playbook file {path} must contain a mapping at the top level")

    data.setdefault("name", path.stem)
    return Playbook.model_validate(data)


def dump_playbook(playbook: Playbook, path: str | Path) -> Path:
    """Write a playbook as YAML, e.g. as a starting point for a custom one."""
    path = Path(path)
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(
            playbook.model_dump(mode="json"),
            handle,
            sort_keys=False,
            allow_unicode=True,
        )
    return path


def get_playbook(name_or_path: str) -> Playbook:
    """Resolve a built-in playbook name or a YAML file path.

    Raises:
        ValueError: If the name is neither built-in nor a YAML path
    """
    if name_or_path in BUILTIN_PLAYBOOKS:
        return BUILTIN_PLAYBOOKS[name_or_path]

    if name_or_path.lower().endswith(PLAYBOOK_SUFFIXES):
        return load_playbook(name_or_path)

    raise ValueError(
        f"Unsupported playbook: {name_or_path}. "
        f"Supported playbooks: {', '.join(sorted(BUILTIN_PLAYBOOKS))} or a .yaml file"
    )
