from pathlib import Path
from typing import Optional


def resolve_cli_path(override: Optional[str], default: str | Path) -> Path:
    """
    Resolve a destination directory given on the command line.

    The override must stay inside the current project directory.
    """
    project_root = Path.cwd().resolve()
    if not override:
        return project_root / default

    candidate = Path(override)
    if not candidate.is_absolute():
        candidate = project_root / candidate
    candidate = candidate.resolve()

    if candidate != project_root and project_root not in candidate.parents:
        raise ValueError(f"Path must be inside the project directory: {override}")
    return candidate
