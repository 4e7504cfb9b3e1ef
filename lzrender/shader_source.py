"""Loading GLSL source files with recursive ``#include "file"`` expansion."""

from __future__ import annotations

import os
from pathlib import Path

_INCLUDE = "#include"


def load_shader(path: str | os.PathLike[str]) -> str:
    """Read a shader file, replacing every ``#include "name"`` line with that file's text.

    Included names are resolved relative to the directory of the including file.
    Every line of output ends with a newline. Raises FileNotFoundError for missing
    files and ValueError for malformed or circular includes.
    """
    return _load(Path(path), ())


def _load(path: Path, stack: tuple[Path, ...]) -> str:
    resolved = path.resolve()
    if resolved in stack:
        chain = " -> ".join(str(p) for p in (*stack, resolved))
        raise ValueError(f"circular shader include: {chain}")

    parts: list[str] = []
    with path.open(encoding="utf-8") as handle:
        for line in handle:
            line = line.removesuffix("\n")
            if _INCLUDE in line:
                start = line.find('"')
                end = line.rfind('"')
                if start == -1 or end == start:
                    raise ValueError(f"malformed include in {path}: {line!r}")
                name = line[start + 1 : end]
                parts.append(_load(path.parent / name, (*stack, resolved)))
            else:
                parts.append(line + "\n")
    return "".join(parts)