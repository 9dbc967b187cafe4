"""Loading mesh resources from model files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from tombgrid.objmodel import Model, load_obj


@dataclass
class MeshRes:
    """A loaded model together with its animations."""

    model: Model = field(default_factory=Model)
    anims: list[Any] = field(default_factory=list)
    debug_name: str = ""

    @property
    def anim_count(self) -> int:
        return len(self.anims)


def load_mesh(filename: Union[str, os.PathLike]) -> MeshRes:
    """Load a model file; it must exist and hold at least one mesh."""
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(f"mesh file not found: {os.fspath(filename)}")
    if path.suffix != ".obj":
        raise ValueError(f"unsupported mesh format {path.suffix!r}: {os.fspath(filename)}")
    model = load_obj(path)
    if not model.meshes:
        raise ValueError(f"model has no meshes: {os.fspath(filename)}")
    return MeshRes(model=model)