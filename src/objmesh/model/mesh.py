"""
Mesh (Data Model)
=================
The result of loading an OBJ source: an ordered list of resolved triangles.

Classes:
    Mesh: Container of faces with factory constructors.

Functions:
    load_mesh: Loads a mesh from a file path or an open text stream.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, TextIO, Union, TYPE_CHECKING

import numpy as np

from objmesh.model.geometry_primitives import Face
from objmesh.model.io import IOManager, PathLike
from objmesh.model.parser import ObjParser

if TYPE_CHECKING:
    import numpy.typing as npt


class Mesh:
    """
    Triangular faces, each corner carrying a position, a texture coordinate
    and a normal.

    Faces with more than three vertex groups are truncated to their first
    three groups; polygons are not triangulated.
    """

    def __init__(self, faces: Optional[List[Face]] = None) -> None:
        self.faces: List[Face] = faces if faces is not None else []

    def __len__(self) -> int:
        return len(self.faces)

    def __iter__(self) -> Iterator[Face]:
        return iter(self.faces)

    def __repr__(self) -> str:
        return f"Mesh(faces={len(self.faces)})"

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Mesh:
        """Builds a mesh from OBJ text lines. Lines are consumed lazily."""
        return cls(ObjParser().parse(lines))

    @classmethod
    def from_stream(cls, stream: TextIO, source: Optional[str] = None) -> Mesh:
        return cls(IOManager.load_faces_from_stream(stream, source=source))

    @classmethod
    def from_file(cls, filepath: PathLike) -> Mesh:
        """
        Loads a mesh from an OBJ file.

        Raises:
            ObjReadError: If the file cannot be opened or read.
            ObjFormatError: On the first malformed directive; no partial mesh is returned.
        """
        return cls(IOManager.load_faces(filepath))

    def to_array(self) -> npt.NDArray[np.float64]:
        """
        Stacks all faces into a (F, 3, 8) array.
        Each corner row is x, y, z, u, v, nx, ny, nz.
        """
        if not self.faces:
            return np.empty((0, 3, 8), dtype=np.float64)
        return np.stack([face.to_array() for face in self.faces])


def load_mesh(source: Union[PathLike, TextIO]) -> Mesh:
    """
    Loads a mesh from a file path or an open text stream.
    """
    if hasattr(source, "read"):
        return Mesh.from_stream(source)  # type: ignore[arg-type]
    return Mesh.from_file(source)  # type: ignore[arg-type]
