"""
objmesh
=======
A minimal Wavefront OBJ loader producing resolved triangular faces.

Usage:
    >>> from objmesh import load_mesh
    >>> mesh = load_mesh("model.obj")
    >>> len(mesh.faces)
"""
from objmesh.model.errors import (
    InvalidIndexError,
    InvalidNumberError,
    MalformedDirectiveError,
    ObjError,
    ObjFormatError,
    ObjReadError,
    UnresolvedReferenceError,
)
from objmesh.model.geometry_primitives import Face, FaceVertex, Position3, TexCoord2
from objmesh.model.mesh import Mesh, load_mesh

__all__ = [
    "Face",
    "FaceVertex",
    "InvalidIndexError",
    "InvalidNumberError",
    "MalformedDirectiveError",
    "Mesh",
    "ObjError",
    "ObjFormatError",
    "ObjReadError",
    "Position3",
    "TexCoord2",
    "UnresolvedReferenceError",
    "load_mesh",
]
