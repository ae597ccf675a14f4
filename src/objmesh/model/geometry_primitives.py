"""
Geometric Primitives for parsed OBJ data.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Position3:
    """
    A point or direction in 3D space.
    Used both for vertex positions and for vertex normals.
    """
    x: float
    y: float
    z: float

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass(frozen=True)
class TexCoord2:
    """A texture coordinate (u, v)."""
    u: float
    v: float

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.u, self.v], dtype=np.float64)


@dataclass(frozen=True)
class FaceVertex:
    """One resolved corner of a face."""
    position: Position3
    tex_coord: TexCoord2
    normal: Position3

    def to_array(self) -> npt.NDArray[np.float64]:
        # Layout: x, y, z, u, v, nx, ny, nz
        return np.concatenate(
            (self.position.to_array(), self.tex_coord.to_array(), self.normal.to_array())
        )


@dataclass(frozen=True)
class Face:
    """
    A triangle whose corners are already resolved against the
    position, texture coordinate and normal lists.
    """
    vertices: Tuple[FaceVertex, FaceVertex, FaceVertex]

    def __post_init__(self) -> None:
        if len(self.vertices) != 3:
            raise ValueError(f"A face needs exactly 3 vertices, got {len(self.vertices)}.")

    @property
    def positions(self) -> Tuple[Position3, Position3, Position3]:
        return tuple(fv.position for fv in self.vertices)  # type: ignore[return-value]

    @property
    def tex_coords(self) -> Tuple[TexCoord2, TexCoord2, TexCoord2]:
        return tuple(fv.tex_coord for fv in self.vertices)  # type: ignore[return-value]

    @property
    def normals(self) -> Tuple[Position3, Position3, Position3]:
        return tuple(fv.normal for fv in self.vertices)  # type: ignore[return-value]

    def to_array(self) -> npt.NDArray[np.float64]:
        """Returns a (3, 8) array, one row per corner."""
        return np.vstack([fv.to_array() for fv in self.vertices])
