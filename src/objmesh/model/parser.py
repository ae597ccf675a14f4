"""
OBJ Line Parser
===============
Turns Wavefront OBJ text into resolved triangular faces.

Only four directives are understood:
    v   x y z        vertex position
    vn  x y z        vertex normal
    vt  u v          texture coordinate
    f   v/vt/vn x3   triangular face

Every other line (blank, comments, o/g/s, mtllib, ...) is skipped.

Limitations:
    - Faces must use full ``v/vt/vn`` triplets.
    - Indices are absolute and 1-based; negative indices are rejected.
    - Only the first three vertex groups of a face are used. Polygons with
      more corners are truncated to a triangle, not fan-triangulated.
"""
from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Callable, Dict, Iterable, List, Sequence, TypeVar

from objmesh.config import FACE_VERTEX_COUNT
from objmesh.model.errors import (
    InvalidIndexError,
    InvalidNumberError,
    MalformedDirectiveError,
    UnresolvedReferenceError,
)
from objmesh.model.geometry_primitives import Face, FaceVertex, Position3, TexCoord2

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Names used in error messages
DIRECTIVE_NAMES: Dict[str, str] = {
    "v": "vertex",
    "vn": "vertex normal",
    "vt": "vertex texture",
    "f": "face",
}
COORDINATE_NAMES = ("x", "y", "z")
INDEX_FIELDS = ("vertex", "texture", "normal")

# ASCII only: no digit separators, padding or non-ASCII digits
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


def tokenize(line: str) -> List[str]:
    """Splits a line on single spaces and drops the empty tokens."""
    return [token for token in line.rstrip("\r\n").split(" ") if token]


class ObjParser:
    """
    Single-pass parser. One instance per load.

    The position, normal and texture coordinate lists only live for the
    duration of a parse; ``finish()`` clears them and hands back the faces.
    """

    def __init__(self) -> None:
        self.positions: List[Position3] = []
        self.normals: List[Position3] = []
        self.tex_coords: List[TexCoord2] = []
        self.faces: List[Face] = []
        self.line_number = 0

        self._ignored: Counter[str] = Counter()
        self._truncated_faces = 0
        self._handlers: Dict[str, Callable[[List[str]], None]] = {
            "v": self._parse_vertex,
            "vn": self._parse_vertex_normal,
            "vt": self._parse_vertex_texture,
            "f": self._parse_face,
        }

    def parse(self, lines: Iterable[str]) -> List[Face]:
        """
        Consumes all lines and returns the faces.

        Raises:
            ObjFormatError: On the first malformed directive.
        """
        for line in lines:
            self.feed_line(line)
        return self.finish()

    def feed_line(self, line: str) -> None:
        self.line_number += 1
        tokens = tokenize(line)
        if not tokens:
            return

        handler = self._handlers.get(tokens[0])
        if handler is None:
            self._ignored[tokens[0]] += 1
            return
        handler(tokens)

    def finish(self) -> List[Face]:
        logger.debug(
            f"Parsed {self.line_number} lines: {len(self.positions)} vertices, "
            f"{len(self.normals)} normals, {len(self.tex_coords)} texture coordinates, "
            f"{len(self.faces)} faces."
        )
        if self._ignored:
            logger.debug(f"Ignored directives: {dict(self._ignored)}")
        if self._truncated_faces:
            logger.warning(
                f"{self._truncated_faces} face(s) had more than {FACE_VERTEX_COUNT} vertices "
                f"and were truncated to a triangle."
            )

        self.positions.clear()
        self.normals.clear()
        self.tex_coords.clear()

        faces = self.faces
        self.faces = []
        return faces

    # --- VERTEX DATA ---

    def _parse_vertex(self, tokens: List[str]) -> None:
        x, y, z = self._parse_floats(tokens, 3)
        self.positions.append(Position3(x, y, z))

    def _parse_vertex_normal(self, tokens: List[str]) -> None:
        x, y, z = self._parse_floats(tokens, 3)
        self.normals.append(Position3(x, y, z))

    def _parse_vertex_texture(self, tokens: List[str]) -> None:
        u, v = self._parse_floats(tokens, 2)
        self.tex_coords.append(TexCoord2(u, v))

    def _parse_floats(self, tokens: List[str], count: int) -> List[float]:
        """Reads tokens 1..count as floats; anything after them is ignored."""
        directive = DIRECTIVE_NAMES[tokens[0]]
        if len(tokens) < count + 1:
            raise MalformedDirectiveError(self.line_number, directive)

        values = []
        for coordinate, token in zip(COORDINATE_NAMES, tokens[1:count + 1]):
            if not FLOAT_PATTERN.fullmatch(token):
                raise InvalidNumberError(self.line_number, directive, coordinate)
            values.append(float(token))
        return values

    # --- FACES ---

    def _parse_face(self, tokens: List[str]) -> None:
        if len(tokens) < FACE_VERTEX_COUNT + 1:
            raise MalformedDirectiveError(self.line_number, DIRECTIVE_NAMES["f"])

        if len(tokens) > FACE_VERTEX_COUNT + 1:
            logger.debug(f"Face on line {self.line_number} has {len(tokens) - 1} vertices, using the first 3.")
            self._truncated_faces += 1

        corners = tuple(self._parse_face_vertex(group) for group in tokens[1:FACE_VERTEX_COUNT + 1])
        self.faces.append(Face(vertices=corners))

    def _parse_face_vertex(self, group: str) -> FaceVertex:
        fields = group.split("/", 2)

        indices = []
        for i, field_name in enumerate(INDEX_FIELDS):
            token = fields[i] if i < len(fields) else ""
            if not INDEX_PATTERN.fullmatch(token):
                raise InvalidIndexError(self.line_number, field_name, token)
            indices.append(int(token))

        vertex_id, texture_id, normal_id = indices
        return FaceVertex(
            position=self._resolve(self.positions, vertex_id, "vertex"),
            tex_coord=self._resolve(self.tex_coords, texture_id, "vertex texture"),
            normal=self._resolve(self.normals, normal_id, "vertex normal"),
        )

    def _resolve(self, items: Sequence[T], index: int, kind: str) -> T:
        # OBJ indices are 1-based
        if index < 1 or index > len(items):
            raise UnresolvedReferenceError(self.line_number, index, kind)
        return items[index - 1]
