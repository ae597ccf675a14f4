"""
Input Manager (OBJ)
Handles opening OBJ files and streams and feeding their lines to the parser.
"""
from __future__ import annotations

import logging
import os
from typing import Iterator, List, Optional, TextIO, Union

from objmesh.config import DEFAULT_ENCODING
from objmesh.model.errors import ObjError, ObjReadError
from objmesh.model.geometry_primitives import Face
from objmesh.model.parser import ObjParser

# Get module logger
logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class IOManager:

    @staticmethod
    def load_faces(filepath: PathLike, encoding: str = DEFAULT_ENCODING) -> List[Face]:
        """
        Opens an OBJ file and parses it into faces.

        Raises:
            ObjReadError: If the file cannot be opened or read.
            ObjFormatError: On the first malformed directive.
        """
        source = os.fspath(filepath)
        logger.info(f"Loading OBJ file: {source}")
        try:
            f = open(source, "r", encoding=encoding)
        except OSError as e:
            msg = f"Could not open OBJ file '{source}': {e}"
            logger.error(msg)
            raise ObjReadError(source, e.strerror or str(e)) from e

        with f:
            return IOManager.load_faces_from_stream(f, source=source)

    @staticmethod
    def load_faces_from_stream(stream: TextIO, source: Optional[str] = None) -> List[Face]:
        """
        Parses an already opened text stream. The stream is not closed.
        """
        if source is None:
            source = str(getattr(stream, "name", "<stream>"))

        parser = ObjParser()
        try:
            faces = parser.parse(IOManager._iter_lines(stream, source))
        except ObjError as e:
            logger.error(f"Failed to load OBJ source '{source}': {e}")
            raise e

        logger.info(f"Loaded {len(faces)} faces from: {source}")
        return faces

    @staticmethod
    def _iter_lines(stream: TextIO, source: str) -> Iterator[str]:
        """Yields lines lazily, turning read and decode failures into ObjReadError."""
        line_number = 0
        try:
            for line in stream:
                line_number += 1
                yield line
        except (OSError, UnicodeDecodeError) as e:
            raise ObjReadError(source, str(e), line_number + 1) from e
