from __future__ import annotations

import io
import logging

import pytest

from objmesh.model.errors import InvalidNumberError, ObjError, ObjFormatError, ObjReadError
from objmesh.model.io import IOManager


def test_missing_file_raises_read_error(tmp_path):
    missing = tmp_path / "nope.obj"
    with pytest.raises(ObjReadError) as exc_info:
        IOManager.load_faces(missing)

    err = exc_info.value
    assert isinstance(err, OSError)
    assert isinstance(err, ObjError)
    assert not isinstance(err, ObjFormatError)
    assert err.source == str(missing)
    assert err.line_number is None


def test_directory_raises_read_error(tmp_path):
    with pytest.raises(ObjReadError):
        IOManager.load_faces(tmp_path)


def test_undecodable_bytes_raise_read_error(tmp_path):
    path = tmp_path / "latin1.obj"
    path.write_bytes(b"v 0 0 0\n# caf\xe9\n")
    with pytest.raises(ObjReadError) as exc_info:
        IOManager.load_faces(path)
    assert exc_info.value.line_number is not None


def test_read_failure_mid_stream():
    class FailingStream:
        name = "broken.obj"

        def __iter__(self):
            yield "v 0 0 0\n"
            raise OSError("device went away")

    with pytest.raises(ObjReadError, match="broken.obj' near line 2: device went away"):
        IOManager.load_faces_from_stream(FailingStream())


def test_crlf_file(write_obj, triangle_obj):
    path = write_obj(triangle_obj.replace("\n", "\r\n"))
    faces = IOManager.load_faces(path)
    assert len(faces) == 1


def test_stream_source_name_defaults():
    with pytest.raises(InvalidNumberError) as exc_info:
        IOManager.load_faces_from_stream(io.StringIO("v 1 2 q\n"))
    assert exc_info.value.line_number == 1


def test_load_is_logged(write_obj, triangle_obj, caplog):
    path = write_obj(triangle_obj)
    with caplog.at_level(logging.INFO, logger="objmesh"):
        IOManager.load_faces(path)
    assert f"Loading OBJ file: {path}" in caplog.text
    assert f"Loaded 1 faces from: {path}" in caplog.text


def test_format_error_is_logged(write_obj, caplog):
    path = write_obj("v 1 2\n")
    with caplog.at_level(logging.ERROR, logger="objmesh"):
        with pytest.raises(ObjFormatError):
            IOManager.load_faces(path)
    assert "insufficient points found in vertex directive on line 1" in caplog.text
