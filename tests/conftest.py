from __future__ import annotations

import logging

import pytest

TRIANGLE_OBJ = """\
v 0 0 0
v 1 0 0
v 0 1 0
vt 0 0
vt 1 0
vt 0 1
vn 0 0 1
vn 0 0 1
vn 0 0 1
f 1/1/1 2/2/2 3/3/3
"""


@pytest.fixture
def triangle_obj() -> str:
    return TRIANGLE_OBJ


@pytest.fixture
def write_obj(tmp_path):
    """Writes OBJ text to a temporary file and returns its path."""
    def _write(text: str, name: str = "mesh.obj"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def reset_objmesh_logger():
    logger = logging.getLogger("objmesh")
    level = logger.level
    handlers = list(logger.handlers)
    yield
    logger.setLevel(level)
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
