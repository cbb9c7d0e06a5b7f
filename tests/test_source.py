import pytest

from vdscene import SourceUnavailable, load_source, parse_file
from vdscene.ast import PointDecl


def test_parse_file_reads_utf8(tmp_path):
    path = tmp_path / "scene.vd"
    path.write_text("point(1,2,Ä)\nline(Ä,Ä)\n", encoding="utf-8")

    scene, diagnostics = parse_file(path)

    assert scene.points == (PointDecl(1, 2, 'Ä'),)
    assert len(scene.lines) == 1
    assert diagnostics == []


def test_parse_file_passes_capacity(tmp_path):
    path = tmp_path / "scene.vd"
    path.write_text("point(1,2,A)\npoint(3,4,B)\n", encoding="utf-8")

    scene, diagnostics = parse_file(path, max_elements=1)

    assert len(scene.points) == 1
    assert len(diagnostics) == 1


def test_missing_file_is_source_unavailable(tmp_path):
    missing = tmp_path / "nope.vd"

    with pytest.raises(SourceUnavailable) as excinfo:
        load_source(missing)

    assert excinfo.value.source == str(missing)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_undecodable_file_is_source_unavailable(tmp_path):
    path = tmp_path / "binary.vd"
    path.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(SourceUnavailable):
        load_source(path)
