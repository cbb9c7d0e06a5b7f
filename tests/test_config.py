import pytest

from vdscene import parse_scene
from vdscene.config import (
    DEFAULT_MAX_ELEMENTS,
    ParseOptions,
    get_default_parse_options,
    set_default_parse_options,
)


@pytest.fixture
def restore_defaults():
    saved = get_default_parse_options()
    yield
    set_default_parse_options(saved)


def test_default_options():
    options = ParseOptions()

    assert options.max_elements == DEFAULT_MAX_ELEMENTS == 500
    assert options.dialect == 'bare'


@pytest.mark.parametrize(
    'kwargs',
    [
        {'max_elements': -1},
        {'dialect': 'auto'},
        {'max_input_chars': -5},
    ],
)
def test_invalid_options_are_rejected(kwargs):
    with pytest.raises(ValueError):
        ParseOptions(**kwargs)


def test_default_options_are_copied(restore_defaults):
    options = get_default_parse_options()
    options.max_elements = 1

    assert get_default_parse_options().max_elements == DEFAULT_MAX_ELEMENTS


def test_set_default_options_changes_parse_behaviour(restore_defaults):
    set_default_parse_options(ParseOptions(max_elements=1))

    scene, diagnostics = parse_scene("point(1,1,A)\npoint(2,2,B)\n")

    assert len(scene.points) == 1
    assert len(diagnostics) == 1


def test_explicit_capacity_overrides_options():
    scene, _ = parse_scene("point(1,1,A)\npoint(2,2,B)\n", max_elements=5, options=ParseOptions(max_elements=1))

    assert len(scene.points) == 2
