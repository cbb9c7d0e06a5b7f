import pytest

from vdscene.labels import (
    DuplicateLabelError,
    LabelTable,
    LabelTableFullError,
    label_hash,
)


def test_insert_then_get_returns_coordinate():
    table = LabelTable()
    table.insert('A', (10, 20))
    table.insert('B', (30, 40))

    assert table.get('A') == (10, 20)
    assert table.get('B') == (30, 40)
    assert len(table) == 2
    assert 'A' in table


def test_get_missing_label_returns_none():
    table = LabelTable()
    table.insert('A', (1, 2))

    assert table.get('Z') is None
    assert 'Z' not in table


def test_labels_are_case_sensitive():
    table = LabelTable()
    table.insert('a', (1, 1))
    table.insert('A', (2, 2))

    assert table.get('a') == (1, 1)
    assert table.get('A') == (2, 2)


def test_duplicate_insert_is_rejected_and_keeps_first():
    table = LabelTable()
    table.insert('A', (1, 2))
    with pytest.raises(DuplicateLabelError) as excinfo:
        table.insert('A', (3, 4))

    assert excinfo.value.label == 'A'
    assert isinstance(excinfo.value, KeyError)
    assert table.get('A') == (1, 2)
    assert len(table) == 1


def test_duplicate_insert_is_rejected_when_growth_is_due():
    table = LabelTable(capacity=2)
    table.insert('A', (1, 2))
    with pytest.raises(DuplicateLabelError):
        table.insert('A', (3, 4))
    assert table.get('A') == (1, 2)


def test_growable_table_grows_and_keeps_entries():
    table = LabelTable(capacity=2)
    labels = [f'P{i}' for i in range(100)]
    for i, label in enumerate(labels):
        table.insert(label, (i, -i))

    assert len(table) == 100
    assert table.capacity >= 200
    for i, label in enumerate(labels):
        assert table.get(label) == (i, -i)
    assert sorted(table) == sorted(labels)


def test_fixed_table_raises_when_full():
    table = LabelTable(capacity=3, growable=False)
    table.insert('A', (0, 0))
    table.insert('B', (0, 1))
    table.insert('C', (0, 2))

    with pytest.raises(LabelTableFullError) as excinfo:
        table.insert('D', (0, 3))

    assert excinfo.value.capacity == 3
    assert table.capacity == 3
    assert table.get('D') is None
    assert {label: table.get(label) for label in 'ABC'} == {'A': (0, 0), 'B': (0, 1), 'C': (0, 2)}


def test_lookup_on_full_table_terminates():
    table = LabelTable(capacity=4, growable=False)
    for i, label in enumerate('WXYZ'):
        table.insert(label, (i, i))

    assert table.get('missing') is None


def test_colliding_labels_probe_to_distinct_slots():
    capacity = 8
    base = label_hash('A') % capacity
    colliders = [label for label in (chr(c) for c in range(33, 127)) if label_hash(label) % capacity == base]
    assert len(colliders) >= 3

    table = LabelTable(capacity=capacity, growable=False)
    for i, label in enumerate(colliders[:3]):
        table.insert(label, (i, i))

    for i, label in enumerate(colliders[:3]):
        assert table.get(label) == (i, i)


def test_label_hash_is_polynomial_and_deterministic():
    assert label_hash('') == 0
    assert label_hash('A') == 65
    assert label_hash('AB') == 65 * 31 + 66
    assert label_hash('label') == label_hash('label')


@pytest.mark.parametrize('capacity', [0, -1])
def test_invalid_capacity_is_rejected(capacity):
    with pytest.raises(ValueError):
        LabelTable(capacity=capacity)


def test_empty_label_is_rejected():
    with pytest.raises(ValueError):
        LabelTable().insert('', (0, 0))


def test_items_lists_stored_pairs():
    table = LabelTable()
    table.insert('A', (1, 2))
    table.insert('B', (3, 4))

    assert dict(table.items()) == {'A': (1, 2), 'B': (3, 4)}


@pytest.mark.parametrize('coord', [(1.5, 2), (1, 2.0), (True, 0), ('1', 2)])
def test_non_integer_coordinates_are_rejected(coord):
    table = LabelTable()
    with pytest.raises(TypeError):
        table.insert('A', coord)

    assert table.get('A') is None
    assert len(table) == 0
