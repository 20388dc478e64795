import pytest

from factorio_printer.schema import Blueprint, BlueprintBook, digit_signal, icons_for_number


def _signal_names(icons):
    return [icon.signal.name for icon in icons]


def test_icons_for_number_encodes_digits_most_significant_first() -> None:
    icons = icons_for_number(1234)

    assert [icon.index for icon in icons] == [1, 2, 3, 4]
    assert _signal_names(icons) == ["signal-1", "signal-2", "signal-3", "signal-4"]
    assert all(icon.signal.type == "virtual" for icon in icons)


def test_icons_for_number_pads_with_zero_digits() -> None:
    assert _signal_names(icons_for_number(0)) == ["signal-0"] * 4
    assert _signal_names(icons_for_number(7)) == ["signal-0", "signal-0", "signal-0", "signal-7"]
    assert _signal_names(icons_for_number(9999)) == ["signal-9"] * 4


@pytest.mark.parametrize("value", [-1, 10000])
def test_icons_for_number_rejects_out_of_range(value: int) -> None:
    with pytest.raises(ValueError):
        icons_for_number(value)


def test_digit_signal_rejects_non_digits() -> None:
    with pytest.raises(ValueError):
        digit_signal(10)


def test_entities_are_numbered_in_insertion_order() -> None:
    bp = Blueprint(label="test print")
    bp.add_entity("stone-wall", 0, 0)
    bp.add_tile("concrete", 1, 0)
    bp.add_entity("wooden-chest", 2, 0)
    bp.add_entity("stone-wall", 3, 0)

    assert [entity.entity_number for entity in bp.entities] == [1, 2, 3]
    assert [entity.name for entity in bp.entities] == ["stone-wall", "wooden-chest", "stone-wall"]
    assert bp.entity_counter == 4
    assert len(bp.tiles) == 1


def test_blueprint_dict_shape() -> None:
    bp = Blueprint(label="test print")
    bp.add_entity("stone-wall", 3, 4)
    bp.add_tile("concrete", 1, 2)
    bp.set_icons(12)

    data = bp.to_dict()

    assert list(data) == ["blueprint"]
    inner = data["blueprint"]
    assert inner["item"] == "blueprint"
    assert inner["label"] == "test print"
    assert inner["entities"] == [
        {"entity_number": 1, "name": "stone-wall", "position": {"x": 3, "y": 4}}
    ]
    assert inner["tiles"] == [{"name": "concrete", "position": {"x": 1, "y": 2}}]
    assert inner["icons"][3] == {"index": 4, "signal": {"name": "signal-2", "type": "virtual"}}
    assert "entity_counter" not in inner


def test_book_dict_shape() -> None:
    book = BlueprintBook(label="book")
    book.add_blueprint(Blueprint(label="a"))
    book.add_blueprint(Blueprint(label="b"))

    data = book.to_dict()["blueprint_book"]

    assert data["item"] == "blueprint-book"
    assert data["label"] == "book"
    assert data["active_index"] == 0
    assert data["version"] == 0
    assert [entry["index"] for entry in data["blueprints"]] == [0, 1]
    assert [entry["blueprint"]["label"] for entry in data["blueprints"]] == ["a", "b"]
