"""Tests for keyword-triggered layout mutation."""

from __future__ import annotations

import pytest

from dorry.layout.mutator import match_room_type, mutate, wants_enlargement
from dorry.models.design import DesignData, Dimensions, Position, Room
from dorry.models.enums import RoomType

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _room(room_id: str, room_type: RoomType, area: float) -> Room:
    return Room(
        id=room_id,
        name=room_type.replace("_", " ").title(),
        type=room_type,
        area=area,
        width=10.0,
        height=5.0,
        position=Position(x=10.0, y=10.0),
    )


def _make_layout() -> DesignData:
    return DesignData(
        rooms=(
            _room("1", RoomType.LIVING_ROOM, 187.5),
            _room("2", RoomType.KITCHEN, 75.0),
            _room("3", RoomType.BEDROOM, 112.5),
            _room("4", RoomType.BATHROOM, 37.5),
        ),
        total_area=450.0,
        dimensions=Dimensions(width=21.2, height=31.8),
    )


# ---------------------------------------------------------------------------
# Intent detection
# ---------------------------------------------------------------------------


class TestIntent:
    @pytest.mark.parametrize(
        "text",
        ["Make it LARGER", "a bigger one please", "biggerkitchen"],
    )
    def test_enlargement_keywords(self, text: str) -> None:
        assert wants_enlargement(text)

    def test_other_verbs_are_ignored(self) -> None:
        assert not wants_enlargement("make the kitchen smaller")
        assert not wants_enlargement("expand the kitchen")

    def test_first_room_phrase_in_priority_order(self) -> None:
        # "living room" is checked before "bedroom".
        assert match_room_type("swap the bedroom and living room") == RoomType.LIVING_ROOM
        assert match_room_type("kitchen near the bathroom") == RoomType.KITCHEN

    def test_no_room_phrase(self) -> None:
        assert match_room_type("make the garage bigger") is None


# ---------------------------------------------------------------------------
# Mutation
# ---------------------------------------------------------------------------


class TestMutate:
    def test_enlarges_kitchen_only(self) -> None:
        layout = _make_layout()
        result = mutate(layout, "Make the kitchen bigger")

        assert result.changed
        assert result.change_summary is not None
        assert result.change_summary.room_modified == RoomType.KITCHEN
        assert result.change_summary.size_increase is True

        kitchen = result.updated.rooms[1]
        assert kitchen.area == pytest.approx(90.0)
        assert kitchen.width == pytest.approx(11.0)
        assert kitchen.height == pytest.approx(5.5)
        assert result.updated.total_area == pytest.approx(465.0)

        for before, after in zip(layout.rooms, result.updated.rooms, strict=True):
            if after.type != RoomType.KITCHEN:
                assert before == after

    def test_input_is_not_modified(self) -> None:
        layout = _make_layout()
        snapshot = layout.model_dump()
        mutate(layout, "bigger kitchen")
        assert layout.model_dump() == snapshot

    def test_positions_and_dimensions_unchanged(self) -> None:
        layout = _make_layout()
        result = mutate(layout, "larger bedroom")
        assert result.updated.dimensions == layout.dimensions
        assert [r.position for r in result.updated.rooms] == [
            r.position for r in layout.rooms
        ]

    def test_noop_without_enlargement_keyword(self) -> None:
        layout = _make_layout()
        result = mutate(layout, "what about the kitchen?")
        assert not result.changed
        assert result.updated is layout

    def test_noop_without_room_phrase(self) -> None:
        layout = _make_layout()
        result = mutate(layout, "make everything bigger")
        assert not result.changed
        assert result.updated is layout

    def test_noop_when_room_type_absent(self) -> None:
        layout = DesignData(
            rooms=(_room("1", RoomType.LIVING_ROOM, 100.0),),
            total_area=200.0,
            dimensions=Dimensions(width=10.0, height=15.0),
        )
        result = mutate(layout, "bigger kitchen")
        assert not result.changed
        assert result.updated is layout

    def test_repeated_requests_compound(self) -> None:
        layout = _make_layout()
        first = mutate(layout, "make the kitchen bigger").updated
        second = mutate(first, "make the kitchen bigger").updated

        assert second.rooms[1].area == pytest.approx(75.0 * 1.44)
        assert second.total_area == pytest.approx(450.0 + 15.0 + 18.0)

    def test_total_grows_by_first_match_only(self) -> None:
        layout = DesignData(
            rooms=(
                _room("1", RoomType.BEDROOM, 100.0),
                _room("2", RoomType.BEDROOM, 50.0),
            ),
            total_area=300.0,
            dimensions=Dimensions(width=10.0, height=15.0),
        )
        result = mutate(layout, "bigger bedroom")

        assert [r.area for r in result.updated.rooms] == pytest.approx([120.0, 60.0])
        assert result.updated.total_area == pytest.approx(320.0)
