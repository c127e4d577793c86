"""Unit tests for the color history."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from aicontrol.colors import Color, ColorHistory, parse_color
from aicontrol.errors import HistoryColorNotFoundError

colors = st.builds(
    Color.from_rgb255,
    st.integers(min_value=0, max_value=255),
    st.integers(min_value=0, max_value=255),
    st.integers(min_value=0, max_value=255),
)


class TestColorHistory:
    """Tests for ColorHistory."""

    def test_starts_empty(self):
        history = ColorHistory()
        assert history.size() == 0
        assert history.snapshot() == ()
        assert history.capacity == 8

    def test_newest_first(self):
        history = ColorHistory()
        history.add(parse_color("red"))
        history.add(parse_color("blue"))
        assert [c.hex for c in history] == ["#0000FF", "#FF0000"]
        assert history.get(1).hex == "#0000FF"

    def test_re_adding_moves_to_front(self):
        history = ColorHistory()
        for name in ("red", "green", "blue"):
            history.add(parse_color(name))
        history.add(parse_color("#ff0000"))
        assert [c.hex for c in history] == ["#FF0000", "#0000FF", "#008000"]

    def test_duplicates_compare_by_hex(self):
        history = ColorHistory()
        history.add(Color.from_rgb255(0, 0, 255))
        history.add(Color.from_rgb255(0, 0, 255, 0.5))
        assert history.size() == 1
        assert history.get(1).alpha == 0.5

    def test_oldest_entry_evicted(self):
        history = ColorHistory()
        for value in range(9):
            history.add(Color.from_rgb255(value, 0, 0))
        assert history.size() == 8
        assert history.get(8).hex == "#010000"

    def test_get_out_of_range(self):
        history = ColorHistory()
        history.add(parse_color("red"))
        with pytest.raises(HistoryColorNotFoundError):
            history.get(2)
        with pytest.raises(HistoryColorNotFoundError):
            history.get(0)

    def test_clear(self):
        history = ColorHistory()
        history.add(parse_color("red"))
        history.clear()
        assert len(history) == 0

    def test_observers_receive_snapshots(self):
        history = ColorHistory()
        seen = []
        history.subscribe(seen.append)
        history.add(parse_color("red"))
        history.add(parse_color("blue"))
        history.clear()
        assert [len(s) for s in seen] == [1, 2, 0]
        assert seen[1][0].hex == "#0000FF"

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            ColorHistory(capacity=0)

    @given(st.lists(colors, max_size=40))
    def test_bounded_and_distinct(self, added: list[Color]):
        """Property test: size never exceeds 8 and hex forms stay distinct."""
        history = ColorHistory()
        for color in added:
            history.add(color)
            hexes = [c.hex for c in history]
            assert len(hexes) <= 8
            assert len(set(hexes)) == len(hexes)
            assert hexes[0] == color.hex
