"""Unit tests for the command dispatcher and color-selection pipeline."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from aicontrol.colors import parse_color
from aicontrol.commands import (
    SOURCE_MANUAL,
    SOURCE_PRESET,
    CommandEnvelope,
    CommandKind,
    DispatchStatus,
)
from aicontrol.conversation import ConversationView, Sender, StatusLevel
from aicontrol.errors import UnknownCommandError
from aicontrol.widgets import style_value


def envelope(command, target="", /, description="", **params):
    return CommandEnvelope(command=command, target=target, params=params, description=description)


class TestCommandKind:
    """Tests for the command taxonomy."""

    def test_nine_kinds(self):
        assert len(CommandKind) == 9

    def test_names_match_case_insensitively(self):
        assert CommandKind.from_name("HIDECOMPONENT") is CommandKind.HIDE_COMPONENT
        assert CommandKind.from_name(" setColorPicker ") is CommandKind.SET_COLOR_PICKER

    def test_unknown_kind(self):
        with pytest.raises(UnknownCommandError):
            CommandKind.from_name("executeAction")


class TestCommandEnvelope:
    def test_nulls_become_defaults(self):
        env = CommandEnvelope.model_validate(
            {"command": "showColorHistory", "target": None, "params": None, "description": None}
        )
        assert env.target == ""
        assert env.params == {}
        assert env.description == ""


class TestDispatch:
    """Tests for CommandDispatcher.dispatch."""

    def test_description_precedes_notice(self, dispatcher, view, surfaces):
        status = dispatcher.dispatch(envelope("hideComponent", "btn1", "Hiding btn1"))
        assert status is DispatchStatus.SUCCESS
        assert surfaces["btn1"].visible is False
        assert view.messages[0].sender is Sender.AI
        assert view.texts() == ["Hiding btn1", "✅ hidden: btn1"]
        assert view.status.text == "command succeeded"
        assert view.status.level is StatusLevel.GREEN

    def test_empty_description_is_not_shown(self, dispatcher, view):
        dispatcher.dispatch(envelope("showComponent", "btn1"))
        assert view.texts() == ["✅ shown: btn1"]

    def test_show_is_idempotent(self, dispatcher, view, surfaces):
        first = dispatcher.dispatch(envelope("showComponent", "btn2"))
        second = dispatcher.dispatch(envelope("showComponent", "btn2"))
        assert first is second is DispatchStatus.SUCCESS
        assert surfaces["btn2"].visible is True

    def test_hide_is_idempotent(self, dispatcher, surfaces):
        dispatcher.dispatch(envelope("hideComponent", "btn2"))
        dispatcher.dispatch(envelope("hideComponent", "btn2"))
        assert surfaces["btn2"].visible is False

    @given(st.text(min_size=1, max_size=20))
    def test_unknown_kind_produces_one_error(self, command):
        """Property test: unknown kinds yield exactly one error and no mutation."""
        from conftest import make_default_surfaces

        from aicontrol.colors import ColorHistory
        from aicontrol.commands import ColorSelectionPipeline, CommandDispatcher
        from aicontrol.widgets import WidgetMutator, WidgetRegistry

        known = {kind.value.lower() for kind in CommandKind}
        if command.strip().lower() in known:
            return

        surfaces = make_default_surfaces()
        registry = WidgetRegistry()
        for widget_id, surface in surfaces.items():
            registry.register(widget_id, surface)
        before = {k: (s.visible, s.text, s.style) for k, s in surfaces.items()}
        view = ConversationView()
        history = ColorHistory()
        mutator = WidgetMutator(registry)
        dispatcher = CommandDispatcher(
            mutator, history, view, ColorSelectionPipeline(registry, mutator, history, view)
        )

        status = dispatcher.dispatch(
            envelope(command, "btn1", color="red", text="x", style="padding: 1;")
        )

        assert status is DispatchStatus.FAILED
        errors = [t for t in view.texts() if t.startswith("❌")]
        assert len(errors) == 1
        assert "unrecognized command kind" in errors[0]
        assert {k: (s.visible, s.text, s.style) for k, s in surfaces.items()} == before
        assert view.status.level is StatusLevel.ORANGE

    def test_execute_action_is_unknown(self, dispatcher, view):
        status = dispatcher.dispatch(envelope("executeAction", "btn1"))
        assert status is DispatchStatus.FAILED
        assert view.status.text == "execution failed"

    def test_missing_widget(self, dispatcher, view):
        status = dispatcher.dispatch(envelope("hideComponent", "btn9"))
        assert status is DispatchStatus.FAILED
        assert view.texts()[-1] == "❌ component not found: btn9"

    def test_missing_param(self, dispatcher, view):
        status = dispatcher.dispatch(envelope("changeText", "btn1"))
        assert status is DispatchStatus.FAILED
        assert view.texts()[-1] == "❌ command changeText requires params.text"

    def test_capability_mismatch(self, dispatcher, view):
        status = dispatcher.dispatch(envelope("changeText", "controlPanel", text="hi"))
        assert status is DispatchStatus.FAILED
        assert view.texts()[-1].startswith("❌ component controlPanel does not support")

    def test_bad_color(self, dispatcher, view, history):
        status = dispatcher.dispatch(envelope("changeColor", "btn1", color="mauvish"))
        assert status is DispatchStatus.FAILED
        assert view.texts()[-1] == "❌ cannot recognize color: mauvish"
        assert history.size() == 0

    def test_unexpected_exception_is_an_execution_error(self, dispatcher, view, surfaces):
        def explode(text):
            raise RuntimeError("toolkit exploded")

        surfaces["btn1"].set_text = explode
        status = dispatcher.dispatch(envelope("changeText", "btn1", text="hi"))
        assert status is DispatchStatus.ERROR
        assert view.texts()[-1] == "❌ execution error: toolkit exploded"
        assert view.status.level is StatusLevel.RED

    def test_change_text(self, dispatcher, surfaces):
        dispatcher.dispatch(envelope("changeText", "sampleText", text=42))
        assert surfaces["sampleText"].text == "42"

    def test_change_color_records_history(self, dispatcher, view, history, surfaces):
        dispatcher.dispatch(envelope("changeColor", "btn2", color="#FF0000"))
        assert style_value(surfaces["btn2"].style, "background-color") == "#FF0000"
        assert style_value(surfaces["btn2"].style, "text-fill") == "white"
        assert history.get(1).hex == "#FF0000"
        assert view.texts()[-1] == "✅ color changed: btn2 → #FF0000"

    def test_set_style(self, dispatcher, surfaces):
        dispatcher.dispatch(envelope("setStyle", "controlPanel", style="padding: 2;"))
        assert surfaces["controlPanel"].style == "padding: 2;"

    def test_set_color_picker_runs_selection_pipeline(self, dispatcher, view, history, surfaces):
        status = dispatcher.dispatch(envelope("setColorPicker", "colorPicker", color="blue"))
        assert status is DispatchStatus.SUCCESS
        assert surfaces["colorPicker"].picker_value.hex == "#0000FF"
        assert history.get(1).hex == "#0000FF"
        assert style_value(surfaces["btn1"].style, "background-color") == "#0000FF"
        assert style_value(surfaces["btn1"].style, "text-fill") == "white"
        assert style_value(surfaces["titleLabel"].style, "text-fill") == "#0000FF"
        assert "AI command selected color: 蓝色 (#0000FF)" in view.texts()

    def test_show_empty_history(self, dispatcher, view):
        status = dispatcher.dispatch(envelope("showColorHistory"))
        assert status is DispatchStatus.SUCCESS
        assert "📭 color history is empty" in view.texts()
        assert view.status.level is StatusLevel.GREEN

    def test_show_history_lists_entries(self, dispatcher, view, history):
        history.add(parse_color("red"))
        history.add(parse_color("#123456"))
        dispatcher.dispatch(envelope("showColorHistory"))
        assert view.texts()[-3:] == [
            "🎨 recently used colors:",
            "  1. #123456 (#123456)",
            "  2. 红色 (#FF0000)",
        ]

    def test_clear_history(self, dispatcher, view, history):
        history.add(parse_color("red"))
        dispatcher.dispatch(envelope("clearColorHistory", description="cleared"))
        assert history.size() == 0
        assert view.texts() == ["cleared", "✅ color history cleared"]

    def test_apply_history_color(self, dispatcher, history, surfaces, view):
        history.add(parse_color("blue"))
        history.add(parse_color("red"))
        status = dispatcher.dispatch(
            envelope("applyHistoryColor", "btn2", index=1, target="btn2")
        )
        assert status is DispatchStatus.SUCCESS
        assert style_value(surfaces["btn2"].style, "background-color") == "#FF0000"
        assert style_value(surfaces["btn2"].style, "text-fill") == "white"
        assert view.texts()[-1] == "✅ applied history color 1 to btn2 (Button 2) (红色)"

    @pytest.mark.parametrize("index", ["2", "二", 2.0])
    def test_apply_history_color_index_forms(self, dispatcher, history, surfaces, index):
        history.add(parse_color("blue"))
        history.add(parse_color("red"))
        dispatcher.dispatch(envelope("applyHistoryColor", "btn1", index=index))
        assert style_value(surfaces["btn1"].style, "background-color") == "#0000FF"

    def test_apply_after_clear_is_not_found(self, dispatcher, history, view):
        history.add(parse_color("red"))
        dispatcher.dispatch(envelope("clearColorHistory"))
        status = dispatcher.dispatch(envelope("applyHistoryColor", "btn2", index=1))
        assert status is DispatchStatus.FAILED
        assert view.texts()[-1] == (
            "❌ history color 1 does not exist, only 0 history colors available"
        )

    def test_apply_history_color_requires_index(self, dispatcher, view):
        status = dispatcher.dispatch(envelope("applyHistoryColor", "btn2"))
        assert status is DispatchStatus.FAILED
        assert view.texts()[-1] == "❌ command applyHistoryColor requires params.index"

    def test_change_color_accepts_history_reference(self, dispatcher, history, surfaces):
        history.add(parse_color("green"))
        dispatcher.dispatch(envelope("changeColor", "controlPanel", color="历史颜色1"))
        assert style_value(surfaces["controlPanel"].style, "background-color") == "#008000"


class TestColorSelectionPipeline:
    """Tests for the shared selection side effects."""

    def test_manual_pick(self, pipeline, view, history, surfaces):
        pipeline.select(parse_color("yellow"), SOURCE_MANUAL)
        assert history.get(1).hex == "#FFFF00"
        assert view.texts() == ["manual pick selected color: 黄色 (#FFFF00)"]
        assert style_value(surfaces["btn1"].style, "text-fill") == "black"
        assert style_value(surfaces["titleLabel"].style, "text-fill") == "#FFFF00"

    def test_missing_auto_apply_targets_are_skipped(self, view, history):
        from aicontrol.commands import ColorSelectionPipeline
        from aicontrol.widgets import WidgetMutator, WidgetRegistry

        registry = WidgetRegistry()
        pipeline = ColorSelectionPipeline(registry, WidgetMutator(registry), history, view)
        pipeline.select(parse_color("red"), SOURCE_PRESET)
        assert history.size() == 1
        assert view.texts() == ["preset button selected color: 红色 (#FF0000)"]
