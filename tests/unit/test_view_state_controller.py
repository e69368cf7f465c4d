"""Tests for ViewStateController."""

import pytest

from word_lookup.config import WordLookupConfig
from word_lookup.models import LookupEntry, Panel, ViewState
from word_lookup.orchestration import ViewStateController
from word_lookup.services.entry_renderer import DEFAULT_ENTRY


@pytest.fixture
def controller(recording_view):
    return ViewStateController(recording_view)


class TestTransitions:
    """Tests for panel transitions."""

    def test_show_loading(self, controller, recording_view):
        controller.show_loading()

        assert controller.state is ViewState.LOADING
        assert recording_view.visible == {Panel.LOADING}

    def test_show_error(self, controller, recording_view):
        controller.show_error()

        assert controller.state is ViewState.ERROR
        assert recording_view.visible == {Panel.ERROR}
        assert controller.rendered_entry is None

    def test_show_default(self, controller, recording_view):
        controller.show_default()

        assert controller.state is ViewState.DEFAULT
        assert recording_view.visible == {Panel.RESULT}
        assert recording_view.last_entry is DEFAULT_ENTRY

    def test_render(self, controller, recording_view, hello_entry):
        rendered = controller.render(hello_entry)

        assert controller.state is ViewState.RESULT
        assert recording_view.visible == {Panel.RESULT}
        assert recording_view.last_entry == rendered
        assert controller.rendered_entry == rendered

    def test_exactly_one_panel_after_every_transition(self, controller, recording_view, hello_entry):
        steps = [
            controller.show_default,
            controller.show_loading,
            lambda: controller.render(hello_entry),
            controller.show_loading,
            controller.show_error,
            controller.show_default,
            controller.show_error,
            lambda: controller.render(hello_entry),
        ]
        for step in steps:
            step()
            assert len(recording_view.visible) == 1
            assert recording_view.panel_history[-1] is controller.state.panel

    def test_entry_displayed_before_panel_switch(self, controller, recording_view, hello_entry):
        controller.show_loading()
        controller.render(hello_entry)

        # One display per render, and the switch happens on the same call
        assert len(recording_view.entries) == 1
        assert recording_view.panel_history == [Panel.LOADING, Panel.RESULT]


class TestAudioSelection:
    """Tests for current_audio_url."""

    def test_audio_available_after_render(self, controller, hello_entry):
        controller.render(hello_entry)
        assert controller.current_audio_url == hello_entry.phonetics[0].audio

    def test_no_audio_in_default_state(self, controller):
        controller.show_default()
        assert controller.current_audio_url is None

    @pytest.mark.parametrize("method", ["show_loading", "show_error", "show_default"])
    def test_audio_cleared_when_leaving_result(self, controller, hello_entry, method):
        controller.render(hello_entry)
        getattr(controller, method)()
        assert controller.current_audio_url is None

    def test_entry_without_audio(self, controller, make_api_entry):
        entry = LookupEntry.from_dict(make_api_entry(phonetics=[{"text": "/t/", "audio": "  "}]))
        rendered = controller.render(entry)

        assert rendered.has_audio is False
        assert controller.current_audio_url is None


class TestConfiguredLimits:
    """Tests that rendering limits come from configuration."""

    def test_uses_config_limits(self, recording_view, make_api_entry):
        controller = ViewStateController(
            recording_view, WordLookupConfig(max_definitions=1, max_synonyms=2)
        )
        entry = LookupEntry.from_dict(
            make_api_entry(
                meanings=[
                    {
                        "partOfSpeech": "noun",
                        "definitions": [{"definition": "a"}, {"definition": "b"}],
                        "synonyms": ["x", "y", "z"],
                    }
                ]
            )
        )
        meaning = controller.render(entry).meanings[0]

        assert [d.text for d in meaning.definitions] == ["a"]
        assert meaning.synonyms == ["x", "y"]

    def test_render_is_idempotent(self, controller, recording_view, hello_entry):
        first = controller.render(hello_entry)
        second = controller.render(hello_entry)

        assert first == second
        assert controller.state is ViewState.RESULT
