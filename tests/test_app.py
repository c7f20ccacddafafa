"""Tests for the application wiring."""

import pytest

from app import LandingApp
from config import AppConfig
from simulation import MotionEngine
from typewriter import TypewriterEngine


@pytest.fixture
def config():
    return AppConfig.from_dict({
        "particles": {"count": 5, "seed": 3},
        "typing": {"start_delay": 3000, "phrases": ["A", "BB"]},
    })


def _make_app(config, scheduler, viewport, pointer, particle_surface, text_surface, toast_surface):
    return LandingApp(
        config, scheduler, viewport, pointer,
        particle_surface=particle_surface,
        headline_surface=text_surface,
        toast_surface=toast_surface,
    )


def test_components_start_and_typing_waits(config, scheduler, viewport, pointer,
                                           particle_surface, text_surface, toast_surface):
    app = _make_app(config, scheduler, viewport, pointer, particle_surface, text_surface, toast_surface)
    app.initialize_components()

    assert isinstance(app.components["motion_engine"], MotionEngine)
    assert "toast_manager" in app.components
    assert "contact_form" in app.components
    assert "typing_effect" not in app.components

    scheduler.advance(2999)
    assert text_surface.texts == []
    scheduler.advance(1)
    assert isinstance(app.components["typing_effect"], TypewriterEngine)
    assert text_surface.texts == ["A"]


def test_failing_component_does_not_block_the_rest(config, scheduler, viewport, pointer,
                                                   text_surface, toast_surface, caplog):
    class BrokenSurface:
        def add_particle(self, *args):
            raise RuntimeError("no canvas")

    app = _make_app(config, scheduler, viewport, pointer, BrokenSurface(), text_surface, toast_surface)
    app.initialize_components()

    assert "motion_engine" not in app.components
    assert "Failed to initialize component 'motion_engine'" in caplog.text
    assert "toast_manager" in app.components

    scheduler.advance(config.typing.start_delay)
    assert "typing_effect" in app.components


def test_missing_headline_surface_skips_typing(config, scheduler, viewport, pointer, particle_surface):
    app = _make_app(config, scheduler, viewport, pointer, particle_surface, None, None)
    app.initialize_components()
    scheduler.advance(config.typing.start_delay)
    assert "typing_effect" not in app.components


def test_reduced_motion_is_passed_to_both_engines(scheduler, viewport, pointer,
                                                  particle_surface, text_surface, toast_surface):
    config = AppConfig.from_dict({
        "typing": {"start_delay": 0, "phrases": ["Static"]},
        "accessibility": {"reduced_motion": True},
    })
    app = _make_app(config, scheduler, viewport, pointer, particle_surface, text_surface, toast_surface)
    app.initialize_components()
    scheduler.advance(0)

    assert not app.components["motion_engine"].active
    assert particle_surface.added == []
    assert text_surface.texts == ["Static"]
    assert scheduler.pending_frames == 0
    assert scheduler.pending_timers == 0


def test_toggle_typing_pauses_and_resumes(config, scheduler, viewport, pointer,
                                          particle_surface, text_surface, toast_surface):
    app = _make_app(config, scheduler, viewport, pointer, particle_surface, text_surface, toast_surface)
    app.initialize_components()
    scheduler.advance(config.typing.start_delay)
    typing_effect = app.components["typing_effect"]

    app.toggle_typing()
    assert typing_effect.paused
    assert toast_surface.shown[-1] == ("Headline paused.", "info")

    app.toggle_typing()
    assert not typing_effect.paused
    assert toast_surface.shown[-1] == ("Headline resumed.", "info")


def test_toggle_before_typing_starts_is_a_no_op(config, scheduler, viewport, pointer,
                                                particle_surface, text_surface, toast_surface):
    app = _make_app(config, scheduler, viewport, pointer, particle_surface, text_surface, toast_surface)
    app.initialize_components()
    app.toggle_typing()
    assert toast_surface.shown == []


def test_destroy_stops_every_chain(config, scheduler, viewport, pointer,
                                   particle_surface, text_surface, toast_surface):
    app = _make_app(config, scheduler, viewport, pointer, particle_surface, text_surface, toast_surface)
    app.initialize_components()
    scheduler.advance(config.typing.start_delay)
    app.components["toast_manager"].show("Hello")

    app.destroy()

    assert particle_surface.clear_calls == 1
    assert scheduler.pending_frames == 0
    assert scheduler.pending_timers == 0
    assert toast_surface.message is None


def test_destroy_before_typing_starts_cancels_it(config, scheduler, viewport, pointer,
                                                 particle_surface, text_surface, toast_surface):
    app = _make_app(config, scheduler, viewport, pointer, particle_surface, text_surface, toast_surface)
    app.initialize_components()
    app.destroy()
    scheduler.advance(config.typing.start_delay * 2)
    assert text_surface.texts == []
