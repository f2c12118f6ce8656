"""Tests for the debounced processing controller."""

import numpy as np
import pytest
from PySide6.QtTest import QTest

from models import ExportFormat, PixelBuffer, SketchMode, SketchSettings
from gui import worker as worker_module
from gui.controller import SketchController
from utils.test_images import generate_portrait_disc, generate_uniform


@pytest.fixture
def controller(qt_app):
    ctrl = SketchController(debounce_ms=30)
    ctrl.results = []
    ctrl.errors = []
    ctrl.result_ready.connect(ctrl.results.append)
    ctrl.error.connect(ctrl.errors.append)
    yield ctrl
    ctrl.reset()


def test_no_run_without_source(controller):
    controller.update_settings(contrast=70)
    assert not controller.has_pending
    controller.flush()
    assert controller.results == []


def test_load_schedules_one_run(controller):
    controller.load_source(generate_portrait_disc(32))
    assert controller.has_pending
    assert controller.results == []
    controller.flush()
    assert len(controller.results) == 1
    assert controller.result.processed.width == 32
    assert not controller.is_processing


def test_rapid_changes_coalesce_to_latest(controller):
    controller.load_source(generate_portrait_disc(32))
    for value in (10, 20, 30, 40):
        controller.update_settings(contrast=value)
    controller.update_settings(mode=SketchMode.INK)
    QTest.qWait(200)
    assert len(controller.results) == 1
    final = controller.results[0].settings
    assert final.mode is SketchMode.INK
    assert final.contrast == 40


def test_each_quiet_period_runs_once(controller):
    controller.load_source(generate_uniform(8, 8))
    QTest.qWait(150)
    controller.update_settings(brightness=60)
    QTest.qWait(150)
    assert len(controller.results) == 2


def test_timer_during_run_is_deferred(controller):
    controller.load_source(generate_uniform(8, 8))
    controller._is_processing = True
    controller._on_timeout()
    assert controller.has_pending
    assert controller.results == []
    controller._is_processing = False
    controller.flush()
    assert len(controller.results) == 1


def test_source_capped(qt_app):
    ctrl = SketchController(max_dimension=40)
    ctrl.load_source(PixelBuffer.from_array(generate_uniform(100, 50)))
    assert (ctrl.source.width, ctrl.source.height) == (40, 20)
    ctrl.reset()


def test_processing_signals(controller):
    states = []
    controller.processing_changed.connect(states.append)
    controller.load_source(generate_uniform(6, 6))
    controller.flush()
    assert states == [True, False]


def test_error_reported_then_retry(controller, monkeypatch):
    calls = []

    def failing(source, settings):
        calls.append(settings)
        raise MemoryError("out of memory")

    monkeypatch.setattr(worker_module, "process_sketch", failing)
    controller.load_source(generate_uniform(6, 6))
    controller.flush()
    assert controller.errors == ["out of memory"]
    assert controller.last_error == "out of memory"
    assert controller.result is None
    assert not controller.is_processing

    monkeypatch.undo()
    controller.retry()
    controller.flush()
    assert len(calls) == 1
    assert len(controller.results) == 1
    assert controller.last_error is None


def test_export_from_latest_result(controller):
    with pytest.raises(RuntimeError):
        controller.export(ExportFormat.PNG)
    controller.load_source(generate_uniform(6, 6, 255))
    controller.flush()
    matte = controller.export(ExportFormat.TRANSPARENT)
    assert np.all(matte.alpha == 0)
    assert np.all(controller.result.processed.rgb == 255)


def test_reset_restores_defaults(controller):
    controller.load_source(generate_uniform(6, 6))
    controller.update_settings(line_thickness=4)
    controller.reset()
    assert controller.source is None
    assert controller.settings == SketchSettings()
    assert not controller.has_pending


def test_rotate_source_makes_new_source(controller):
    image = generate_uniform(12, 8)
    image[0, 0, :3] = 0
    controller.load_source(image)
    controller.flush()
    old_source = controller.source

    controller.rotate_source(90)
    assert controller.result is None
    assert controller.has_pending
    assert (controller.source.width, controller.source.height) == (8, 12)
    # Top-left corner moves to top-right on a clockwise turn
    assert controller.source.pixels[0, 7, 0] == 0
    assert old_source.width == 12

    controller.rotate_source(-90)
    controller.flush()
    assert np.array_equal(controller.source.pixels, image)
    assert len(controller.results) == 2


def test_rotate_rejects_odd_angles(controller):
    controller.load_source(generate_uniform(6, 6))
    with pytest.raises(ValueError):
        controller.rotate_source(45)


def test_crop_source(controller):
    image = generate_uniform(20, 10)
    image[2:6, 4:9, :3] = 0
    controller.load_source(image)
    controller.flush()

    controller.crop_source(4, 2, 5, 4)
    assert controller.result is None
    assert (controller.source.width, controller.source.height) == (5, 4)
    assert np.all(controller.source.rgb == 0)
    controller.flush()
    assert controller.result.processed.width == 5

    with pytest.raises(ValueError):
        controller.crop_source(3, 0, 5, 4)
    with pytest.raises(ValueError):
        controller.crop_source(0, 0, 0, 2)


def test_source_edits_need_source(controller):
    with pytest.raises(RuntimeError):
        controller.rotate_source(90)
    with pytest.raises(RuntimeError):
        controller.crop_source(0, 0, 1, 1)


def test_rotate_half_turn_keeps_shape(qt_app):
    ctrl = SketchController(max_dimension=30)
    ctrl.load_source(generate_uniform(30, 15))
    ctrl.rotate_source(180)
    assert (ctrl.source.width, ctrl.source.height) == (30, 15)
    ctrl.reset()
