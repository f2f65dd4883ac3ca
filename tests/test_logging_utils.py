import logging

import numpy as np

from splot3d.emitter import render_script
from splot3d.logging_utils import _safe_repr, debug_log_call
from splot3d.scene import Scene


def test_emitter_functions_trace_at_debug(caplog):
    scene = Scene()
    scene.point((0, 0, 0))

    with caplog.at_level(logging.DEBUG, logger='splot3d.emitter'):
        render_script(scene)

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith('Entering render_script') for m in messages)
    assert any(m.startswith('Exiting plan_layout') for m in messages)


def test_debug_log_call_is_silent_above_debug(caplog):
    logger = logging.getLogger('splot3d.tests.quiet')

    @debug_log_call(logger)
    def double(x):
        return 2 * x

    with caplog.at_level(logging.INFO, logger='splot3d.tests.quiet'):
        assert double(4) == 8

    assert caplog.records == []


def test_debug_log_call_logs_exceptions(caplog):
    logger = logging.getLogger('splot3d.tests.boom')

    @debug_log_call(logger)
    def boom():
        raise RuntimeError('boom')

    with caplog.at_level(logging.DEBUG, logger='splot3d.tests.boom'):
        try:
            boom()
        except RuntimeError:
            pass

    assert any('Exception in' in record.getMessage() for record in caplog.records)


def test_safe_repr_summarizes_arrays_and_long_lists():
    assert _safe_repr(np.zeros((2, 3))) == 'ndarray(shape=(2, 3), dtype=float64, min=0, max=0)'
    assert _safe_repr(['a', 'b', 'c', 'd']) == 'list(len=4)'
    assert _safe_repr(Scene('t')) == "Scene(title='t', primitives=0, state=empty)"
