import logging

import numpy as np

from vdscene.labels import LabelTable
from vdscene.logging_utils import _safe_repr, debug_log_call

logger = logging.getLogger("vdscene.tests.logging")


def test_debug_log_call_logs_entry_and_exit(caplog):
    @debug_log_call(logger)
    def add(a, b=0):
        return a + b

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        assert add(1, b=2) == 3

    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("Entering") and "add" in m and "b=2" in m for m in messages)
    assert any(m.startswith("Exiting") and m.endswith("-> 3") for m in messages)


def test_debug_log_call_is_silent_above_debug(caplog):
    @debug_log_call(logger)
    def ident(x):
        return x

    with caplog.at_level(logging.INFO, logger=logger.name):
        ident(1)

    assert caplog.records == []


def test_label_table_operations_are_traced(caplog):
    with caplog.at_level(logging.DEBUG, logger="vdscene.labels"):
        table = LabelTable()
        table.insert("A", (1, 2))
        table.get("A")

    messages = [r.getMessage() for r in caplog.records]
    assert any("LabelTable.insert" in m for m in messages)
    assert any("LabelTable.get" in m and "(1, 2)" in m for m in messages)


def test_safe_repr_summarises_arrays():
    assert _safe_repr(np.zeros((3, 2), dtype=np.int64)) == "ndarray(shape=(3, 2), dtype=int64)"
