# test_output_buffer.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from termline.session.output import OutputBuffer, OutputRecord, RecordKind


class TestOutputBuffer:
    """Tests for the bounded scrollback."""

    def test_append_keeps_submission_order(self):
        buffer = OutputBuffer(capacity=10)
        for i in range(5):
            buffer.append(OutputRecord.output(f"line {i}"))
        assert [r.text for r in buffer] == [f"line {i}" for i in range(5)]

    def test_eviction_is_strict_fifo(self):
        """Only the most recent `capacity` records survive."""
        buffer = OutputBuffer(capacity=3)
        for i in range(10):
            buffer.append(OutputRecord.output(str(i)))
            assert len(buffer) <= 3
        assert [r.text for r in buffer] == ["7", "8", "9"]
        assert buffer.capacity == 3

    def test_default_capacity_is_500(self):
        buffer = OutputBuffer()
        for i in range(600):
            buffer.append(OutputRecord.output(str(i)))
        assert len(buffer) == 500
        assert buffer.records[0].text == "100"
        assert buffer.records[-1].text == "599"

    def test_clear_empties_buffer(self):
        buffer = OutputBuffer(capacity=3)
        buffer.extend([OutputRecord.output("a"), OutputRecord.error("b")])
        buffer.clear()
        assert len(buffer) == 0
        assert buffer.records == ()

    def test_invalid_capacity_rejected(self):
        with pytest.raises(ValueError):
            OutputBuffer(capacity=0)

    def test_records_are_immutable(self):
        record = OutputRecord("hello", RecordKind.USER_INPUT)
        with pytest.raises(Exception):
            record.text = "changed"

    def test_factories_set_kind(self):
        assert OutputRecord.output("x").kind is RecordKind.SYSTEM_OUTPUT
        assert OutputRecord.error("x").kind is RecordKind.ERROR
