"""Tests for sprite.core.executor — LoggingSink."""
from sprite.core.executor import LoggingSink


class TestLoggingSink:
    def test_records_in_order(self):
        sink = LoggingSink()
        sink.move_pointer_to(3, 4)
        sink.click_button("middle", 2)
        sink.pause(100)
        assert sink.actions == [("move", 3, 4), ("click", "middle", 2), ("pause", 100)]

    def test_logs_at_info(self, log_records):
        sink = LoggingSink(log_fn=log_records)
        sink.move_pointer_to(1, 2)
        sink.pause(5)
        assert log_records.records == [
            ("INFO", "move pointer to (1, 2)"),
            ("INFO", "wait 5 ms"),
        ]

    def test_clear(self):
        sink = LoggingSink()
        sink.pause(1)
        sink.clear()
        assert sink.actions == []
