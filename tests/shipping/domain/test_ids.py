"""Tests for request and status identifiers."""

import threading
from datetime import datetime

from shipping.request.ids import RequestSequence, request_id_for, status_id_for


class TestRequestSequence:
    def test_starts_at_zero(self):
        assert RequestSequence().current == 0

    def test_increments_before_use(self):
        sequence = RequestSequence()
        assert [sequence.next() for _ in range(3)] == [1, 2, 3]
        assert sequence.current == 3

    def test_custom_start(self):
        assert RequestSequence(start=41).next() == 42

    def test_concurrent_increments_do_not_collide(self):
        sequence = RequestSequence()
        drawn = []

        def draw():
            for _ in range(200):
                drawn.append(sequence.next())

        threads = [threading.Thread(target=draw) for _ in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(drawn) == list(range(1, 1001))


class TestRequestIdFor:
    def test_format(self):
        moment = datetime(2024, 1, 5)
        assert request_id_for("Bob", moment, 1) == "B2024010000000000000001"

    def test_month_is_zero_padded(self):
        assert request_id_for("alice", datetime(2023, 11, 30), 12)[1:7] == "202311"

    def test_sequence_is_sixteen_digits(self):
        request_id = request_id_for("Zed", datetime(2024, 2, 1), 123)
        assert request_id[7:] == "0000000000000123"
        assert len(request_id) == 23


class TestStatusIdFor:
    def test_format(self):
        assert status_id_for("B2024010000000000000001", 1) == "SB2024010000000000000001-001"

    def test_position_is_three_digits(self):
        assert status_id_for("X", 42).endswith("-042")
