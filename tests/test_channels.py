"""Tests for clicker.core.channels — ConfigChannel and RunStateCell."""
import threading

from clicker.core.channels import ConfigChannel, RunStateCell


class TestConfigChannel:
    def test_empty(self):
        assert ConfigChannel().latest() is None

    def test_single_value(self):
        ch = ConfigChannel()
        ch.send(1)
        assert ch.latest() == 1
        assert ch.latest() is None

    def test_latest_supersedes(self):
        ch = ConfigChannel()
        for v in (1, 2, 3):
            ch.send(v)
        assert ch.latest() == 3
        assert ch.latest() is None

    def test_close_keeps_queued_values(self):
        ch = ConfigChannel("interval")
        ch.send("a")
        ch.close()
        assert ch.closed
        assert ch.latest() == "a"

    def test_send_after_close_is_dropped(self):
        ch = ConfigChannel()
        ch.close()
        ch.send("late")
        assert ch.latest() is None

    def test_repr(self):
        assert "options" in repr(ConfigChannel("options"))


class TestRunStateCell:
    def test_default_idle(self):
        assert RunStateCell().get() is False

    def test_set(self):
        cell = RunStateCell()
        cell.set(True)
        assert cell.get() is True
        cell.set(False)
        assert cell.get() is False

    def test_toggle_returns_new_value(self):
        cell = RunStateCell()
        assert cell.toggle() is True
        assert cell.get() is True

    def test_double_toggle_restores(self):
        for start in (False, True):
            cell = RunStateCell(start)
            cell.toggle()
            cell.toggle()
            assert cell.get() is start

    def test_try_get_free(self):
        assert RunStateCell(True).try_get(0.01) is True

    def test_try_get_contended(self):
        cell = RunStateCell(True)
        cell._lock.acquire()
        try:
            assert cell.try_get(0.01) is None
        finally:
            cell._lock.release()

    def test_concurrent_toggles(self):
        cell = RunStateCell()

        def flip():
            for _ in range(1000):
                cell.toggle()

        threads = [threading.Thread(target=flip) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        # 4000 toggles in total: an even count restores the start value
        assert cell.get() is False
