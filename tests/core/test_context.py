"""Tests for Context."""

import time

import pytest

from mrtgtraf.core.context import Context


class TestContext:
    """Tests for the real execution context."""

    def test_now_is_whole_seconds(self):
        before = int(time.time())

        now = Context().now()

        assert isinstance(now, int)
        assert before <= now <= int(time.time())

    def test_open_file_reads_text(self, tmp_path):
        path = tmp_path / "router.log"
        path.write_text("header\n100 1 2 3 4\n")

        with Context().open_file(str(path)) as f:
            assert f.readline() == "header\n"

    def test_open_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            Context().open_file(str(tmp_path / "missing"))
