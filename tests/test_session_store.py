"""Tests for history paging helpers."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from data.session_store import clamp_page


class TestClampPage:
    def test_page_beyond_last_falls_back_to_last(self):
        # Three pages of history, a delete leaves two.
        assert clamp_page(3, 2) == 2

    def test_page_in_range_unchanged(self):
        assert clamp_page(2, 4) == 2

    def test_no_results_still_has_one_page(self):
        assert clamp_page(5, 0) == 1
        assert clamp_page(0, 1) == 1


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
