"""Tests for the Streamlit dashboard."""

import json
from pathlib import Path

import streamlit as st
from streamlit.testing.v1 import AppTest


APP_PATH = Path(__file__).resolve().parent.parent / "app" / "main.py"


class TestDashboard:
    """Tests for the member cards on the dashboard."""

    def test_member_names_are_escaped(self, monkeypatch, tmp_path):
        """Test that a stored name can't inject markup into the page."""
        path = tmp_path / "names.json"
        path.write_text(
            json.dumps({"member_name_child": "<img src=x onerror=alert(1)>"}),
            encoding="utf-8",
        )
        monkeypatch.setenv("FAMILY_FINANCE_NAMES_STORE_PATH", str(path))
        st.cache_resource.clear()

        at = AppTest.from_file(str(APP_PATH)).run()
        assert not at.exception

        rendered = "\n".join(m.value for m in at.markdown)
        assert "&lt;img src=x onerror=alert(1)&gt;" in rendered
        assert "<img" not in rendered
        assert '<div class="member-initial">&lt;</div>' in rendered

        st.cache_resource.clear()
