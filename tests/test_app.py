from pathlib import Path

import pandas as pd
from streamlit.testing.v1 import AppTest

from mof_screener import ScreenerSession
from mof_screener.batch import screen_frame
from mof_screener.config import DEFAULT_INPUTS

ROOT = Path(__file__).resolve().parents[1]


def _home():
    return AppTest.from_file(str(ROOT / "home.py"), default_timeout=30)


def test_home_default_candidate_passes():
    at = _home().run()
    assert not at.exception
    assert at.success[0].value == "Promising Candidate"
    assert at.success[0].icon == "✅"
    assert at.metric[0].value == "5.79 wt%"
    assert at.metric[1].value == "51.98 g/L"
    assert at.text_input(key="field_gsa").value == "3000"


def test_home_malformed_input_is_zero():
    at = _home().run()
    at.text_input(key="field_gsa").input("not-a-number").run()
    assert not at.exception
    assert at.session_state["screener"].inputs.gsa == 0.0
    assert at.text_input(key="field_gsa").value == "0"
    assert at.error[0].value == "Does Not Meet Targets"
    assert at.metric[0].value == "4.01 wt%"


def test_methods_page_renders():
    at = AppTest.from_file(str(ROOT / "pages" / "2_Methods_&_Assumptions.py"), default_timeout=30).run()
    assert not at.exception
    assert at.title[0].value == "Methods & Assumptions"


def _page(name):
    return AppTest.from_file(str(ROOT / "pages" / name), default_timeout=30)


def test_batch_page_without_results():
    at = _page("1_Batch_Screening.py").run()
    assert not at.exception
    assert len(at.metric) == 0


def test_batch_page_renders_stored_results():
    results = screen_frame(pd.DataFrame([DEFAULT_INPUTS, dict(DEFAULT_INPUTS, gsa=0)]))
    at = _page("1_Batch_Screening.py")
    at.session_state["batch_results"] = results
    at.run()
    assert not at.exception
    assert [m.value for m in at.metric] == ["2", "1", "2", "1"]


def test_report_page_needs_a_screening():
    at = _page("3_Report_&_Provenance.py").run()
    assert not at.exception
    assert at.info[0].value == "Screen a material on the home page first."


def test_report_page_with_screening():
    at = _page("3_Report_&_Provenance.py")
    at.session_state["screener"] = ScreenerSession()
    at.run()
    assert not at.exception
    assert len(at.info) == 0
