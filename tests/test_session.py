import pytest

from mof_screener import ScreenerSession, evaluate


def test_initial_result_is_computed(session, default_inputs):
    assert session.inputs == default_inputs
    assert session.outputs == evaluate(default_inputs)
    assert session.recomputations == 1
    assert session.show_thresholds is True


def test_each_change_recomputes_exactly_once(session):
    session.set_field("pv", "1.5")
    session.set_field("lcd", "14")
    assert session.recomputations == 3
    assert session.outputs == evaluate(session.inputs)


def test_parse_failure_updates_field_to_zero(session):
    result = session.set_field("gsa", "not-a-number")
    assert session.inputs.gsa == 0.0
    assert result.outputs.wug == pytest.approx(4.014694028799998, rel=1e-12)
    assert result.verdict.is_wug_passing is False
    assert result.verdict.is_wuv_passing is True
    assert result.verdict.is_overall_passing is False


def test_listeners_see_fresh_result(session):
    seen = []
    session.subscribe(seen.append)
    session.set_field("density", "0.9")
    assert len(seen) == 1
    assert seen[0] is session.result
    assert seen[0].inputs.density == 0.9


def test_unsubscribe(session):
    seen = []
    unsubscribe = session.subscribe(seen.append)
    session.set_field("vf", "0.6")
    unsubscribe()
    session.set_field("vf", "0.7")
    assert len(seen) == 1


def test_unknown_field_leaves_state_untouched(session):
    before = session.result
    with pytest.raises(KeyError):
        session.set_field("volume", "1")
    assert session.result is before
    assert session.recomputations == 1


def test_chart_data_tracks_result(session):
    session.set_field("gsa", "0")
    chart = session.chart_data()
    assert chart == session.result.chart
    assert chart[0].value == pytest.approx(4.014694028799998, rel=1e-12)


def test_starting_inputs(low_porosity_inputs):
    s = ScreenerSession(low_porosity_inputs)
    assert s.verdict.is_overall_passing is False
    assert [d.value for d in s.chart_data()] == [0.0, 0.0]
