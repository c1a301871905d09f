"""Tests for the explicit recompute entry point."""

from analytics.report import recompute
from analytics.table import parse_table


def test_recompute_builds_every_view(sample_table):
    analysis = recompute(sample_table)
    assert [s.column for s in analysis.statistics] == ["id", "height", "weight"]
    assert [d.column for d in analysis.distributions] == ["id", "height", "weight", "city"]
    assert analysis.correlation.columns == ["id", "height", "weight"]


def test_recompute_is_repeatable(sample_table):
    assert recompute(sample_table) == recompute(sample_table)


def test_recompute_follows_table_replacement(sample_table):
    before = recompute(sample_table)
    after = recompute(parse_table("a,b\n1,x\n2,y"))
    assert before.correlation.columns != after.correlation.columns
    assert after.distributions[1].kind == "categorical"


def test_recompute_empty_table():
    analysis = recompute(parse_table("a,b"))
    assert analysis.statistics == []
    assert analysis.distributions == []
    assert analysis.correlation.values == []
