"""Tests for trailing month spans and chart series."""

from datetime import UTC, datetime

from app.stats.trends import MonthlyBucket, build_series, trailing_month_spans


def test_six_months_end_with_current_month():
    spans = trailing_month_spans(datetime(2024, 2, 10, 15, 30, tzinfo=UTC), 6)

    assert [span.label for span in spans] == ["Sep", "Oct", "Nov", "Dec", "Jan", "Feb"]
    assert spans[0].start == datetime(2023, 9, 1, tzinfo=UTC)
    assert spans[0].end == datetime(2023, 9, 30, 23, 59, 59, 999999, tzinfo=UTC)
    assert spans[-1].end == datetime(2024, 2, 29, 23, 59, 59, 999999, tzinfo=UTC)


def test_twelve_months_cover_a_full_year():
    spans = trailing_month_spans(datetime(2024, 12, 1, tzinfo=UTC), 12)

    assert len(spans) == 12
    assert spans[0].label == "Jan"
    assert spans[0].start == datetime(2024, 1, 1, tzinfo=UTC)
    assert spans[-1].label == "Dec"


def test_spans_do_not_overlap():
    spans = trailing_month_spans(datetime(2024, 7, 4, tzinfo=UTC), 6)

    for earlier, later in zip(spans, spans[1:], strict=False):
        assert earlier.end < later.start


def test_build_series_aligns_both_charts():
    buckets = [
        MonthlyBucket(label="Jan", income=1000.0, expenses=400.0),
        MonthlyBucket(label="Feb", income=0.0, expenses=50.0),
        MonthlyBucket(label="Mar", income=0.0, expenses=0.0),
    ]

    chart, trends = build_series(buckets)

    assert chart.months == trends.months == ["Jan", "Feb", "Mar"]
    assert chart.income_data == [1000.0, 0.0, 0.0]
    assert chart.expense_data == [400.0, 50.0, 0.0]
    assert trends.balance_data == [600.0, -50.0, 0.0]
    assert trends.savings_rate_data == [60, 0, 0]
