import pytest
from datetime import date

from suratlog.models.letter import finalize_candidate
from suratlog.models.reporting import SummaryStats
from suratlog.models.types import LetterType, TypeFilter
from suratlog.query import build_view, matches_search, monthly_breakdown, summarize


def make(record_id, letter_type="Masuk", letter_date="2024-03-05", **fields):
    return finalize_candidate(
        {"type": letter_type, "date": letter_date, **fields},
        record_id=record_id,
        created_at="",
    )


@pytest.fixture
def store():
    # Canonical newest-first order
    return [
        make("a", "Masuk", "2024-03-05", subject="Kapal MV Aurora", reference="JLM/1", from_to="Jabatan Laut"),
        make("b", "Keluar", "2024-03-10", subject="Notis Dermaga", reference="PPKK/2", from_to="Sabah Ports"),
        make("c", "Masuk", "2024-02-21", subject="Garis Panduan", reference="MOT/88", from_to="Kementerian"),
        make("d", "Keluar", "2024-03-05", subject="Balasan", reference="PPKK/3", from_to="Jabatan Laut"),
    ]


def test_type_filter_outgoing_scenario():
    store = [make("in", "Masuk", "2024-03-05"), make("out", "Keluar", "2024-03-10")]

    view = build_view(store, "", "outgoing")

    assert [r.id for r in view] == ["out"]


def test_view_sorted_by_date_desc_with_stable_ties(store):
    view = build_view(store)

    # a and d share a date; a comes first in the store
    assert [r.id for r in view] == ["b", "a", "d", "c"]


def test_search_is_case_insensitive_substring(store):
    assert [r.id for r in build_view(store, "aurora")] == ["a"]
    assert build_view(store, "zzz") == []


def test_search_covers_reference_and_counterparty(store):
    assert [r.id for r in build_view(store, "ppkk/")] == ["b", "d"]
    assert [r.id for r in build_view(store, "JABATAN")] == ["a", "d"]


def test_search_ignores_officer_and_file(store):
    record = make("e", related_file="Fail Rahsia", assigned_officer="En. Ahmad")
    assert not matches_search(record, "rahsia")
    assert not matches_search(record, "ahmad")


def test_filter_and_search_combine(store):
    view = build_view(store, "jabatan", TypeFilter.INCOMING)
    assert [r.id for r in view] == ["a"]


def test_view_is_idempotent_and_does_not_mutate(store):
    original = list(store)

    first = build_view(store, "a", "all")
    second = build_view(store, "a", "all")

    assert first == second
    assert store == original


def test_view_is_subsequence_matching_predicate(store):
    view = build_view(store, "p", "all")
    for record in view:
        assert record in store
        assert matches_search(record, "p")
    assert len(view) == len([r for r in store if matches_search(r, "p")])


def test_invalid_dates_sort_as_oldest():
    store = [
        make("bad1", letter_date="not-a-date"),
        make("old", letter_date="1999-01-01"),
        make("bad2", letter_date=""),
        make("new", letter_date="2024-01-01"),
    ]

    assert [r.id for r in build_view(store)] == ["new", "old", "bad1", "bad2"]


def test_empty_store():
    assert build_view([]) == []
    assert summarize([], 3, 2024) == SummaryStats(incoming_count=0, outgoing_count=0)


def test_summarize_counts_reference_month(store):
    stats = summarize(store, reference_month=3, reference_year=2024)

    assert stats.incoming_count == 1
    assert stats.outgoing_count == 2
    assert stats.total == 3


def test_summarize_defaults_to_current_month(store):
    stats = summarize(store, today=date(2024, 2, 10))
    assert stats == SummaryStats(incoming_count=1, outgoing_count=0)


def test_summarize_uses_wall_clock_when_not_given():
    today = date.today()
    store = [make("now", "Keluar", today.isoformat())]

    assert summarize(store).outgoing_count == 1


def test_summarize_excludes_invalid_dates_and_other_years():
    store = [
        make("bad", letter_date="2024-13-01"),
        make("other_year", letter_date="2023-03-01"),
        make("ok", "Keluar", "2024-03-31"),
    ]

    stats = summarize(store, 3, 2024)

    assert stats.total == 1
    assert stats.outgoing_count == 1


def test_summarize_reflects_changing_store(store):
    assert summarize(store, 3, 2024).total == 3
    store.pop(0)
    assert summarize(store, 3, 2024).total == 2


def test_monthly_breakdown_newest_month_first(store):
    monthly = monthly_breakdown(store + [make("bad", letter_date="??")])

    assert list(monthly) == ["2024-03", "2024-02"]
    assert monthly["2024-03"] == SummaryStats(incoming_count=1, outgoing_count=2)
    assert monthly["2024-02"] == SummaryStats(incoming_count=1, outgoing_count=0)


@pytest.mark.parametrize("loose_date", ["20240305", "2024-3-5", "2024-W10-2"])
def test_loose_date_spellings_are_never_counted(loose_date):
    store = [make("loose", letter_date=loose_date), make("ok", letter_date="2024-03-05")]

    assert summarize(store, 3, 2024).total == 1
    assert [r.id for r in build_view(store)] == ["ok", "loose"]
