import pytest

from flashfreq.constants import EMPTY_SENTINEL
from flashfreq.errors import (
    EmptyInputError, FileTypeError, InvalidColumnError, ReadError,
)
from flashfreq.session import AnalysisSession


@pytest.fixture
def session(sales_csv_text):
    s = AnalysisSession()
    s.load_text(sales_csv_text, "sales.csv")
    return s


def test_initial_state():
    s = AnalysisSession()
    assert s.table is None
    assert s.summary is None
    assert s.top_n == "all"
    assert not s.has_analysis
    assert s.visible_entries() == ()


def test_load_text(session):
    assert session.file_name == "sales.csv"
    assert session.table.n_rows == 5
    assert session.selected_column is None
    assert session.summary is None


def test_select_column(session):
    summary = session.select_column(1)
    assert session.selected_column == 1
    assert session.summary is summary
    assert summary.column == "Product"
    assert session.has_analysis
    assert [e.value for e in session.visible_entries()] == [
        "Widget", "Gadget", "Gizmo",
    ]


def test_select_column_by_name(session):
    assert session.select_column_by_name("Note").column_index == 3


def test_select_unknown_name_clears_summary(session):
    session.select_column(0)
    with pytest.raises(InvalidColumnError):
        session.select_column_by_name("Missing")
    assert session.summary is None


def test_invalid_column_clears_summary(session):
    session.select_column(0)
    with pytest.raises(InvalidColumnError):
        session.select_column(9)
    assert session.summary is None
    assert session.selected_column is None
    assert session.table is not None


def test_select_without_table():
    with pytest.raises(InvalidColumnError):
        AnalysisSession().select_column(0)


def test_search_and_top_n(session):
    session.select_column(1)
    session.set_search_term("DG")
    assert [e.value for e in session.visible_entries()] == ["Widget", "Gadget"]
    session.set_top_n(1)
    assert [e.value for e in session.visible_entries()] == ["Widget"]
    # full distribution untouched
    assert len(session.all_entries()) == 3


def test_invalid_top_n_keeps_previous(session):
    session.set_top_n(10)
    with pytest.raises(ValueError):
        session.set_top_n(-3)
    assert session.top_n == 10


def test_new_column_resets_search(session):
    session.select_column(1)
    session.set_search_term("Gad")
    session.select_column(0)
    assert session.search_term == ""
    assert len(session.visible_entries()) == 3


def test_new_file_replaces_state(session):
    session.select_column(0)
    session.set_search_term("North")
    session.set_top_n(25)
    session.load_text("k\nv\n", "other.csv")
    assert session.file_name == "other.csv"
    assert session.table.headers == ("k",)
    assert session.summary is None
    assert session.search_term == ""
    assert session.top_n == 25


def test_failed_load_clears_state(session):
    session.select_column(0)
    with pytest.raises(EmptyInputError):
        session.load_text("\n\n", "blank.csv")
    assert session.table is None
    assert session.summary is None
    assert session.file_name == ""


def test_load_file(tmp_path, sales_csv_text):
    path = tmp_path / "shop.csv"
    path.write_text(sales_csv_text, encoding="utf-8")
    s = AnalysisSession()
    s.load_file(str(path))
    assert s.file_name == "shop.csv"
    assert s.table.n_columns == 4


def test_load_file_wrong_type_clears_state(session, tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("a\n1\n", encoding="utf-8")
    with pytest.raises(FileTypeError):
        session.load_file(str(path))
    assert session.table is None


def test_load_file_missing(tmp_path):
    with pytest.raises(ReadError):
        AnalysisSession().load_file(str(tmp_path / "gone.csv"))


def test_export(session):
    session.select_column(3)
    assert session.export_filename() == "sales_Note_frequency.csv"
    assert session.export_text() == (
        "Value,Count,Percentage\n"
        f"{EMPTY_SENTINEL},4,80.00%\n"
        "\"fragile, handle with care\",1,20.00%\n"
    )


def test_export_follows_visible_entries(session):
    session.select_column(0)
    session.set_top_n(1)
    assert session.export_text().splitlines() == [
        "Value,Count,Percentage", "North,3,60.00%",
    ]


def test_visible_chart_points(session):
    session.select_column(0)
    points = session.visible_chart_points()
    assert [p.full_label for p in points] == ["North", "South", "East"]


def test_clear(session):
    session.select_column(0)
    session.clear()
    assert session.table is None
    assert session.summary is None
    assert session.visible_entries() == ()
