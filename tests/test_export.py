import csv
import io

from matplotlib.figure import Figure

from flashfreq.chart_frequency import render_frequency_bar
from flashfreq.data_model import FrequencyEntry
from flashfreq.export import (
    export_filename, export_png, format_number, format_percentage,
    frequency_csv_text,
    write_frequency_csv,
)
from flashfreq.frequency import analyze_frequencies
from flashfreq.view_projector import chart_points


def test_header_and_rows():
    entries = analyze_frequencies(["a", "b", "a"])
    text = frequency_csv_text(entries)
    assert text == (
        "Value,Count,Percentage\n"
        "a,2,66.67%\n"
        "b,1,33.33%\n"
    )


def test_empty_entries_give_header_only():
    assert frequency_csv_text(()) == "Value,Count,Percentage\n"


def test_format_percentage():
    assert format_percentage(100 / 3) == "33.33%"
    assert format_percentage(100.0) == "100.00%"
    assert format_percentage(0.005) == "0.01%"


def test_format_number_keeps_all_digits():
    assert format_number(123456789.0) == "123456789"
    assert format_number(-2.5) == "-2.5"
    assert format_number(0.1) == "0.1"
    assert format_number(1234567.891) == "1234567.891"
    assert format_number(0.0) == "0"


def test_round_trip_through_csv_reader():
    entries = analyze_frequencies(
        ["plain", "with, comma", 'say "hi"', "two\nlines", "plain", ""]
    )
    text = frequency_csv_text(entries)
    rows = list(csv.reader(io.StringIO(text, newline="")))
    assert rows[0] == ["Value", "Count", "Percentage"]
    assert rows[1:] == [
        [e.value, str(e.count), f"{e.percentage:.2f}%"] for e in entries
    ]


def test_export_filename():
    assert export_filename("sales.csv", "Region") == "sales_Region_frequency.csv"
    assert export_filename("/data/Report.CSV", "Unit Price") == (
        "Report_Unit Price_frequency.csv"
    )
    assert export_filename("notes.txt", "a/b") == "notes.txt_a_b_frequency.csv"


def test_write_frequency_csv(tmp_path):
    entries = (FrequencyEntry("Köln", 3, 75.0), FrequencyEntry("Bonn", 1, 25.0))
    path = tmp_path / "out.csv"
    assert write_frequency_csv(str(path), entries) == str(path)
    assert path.read_text(encoding="utf-8") == (
        "Value,Count,Percentage\nKöln,3,75.00%\nBonn,1,25.00%\n"
    )


def test_export_png_restores_figure(tmp_path):
    fig = Figure(figsize=(6, 4))
    render_frequency_bar(fig, chart_points(analyze_frequencies(["a", "b", "a"])))
    facecolor = fig.get_facecolor()
    size = tuple(fig.get_size_inches())

    path = tmp_path / "chart.png"
    export_png(fig, str(path), dpi=50)

    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    assert fig.get_facecolor() == facecolor
    assert tuple(fig.get_size_inches()) == size
