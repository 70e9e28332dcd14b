from flashfreq.column_summary import summarize
from flashfreq.csv_parser import load_csv_file
from flashfreq.example_data import EXAMPLE_ROWS, generate_example_csv


def test_generates_loadable_csv(tmp_path):
    path = generate_example_csv(str(tmp_path))
    model = load_csv_file(path)
    assert model.headers == (
        "Region", "Product", "Quantity", "Unit Price", "Rating", "Comment",
    )
    assert model.n_rows == EXAMPLE_ROWS
    assert all(len(row) == 6 for row in model.rows)


def test_reproducible(tmp_path):
    first = generate_example_csv(str(tmp_path / "one"))
    second = generate_example_csv(str(tmp_path / "two"))
    with open(first, "rb") as fh_a, open(second, "rb") as fh_b:
        assert fh_a.read() == fh_b.read()


def test_column_kinds(tmp_path):
    model = load_csv_file(generate_example_csv(str(tmp_path)))

    region = summarize(model, 0)
    assert not region.is_numeric
    assert region.most_common == "North"

    quantity = summarize(model, 2)
    assert quantity.is_numeric
    assert 1 <= quantity.numeric_stats.min <= quantity.numeric_stats.max <= 20

    price = summarize(model, 3)
    assert price.is_numeric
    assert price.empty_values > 0

    rating = summarize(model, 4)
    assert rating.is_numeric
    assert "n/a" in {e.value for e in rating.entries}
    assert rating.numeric_stats.max <= 5

    comment = summarize(model, 5)
    assert not comment.is_numeric
    assert "Late delivery, refunded" in {e.value for e in comment.entries}
