import pytest

from flashfreq import csv_parser
from flashfreq.csv_parser import check_file_type, load_csv_file, parse_csv_text
from flashfreq.errors import (
    EmptyInputError, FileTypeError, FlashFreqError, ParseError, ReadError,
)


class TestParseCsvText:

    def test_header_and_rows(self):
        model = parse_csv_text("a,b\n1,2\n3,4\n")
        assert model.headers == ("a", "b")
        assert model.rows == (("1", "2"), ("3", "4"))

    def test_cells_stay_strings(self):
        model = parse_csv_text("n\n 1.50 \n")
        assert model.rows == ((" 1.50 ",),)

    def test_blank_lines_skipped(self):
        model = parse_csv_text("\na,b\n\n1,2\n\n3,4\n\n")
        assert model.headers == ("a", "b")
        assert model.n_rows == 2

    def test_whitespace_only_line_is_a_row(self):
        model = parse_csv_text("name\nx\n  \ny\n")
        assert model.rows == (("x",), ("  ",), ("y",))

    def test_row_of_empty_cells_is_kept(self):
        model = parse_csv_text("a,b\n,\n")
        assert model.rows == (("", ""),)

    @pytest.mark.parametrize("newline", ["\n", "\r\n", "\r"])
    def test_newline_conventions(self, newline):
        text = newline.join(["a,b", "1,2", "3,4"]) + newline
        model = parse_csv_text(text)
        assert model.rows == (("1", "2"), ("3", "4"))

    def test_no_trailing_newline(self):
        assert parse_csv_text("a\nx").rows == (("x",),)

    def test_quoted_delimiter_and_newline(self):
        text = 'name,note\n"Smith, J","line1\nline2"\nDoe,ok\n'
        model = parse_csv_text(text)
        assert model.rows == (("Smith, J", "line1\nline2"), ("Doe", "ok"))

    def test_escaped_quotes(self):
        model = parse_csv_text('q\n"He said ""hi"""\n')
        assert model.rows == (('He said "hi"',),)

    def test_ragged_rows_preserved(self):
        model = parse_csv_text("a,b,c\n1\n1,2,3,4\n")
        assert model.rows == (("1",), ("1", "2", "3", "4"))
        assert model.cell(0, 2) == ""

    def test_header_only(self):
        model = parse_csv_text("a,b\n")
        assert model.headers == ("a", "b")
        assert model.n_rows == 0

    def test_bom_dropped(self):
        model = parse_csv_text("\ufeffid,name\n1,x\n")
        assert model.headers == ("id", "name")

    def test_duplicate_headers_allowed(self):
        assert parse_csv_text("x,x\n1,2\n").headers == ("x", "x")

    @pytest.mark.parametrize("text", ["", "\n\n", "\r\n\r\n"])
    def test_empty_input(self, text):
        with pytest.raises(EmptyInputError):
            parse_csv_text(text)

    def test_whitespace_only_input_is_header_and_row(self):
        model = parse_csv_text("  \n\t\n")
        assert model.headers == ("  ",)
        assert model.rows == (("\t",),)

    def test_empty_input_error_hierarchy(self):
        with pytest.raises(ParseError):
            parse_csv_text("")
        with pytest.raises(ValueError):
            parse_csv_text("")
        with pytest.raises(FlashFreqError):
            parse_csv_text("")

    def test_oversized_field_is_parse_error(self):
        with pytest.raises(ParseError):
            parse_csv_text("a\n" + "x" * 200_000 + "\n")

    def test_preview_pads_short_rows(self):
        model = parse_csv_text("a,b\n1\n2,3\n4,5\n")
        assert model.preview(2) == (("1", ""), ("2", "3"))


class TestLoadCsvFile:

    def test_reads_file(self, tmp_path, sales_csv_text):
        path = tmp_path / "sales.csv"
        path.write_text(sales_csv_text, encoding="utf-8")
        model = load_csv_file(str(path))
        assert model.headers == ("Region", "Product", "Quantity", "Note")
        assert model.n_rows == 5

    def test_utf8_bom_file(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_bytes(b"\xef\xbb\xbfcity\nK\xc3\xb6ln\n")
        model = load_csv_file(str(path))
        assert model.headers == ("city",)
        assert model.rows == (("Köln",),)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReadError):
            load_csv_file(str(tmp_path / "missing.csv"))

    def test_read_error_is_oserror(self, tmp_path):
        with pytest.raises(OSError):
            load_csv_file(str(tmp_path / "missing.csv"))

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"name\n\xff\xfe\xfa\n")
        with pytest.raises(ReadError):
            load_csv_file(str(path))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(EmptyInputError):
            load_csv_file(str(path))

    def test_large_file_warns(self, tmp_path, monkeypatch):
        monkeypatch.setattr(csv_parser, "SIZE_ADVISORY_BYTES", 4)
        path = tmp_path / "big.csv"
        path.write_text("a,b\n1,2\n", encoding="utf-8")
        with pytest.warns(UserWarning, match="very large"):
            model = load_csv_file(str(path))
        assert model.n_rows == 1


class TestCheckFileType:

    @pytest.mark.parametrize("name", ["data.csv", "DATA.CSV", "/tmp/x.Csv"])
    def test_accepts_csv(self, name):
        check_file_type(name)

    @pytest.mark.parametrize("name", ["data.txt", "data.csv.bak", "csv"])
    def test_rejects_other(self, name):
        with pytest.raises(FileTypeError):
            check_file_type(name)
