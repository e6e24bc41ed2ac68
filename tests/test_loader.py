import pytest

from catalog import CatalogLoader, CourseTable


def test_parse_full_line(loader):
    course = loader.parse_line("CS300,Capstone,CS101,CS201\n")
    assert course.number == "CS300"
    assert course.title == "Capstone"
    assert course.prerequisites == ["CS101", "CS201"]


def test_parse_skips_empty_prerequisite_fields(loader):
    course = loader.parse_line("CS300,Capstone,,CS101,,\r\n")
    assert course.prerequisites == ["CS101"]


def test_parse_degrades_missing_fields(loader):
    course = loader.parse_line("CS999")
    assert course.number == "CS999"
    assert course.title == ""
    assert course.prerequisites == []


@pytest.mark.parametrize("line", ["", "\n", "   \n", ",Orphan title"])
def test_parse_ignores_lines_without_a_number(loader, line):
    assert loader.parse_line(line) is None


def test_load_inserts_every_record(loader, table, catalog_file):
    assert loader.load(catalog_file, table) == 4
    assert table.size() == 4
    assert table.search("CS300").prerequisites == ["CS101", "CS201"]


def test_load_accepts_string_paths(loader, table, catalog_file):
    loader.load(str(catalog_file), table)
    assert "MATH201" in table


def test_later_lines_win(loader, table):
    loaded = loader.load_lines(["CS101,Old title", "CS101,New title,MATH100"], table)
    assert loaded == 2
    assert table.size() == 1
    assert table.search("CS101").title == "New title"


def test_missing_file_raises(loader, table, tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.load(tmp_path / "missing.csv", table)
    assert table.size() == 0


def test_custom_delimiter(table):
    loader = CatalogLoader(delimiter=";")
    loader.load_lines(["CS201;Data Structures;CS101"], table)
    assert table.search("CS201").prerequisites == ["CS101"]


def test_byte_order_mark_is_stripped(table, tmp_path):
    path = tmp_path / "bom.csv"
    path.write_text("\ufeffCS101,Intro\n", encoding="utf-8")
    CatalogLoader().load(path, table)
    assert "CS101" in table


def test_undecodable_file_raises_value_error_and_inserts_nothing(loader, table, latin1_file):
    with pytest.raises(ValueError, match="Could not decode"):
        loader.load(latin1_file, table)
    assert table.size() == 0


def test_latin1_file_loads_with_matching_encoding(table, latin1_file):
    CatalogLoader(encoding="latin-1").load(latin1_file, table)
    assert table.search("CS102").title == "Café Culture"


def test_directory_is_not_a_course_file(loader, table, tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.load(tmp_path, table)
