import pytest

from catalog import CatalogLoader, Course, CourseTable


@pytest.fixture
def table():
    return CourseTable()


@pytest.fixture
def loader():
    return CatalogLoader()


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_text(
        "CS101,Intro\n"
        "CS201,Data Structures,CS101\n"
        "CS300,Capstone,CS101,CS201\n"
        "MATH201,Discrete Mathematics\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def intro():
    return Course(number="CS101", title="Intro")


@pytest.fixture
def latin1_file(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes(b"CS101,Intro\nCS102,Caf\xe9 Culture\n")
    return path
