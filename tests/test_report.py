from catalog import Course, CourseTable, build_distribution_report, format_report


def test_report_on_empty_table():
    report = build_distribution_report(CourseTable(5))
    assert report["entries"] == 0
    assert report["load_factor"] == 0
    assert report["empty_buckets"] == 5
    assert report["longest_chain"] == 0
    assert report["chain_lengths"] == {0: 5}


def test_report_counts_chain_lengths():
    table = CourseTable(4)
    # "A" -> 65 % 4 == 1, "E" -> 69 % 4 == 1, "B" -> 66 % 4 == 2
    for number in ["A", "E", "B"]:
        table.insert(Course(number=number))

    report = build_distribution_report(table)
    assert report["entries"] == 3
    assert report["used_buckets"] == 2
    assert report["empty_buckets"] == 2
    assert report["longest_chain"] == 2
    assert report["chain_lengths"] == {0: 2, 1: 1, 2: 1}
    assert report["load_factor"] == 0.75


def test_format_report_lists_each_chain_length():
    table = CourseTable(4)
    table.insert(Course(number="A"))
    text = format_report(build_distribution_report(table))
    assert text.startswith("Bucket distribution:")
    assert "Table size: 4" in text
    assert "chains of length 1: 1" in text
