from histogram import Histogram


def test_scenario_report():
    histogram = Histogram()
    histogram.add("aabbb")
    assert histogram.get_count("A") == 2
    assert histogram.get_count("B") == 3
    assert histogram.total_letters == 5
    assert histogram.format() == "B: " + "#" * 60 + " 60.00%\nA: " + "#" * 40 + " 40.00%"
    assert str(histogram) == histogram.format()


def test_empty_histogram_formats_to_empty_string():
    histogram = Histogram()
    assert histogram.format() == ""
    histogram.add("")
    histogram.add(" \t\n")
    assert histogram.total_letters == 0
    assert histogram.format() == ""


def test_total_letters_tracks_non_whitespace_characters():
    histogram = Histogram()
    seen = 0
    for text in ["Hello, World!", "  ", "\tx\ny\r\n", "ünïcödé \u3000 漢字"]:
        histogram.add(text)
        seen += len("".join(text.split()))
        assert histogram.total_letters == seen
        assert histogram.total_letters == sum(count for _, count in histogram.entries())


def test_chunking_does_not_change_the_report():
    whole = Histogram()
    whole.add("HELLO")
    chunked = Histogram()
    chunked.add("HE")
    chunked.add("LLO")
    assert chunked.format() == whole.format()

    all_at_once = Histogram()
    all_at_once.add_all(["H", "", "EL", "LO"])
    assert all_at_once.format() == whole.format()


def test_case_insensitive():
    lower = Histogram()
    lower.add("abc")
    upper = Histogram()
    upper.add("ABC")
    assert lower.entries() == upper.entries() == [("A", 1), ("B", 1), ("C", 1)]


def test_whitespace_is_ignored():
    histogram = Histogram()
    histogram.add("a b")
    assert histogram.entries() == [("A", 1), ("B", 1)]
    assert histogram.get_count(" ") == 0


def test_ties_are_sorted_by_character():
    histogram = Histogram()
    histogram.add("cbbaa")
    assert histogram.format() == "\n".join([
        "A: " + "#" * 40 + " 40.00%",
        "B: " + "#" * 40 + " 40.00%",
        "C: " + "#" * 20 + " 20.00%",
    ])


def test_entries_below_one_percent_are_dropped():
    histogram = Histogram()
    histogram.add("a" * 995 + "z" * 5)
    assert histogram.format() == "A: " + "#" * 100 + " 99.50%"

    histogram = Histogram()
    histogram.add("a" * 99 + "z")
    assert histogram.format().splitlines()[-1] == "Z: # 1.00%"


def test_bar_rounds_half_up():
    # 1 of 8 is 12.5%
    histogram = Histogram()
    histogram.add("abbbbbbb")
    assert histogram.format().splitlines()[-1] == "A: " + "#" * 13 + " 12.50%"


def test_non_letters_are_counted_by_code_point():
    histogram = Histogram()
    histogram.add("1!é😀")
    assert histogram.total_letters == 4
    assert histogram.get_count("É") == 1
    assert histogram.get_count("😀") == 1


def test_format_does_not_mutate():
    histogram = Histogram()
    histogram.add("xyz")
    first = histogram.format()
    assert histogram.format() == first
    assert histogram.total_letters == 3


def test_percentage_rounds_half_up():
    # 1 of 32 is exactly 3.125%
    histogram = Histogram()
    histogram.add("a" + "b" * 31)
    assert histogram.format().splitlines() == [
        "B: " + "#" * 97 + " 96.88%",
        "A: ### 3.13%",
    ]


def test_byte_order_mark_is_whitespace():
    histogram = Histogram()
    histogram.add("\ufeffab")
    assert histogram.total_letters == 2
    assert histogram.get_count("\ufeff") == 0


def test_javascript_whitespace_set():
    histogram = Histogram()
    histogram.add("a\u00a0 \u2028\u3000\vb")
    assert histogram.total_letters == 2

    # information separators and NEL are not whitespace here
    histogram = Histogram()
    histogram.add("a\x1c\x1f\x85b")
    assert histogram.total_letters == 5
    assert histogram.get_count("\x1c") == 1
    assert histogram.get_count("\x85") == 1


def test_merge_equals_adding_the_same_text():
    whole = Histogram()
    whole.add("hello world")
    merged = Histogram()
    merged.add("hello")
    other = Histogram()
    other.add(" world")
    merged.merge(other)
    assert merged.total_letters == whole.total_letters == 10
    assert merged.format() == whole.format()
