import pytest
from citysearch.models import Record
from citysearch.normalize import normalize_query
from citysearch.ranking import rank, score


def test_normalize_query_lowercases_and_trims():
    assert normalize_query("  BuEnOs  ") == "buenos"
    assert normalize_query("\tNew York\n") == "new york"
    assert normalize_query("   ") == ""
    assert normalize_query("") == ""


def test_normalize_query_rejects_non_strings():
    with pytest.raises(TypeError):
        normalize_query(None)  # type: ignore[arg-type]


def test_name_prefix_score():
    r = Record(1, "Buenos Aires", "Argentina")
    # name prefix + label prefix + (50 - 12)
    assert score(r, "buenos") == 100 + 80 + 38


def test_exact_country_score():
    r = Record(1, "Buenos Aires", "Argentina")
    # country prefix + exact country + (50 - 12)
    assert score(r, "argentina") == 60 + 150 + 38


def test_exact_name_score():
    r = Record(5, "Paris", "France")
    assert score(r, "paris") == 100 + 80 + 45 + 200


def test_full_label_scores_only_label_prefix():
    r = Record(1, "Buenos Aires", "Argentina")
    assert score(r, "buenos aires, argentina") == 80 + 38


def test_long_names_get_no_short_name_bonus():
    r = Record(1, "A" * 60, "X")
    assert score(r, "a") == 100 + 80


def test_higher_score_ranks_first():
    short = Record(1, "Newark", "USA")
    long = Record(2, "New Orleans", "USA")
    assert rank([long, short], "new") == [short, long]


def test_equal_scores_tie_break_on_display_label():
    texas = Record(1, "Paris", "Texas")
    france = Record(2, "Paris", "France")
    assert rank([texas, france], "paris") == [france, texas]


def test_label_tie_break_is_case_sensitive():
    lower = Record(1, "paris", "X")
    upper = Record(2, "Paris", "X")
    assert rank([lower, upper], "paris") == [upper, lower]


def test_identical_labels_fall_back_to_id():
    a = Record(7, "Springfield", "USA")
    b = Record(3, "Springfield", "USA")
    assert rank([a, b], "spring") == [b, a]


def test_rank_dedupes_equal_records_only():
    r1 = Record(1, "Buenos Aires", "Argentina")
    r2 = Record(2, "Buenos Aires", "Argentina")
    out = rank([r1, r1, r2, r1], "buenos")
    assert out == [r1, r2]


def test_same_label_from_different_name_country_split_is_ordered():
    # Both names are 50+ characters, so neither gets the short-name bonus,
    # and both render as "AAA…A, b, c".
    long_name = Record(1, "A" * 50 + ", b", "c")
    short_name = Record(1, "A" * 50, "b, c")
    assert long_name.display_label == short_name.display_label
    assert score(long_name, "a") == score(short_name, "a")
    assert rank([long_name, short_name], "a") == [short_name, long_name]
    assert rank([short_name, long_name], "a") == [short_name, long_name]
