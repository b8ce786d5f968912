import pytest

from contestkit.ladder import (
    build_graph,
    differs_by_one,
    solve,
    transformation_distance,
)

WORDS = (
    "dip lip mad map maple may pad pip pod pop sap sip slice slick spice stick stock"
).split()


def test_differs_by_one_single_change():
    assert differs_by_one("dip", "lip") is True


def test_differs_by_one_identical_words():
    assert differs_by_one("dip", "dip") is False


def test_differs_by_one_two_changes():
    assert differs_by_one("dip", "lap") is False


def test_differs_by_one_different_lengths():
    assert differs_by_one("map", "maple") is False


def test_build_graph_is_symmetric_and_deduplicated():
    graph = build_graph(WORDS + ["dip", "lip"])
    assert list(graph) == WORDS
    for word, neighbours in graph.items():
        assert word not in neighbours
        for other in neighbours:
            assert word in graph[other]
            assert differs_by_one(word, other)


def test_build_graph_neighbours_keep_order():
    graph = build_graph(["cat", "bat", "cot", "dog"])
    assert graph["cat"] == ["bat", "cot"]
    assert graph["dog"] == []


def test_distance_to_self_is_zero():
    assert transformation_distance(WORDS, "spice", "spice") == 0


def test_distance_is_symmetric():
    forward = transformation_distance(WORDS, "spice", "stock")
    backward = transformation_distance(WORDS, "stock", "spice")
    assert forward == backward


def test_neighbouring_words_are_one_step_apart():
    assert transformation_distance(WORDS, "dip", "lip") == 1


def test_unreachable_word_gives_none():
    assert transformation_distance(WORDS, "dip", "maple") is None


def test_unknown_word_gives_none():
    assert transformation_distance(WORDS, "dip", "zzz") is None


def test_solve_sample():
    text = "1\n\n" + "\n".join(WORDS) + "\n*\nspice stock\nmay pod\n"
    assert solve(text) == "spice stock 4\nmay pod 3\n"


def test_solve_agrees_with_transformation_distance():
    text = "1\n" + " ".join(WORDS) + "\n*\ndip pip\nspice stock\n"
    lines = solve(text).splitlines()
    assert lines == [
        f"dip pip {transformation_distance(WORDS, 'dip', 'pip')}",
        f"spice stock {transformation_distance(WORDS, 'spice', 'stock')}",
    ]


def test_solve_prints_zero_for_unreachable():
    text = "1\ndip\nmaple\n*\ndip maple\n"
    assert solve(text) == "dip maple 0\n"


def test_solve_separates_cases_with_blank_line():
    text = "2\n\ncat\nbat\n*\ncat bat\n\nhot\ncot\n*\nhot cot\n"
    assert solve(text) == "cat bat 1\n\nhot cot 1\n"


def test_solve_stops_queries_at_blank_line():
    text = "1\ncat\nbat\n*\ncat bat\n\nbat cat\n"
    assert solve(text) == "cat bat 1\n"


def test_solve_unclosed_word_list_raises():
    with pytest.raises(ValueError):
        solve("1\ncat\nbat\n")


def test_solve_query_with_one_word_raises():
    with pytest.raises(ValueError):
        solve("1\ncat\nbat\n*\ncat\n")


def test_solve_empty_input_raises():
    with pytest.raises(ValueError):
        solve("")