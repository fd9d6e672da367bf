import json

from wordgrid.results import SolveResult, aggregate


def _found():
    return {
        "TESTS": [[(0, 0), (0, 1), (0, 2), (0, 3), (1, 2)]],
        "REST": [[(3, 0), (3, 1), (3, 2), (3, 3)]],
        "BEST": [[(1, 0), (1, 1), (1, 2), (1, 3)], [(1, 0), (0, 1), (0, 2), (0, 3)]],
    }


def test_aggregate_sorts_and_groups():
    result = aggregate(_found(), solve_time=1.5)
    assert result.words == ["BEST", "REST", "TESTS"]
    assert list(result.words_by_length) == [4, 5]
    assert result.words_by_length[4] == ["BEST", "REST"]
    assert result.words_by_length[5] == ["TESTS"]
    assert result.total_words == 3
    assert result.solve_time == 1.5


def test_aggregate_carries_paths_unchanged():
    found = _found()
    result = aggregate(found)
    assert result.word_paths == found
    assert list(result.word_paths) == result.words


def test_aggregate_empty():
    result = aggregate({})
    assert result == SolveResult(words=[], words_by_length={}, word_paths={}, total_words=0, solve_time=0.0)


def test_equality_ignores_timing():
    assert aggregate(_found(), solve_time=1.0) == aggregate(_found(), solve_time=99.0)


def test_to_dict_is_json_ready():
    doc = aggregate(_found(), solve_time=2.0).to_dict()
    assert doc["word_paths"]["REST"] == [[[3, 0], [3, 1], [3, 2], [3, 3]]]
    assert doc["total_words"] == 3
    assert doc["solve_time"] == 2.0

    decoded = json.loads(json.dumps(doc))
    assert decoded["words"] == ["BEST", "REST", "TESTS"]
    assert decoded["words_by_length"] == {"4": ["BEST", "REST"], "5": ["TESTS"]}
