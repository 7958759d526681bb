import io

import pytest

from algokit.interactive import find_heavy_prefix, main


def _judge(actual, log):
    def ask(indices):
        log.append(indices)
        return sum(actual[i - 1] for i in indices)

    return ask


@pytest.mark.parametrize("heavy", range(1, 8))
def test_finds_each_heavy_position(heavy):
    expected = [3, 1, 4, 1, 5, 9, 2]
    actual = list(expected)
    actual[heavy - 1] += 1
    log = []
    assert find_heavy_prefix(expected, _judge(actual, log)) == heavy
    assert len(log) <= len(expected).bit_length()


def test_no_heavy_position():
    expected = [2, 2, 2]
    assert find_heavy_prefix(expected, _judge(expected, [])) is None


def test_queries_are_contiguous_ranges():
    expected = [1] * 10
    actual = list(expected)
    actual[6] = 2
    log = []
    assert find_heavy_prefix(expected, _judge(actual, log)) == 7
    assert len(log) > 0
    assert all(
        indices == list(range(indices[0], indices[-1] + 1)) for indices in log
    )


def test_main_dialogue(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n3\n1 1 1\n3\n1\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["? 2 1 2", "? 1 1", "! 2"]


def test_main_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2\n5 5\n"))
    with pytest.raises(EOFError):
        main([])