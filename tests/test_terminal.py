import io

from paxkit.terminal import Terminal

TEXT = (
    "A scalar value. Long long long long long long long long long long long "
    "long long long long long long long long long long long long long."
)


def _wrapped(terminal, tab, text):
    out = io.StringIO()
    returned = terminal.wrap(out, tab, text)
    assert returned is out
    return out.getvalue()


def test_detect_from_environment(monkeypatch):
    monkeypatch.setenv("COLUMNS", "123")
    monkeypatch.setenv("LINES", "45")
    term = Terminal()
    assert term.chars == 123
    assert term.lines == 45


def test_explicit_size():
    term = Terminal(50, 20, detect=False)
    assert (term.chars, term.lines) == (50, 20)


def test_str_uses_bold_numbers():
    term = Terminal(50, 20, detect=False)
    assert str(term) == "\033[1m50\033[0m chars by \033[1m20\033[0m lines"


def test_short_text_is_one_line():
    term = Terminal(40, 10, detect=False)
    assert _wrapped(term, 4, "short text") == "short text\n"


def test_wraps_at_space_with_prefix():
    term = Terminal(5, 10, detect=False)
    assert _wrapped(term, 2, "aaa bbb") == "aaa\n  bbb\n"


def test_wrapped_lines_fit_and_keep_words():
    term = Terminal(30, 10, detect=False)
    tab = 6
    lines = _wrapped(term, tab, TEXT).split("\n")
    assert lines[-1] == ""
    body = lines[:-1]
    assert len(body[0]) <= term.chars
    for line in body[1:]:
        assert line.startswith(" " * tab)
        assert len(line) - tab <= term.chars - tab
    assert " ".join(line.strip() for line in body).split() == TEXT.split()


def test_newline_forces_break():
    term = Terminal(80, 10, detect=False)
    result = _wrapped(term, 0, "first\nsecond")
    assert result.split("\n")[:2] == ["first", "second"]


def test_long_word_is_cut_without_losing_characters():
    term = Terminal(10, 10, detect=False)
    word = "x" * 25
    lines = _wrapped(term, 0, word).splitlines()
    assert "".join(lines) == word
    assert all(len(line) <= term.chars for line in lines)


def test_empty_text_writes_nothing():
    term = Terminal(10, 10, detect=False)
    assert _wrapped(term, 3, "") == ""