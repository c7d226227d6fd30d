import logging

import pytest

import demo


def test_default_report(capsys):
    assert demo.main([]) == 0
    out = capsys.readouterr().out

    assert "SLICING REPORT" in out
    assert "1. 'z' not found" in out
    assert "2. First digit: none" in out
    assert "3. After capitalize_word('b'): " + repr("foo BAR\tspam eggs") in out
    assert "4. Sum of [2, 3, 4] sliced from [0, 1, 2, 3, 4, 5]: 9" in out
    assert "5. Tokens: foo, bar, spam, eggs" in out


def test_report_lines():
    lines = demo.build_report("A string full of words and 1 number.", "w")

    assert lines[1] == "1. 'z' not found"
    assert lines[2] == "2. First digit: '1' at 27"
    assert lines[3] == "   First upper case: 'A' at 0"
    assert lines[4] == "   First punctuation: '.' at 35"
    assert lines[5] == "3. After capitalize_word('w'): 'A string full of WORDS and 1 number.'"


def test_report_with_marker_absent():
    lines = demo.build_report("hello", "q")
    assert lines[5] == "3. After capitalize_word('q'): 'hello'"


def test_report_finds_probe():
    assert demo.build_report("zebra", "b")[1] == "1. 'z' found"


def test_empty_text():
    lines = demo.build_report("", "b")
    assert lines[2] == "2. First digit: none"
    assert lines[-1] == "5. Tokens: none"


def test_html_flag(capsys):
    assert demo.main(["--html", "--text", "<p>foo bar</p>"]) == 0
    assert "3. After capitalize_word('b'): 'foo BAR'" in capsys.readouterr().out


def test_marker_must_be_single_character():
    with pytest.raises(SystemExit) as excinfo:
        demo.main(["--marker", "ab"])
    assert excinfo.value.code == 2


def test_log_level_from_environment(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    monkeypatch.setenv(demo.LOG_LEVEL_ENV, "info")
    demo.configure_logging()
    assert captured["level"] == logging.INFO

    monkeypatch.setenv(demo.LOG_LEVEL_ENV, "bogus")
    demo.configure_logging()
    assert captured["level"] == logging.WARNING

    demo.configure_logging(verbose=True)
    assert captured["level"] == logging.DEBUG
