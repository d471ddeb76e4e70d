## posixopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import io
import sys

from posixopt.scanner import Scanner
from posixopt.diagnostics import StreamReporter, program_name, format_diagnostic


def test_program_name_from_paths():
    assert program_name("/usr/local/bin/tool") == "tool"
    assert program_name("C:\\Tools\\example.exe") == "example.exe"
    assert program_name("") == "Error"


def test_program_name_defaults_to_argv0(monkeypatch):
    monkeypatch.setattr(sys, 'argv', ["/opt/bin/frob", "-x"])
    assert program_name() == "frob"


def test_format_names_program_and_option():
    assert format_diagnostic("tool", "invalid option", 'x') == "tool : invalid option '-x'"


def test_stream_reporter_writes_to_stderr_by_default(capsys):
    scanner = Scanner(reporter=StreamReporter("tool"))
    scanner.scan_next(["tool", "-x"], "a")
    captured = capsys.readouterr()
    assert captured.err == "tool : invalid option '-x'\n"
    assert captured.out == ""


def test_stream_reporter_missing_argument_message():
    stream = io.StringIO()
    scanner = Scanner(reporter=StreamReporter("tool", file=stream))
    scanner.scan_next(["tool", "-f"], "f:")
    assert stream.getvalue() == "tool : argument required for option '-f'\n"


def test_nothing_written_in_silent_mode_or_when_disabled(capsys):
    Scanner(reporter=StreamReporter("tool")).scan_next(["tool", "-x"], ":a")
    Scanner(reporter=StreamReporter("tool"), report_errors=False).scan_next(["tool", "-x"], "a")
    assert capsys.readouterr().err == ""
