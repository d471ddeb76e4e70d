## posixopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

import posixopt.api as P
from posixopt.diagnostics import StreamReporter


@pytest.fixture(autouse=True)
def fresh_default_scanner():
    P.reset()
    P.configure(report_errors=True, reporter=StreamReporter())
    yield
    P.reset()


def test_getopt_loop_like_posix():
    argv = ["example", "-a", "-f", "file.txt", "-1", "operand"]
    seen = []
    while (c := P.getopt(argv, ":hva1f:")) is not None:
        seen.append((c, P.optarg))
    assert seen == [('a', None), ('f', "file.txt"), ('1', None)]
    assert argv[P.optind:] == ["operand"]


def test_getopt_error_codes(capsys):
    argv = ["example", "-x", "-f"]
    assert P.getopt(argv, ":f:") == '?'
    assert P.optopt == 'x'
    assert P.getopt(argv, ":f:") == ':'
    assert P.optopt == 'f'
    assert P.getopt(argv, ":f:") is None
    assert capsys.readouterr().err == ""


def test_opterr_controls_default_diagnostics(capsys):
    messages = []
    P.configure(report_errors=False, reporter=lambda reason, char: messages.append(char))
    assert P.opterr is False
    assert P.getopt(["example", "-x"], "a") == '?'
    assert messages == []

    P.reset()
    P.configure(report_errors=True)
    assert P.getopt(["example", "-x"], "a") == '?'
    assert messages == ['x']


def test_reset_restarts_default_scanner():
    assert P.getopt(["example", "-a"], "a") == 'a'
    assert P.getopt(["example", "-a"], "a") is None
    P.reset()
    assert P.optind == 1
    assert P.getopt(["example", "-a"], "a") == 'a'


def test_scanner_attributes_are_forwarded():
    P.getopt(["example", "-ab"], "ab")
    assert P.char_offset == 2
    assert P.finished is False


def test_parse_returns_outcomes_and_operands():
    outcomes, operands = P.parse(["prog", "-a", "-bvalue", "x", "-a"], "ab:")
    assert outcomes == [P.Option('a'), P.Option('b', "value")]
    assert operands == ["x", "-a"]


def test_parse_uses_its_own_scanner():
    P.getopt(["example", "-ab"], "ab")
    P.parse(["prog", "-a"], "a")
    assert P.char_offset == 2


def test_parse_reports_through_given_reporter():
    messages = []
    outcomes, operands = P.parse(["prog", "-q"], "a", reporter=lambda reason, char: messages.append((reason, char)))
    assert outcomes == [P.UnknownOption('q')]
    assert operands == []
    assert messages == [("invalid option", 'q')]


def test_invalid_optstring_raises_before_scanning():
    with pytest.raises(P.OptSpecError):
        P.getopt(["example", "-a"], "a::")
    assert P.optind == 1


def test_assigning_opterr_silences_default_scanner(capsys):
    P.opterr = 0
    assert P.opterr is False
    assert P.getopt(["example", "-x"], "a") == '?'
    assert capsys.readouterr().err == ""

    P.opterr = 1
    P.reset()
    assert P.getopt(["example", "-x"], "a") == '?'
    assert "invalid option '-x'" in capsys.readouterr().err


def test_assigning_optind_restarts_scanning():
    argv = ["example", "-a"]
    assert P.getopt(argv, "a") == 'a'
    assert P.getopt(argv, "a") is None
    P.optind = 1
    assert P.optind == 1
    assert P.getopt(argv, "a") == 'a'


def test_assigning_optind_skips_leading_arguments():
    P.optind = 2
    assert P.getopt(["example", "-x", "-a"], "a") == 'a'


def test_other_module_attributes_are_plain_assignments():
    P.custom_setting = 3
    try:
        assert P.custom_setting == 3
        assert not hasattr(P._SCANNER, 'custom_setting')
    finally:
        del P.custom_setting
