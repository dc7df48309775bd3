"""
Entry Point Tests - Command Line

Runs main() against a fake stdin and checks output and exit codes.
"""

import io
import logging
import os
import sys
from unittest.mock import patch

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from caesar.main import (
    EXIT_INPUT_FAILED,
    EXIT_INTERRUPTED,
    EXIT_OK,
    build_parser,
    main,
    request_from_args,
)
from caesar.transformation.schemas import CipherRequest, Direction


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep main() from reconfiguring the root logger during tests"""
    with patch("caesar.main.setup_logging"):
        yield


def test_interactive_run(capsys):
    with patch("sys.stdin", io.StringIO("Hello, World!\n13\ne\n")):
        assert main([]) == EXIT_OK

    out = capsys.readouterr().out
    assert "Enter your phrase [Hello, world!]: " in out
    assert "Enter your shift [13]: " in out
    assert "Are you encrypting or decrypting? [E/d]: " in out
    assert "    Hello, World!\n    ⇵\n    Uryyb, Jbeyq!\n" in out


def test_interactive_defaults(capsys):
    with patch("sys.stdin", io.StringIO("\n\n\n")):
        assert main([]) == EXIT_OK
    assert "    Uryyb, jbeyq!" in capsys.readouterr().out


def test_interactive_reprompt(capsys):
    with patch("sys.stdin", io.StringIO("abc\n99x\n27\nq\nd\n")):
        assert main([]) == EXIT_OK

    out = capsys.readouterr().out
    assert out.count("Please enter a valid number.") == 1
    assert out.count("Are you encrypting or decrypting? [E/d]: ") == 2
    assert "    zab" in out


def test_closed_stdin_exits_with_error(capsys):
    with patch("sys.stdin", io.StringIO("some phrase\n")):
        assert main([]) == EXIT_INPUT_FAILED

    err = capsys.readouterr().err
    assert "Failed to read shift: input stream closed" in err


def test_closed_stdin_message_survives_silenced_logging(capsys):
    """The diagnostic reaches stderr even when logging is turned off"""
    logging.disable(logging.CRITICAL)
    try:
        with patch("sys.stdin", io.StringIO("")):
            assert main([]) == EXIT_INPUT_FAILED
    finally:
        logging.disable(logging.NOTSET)

    err = capsys.readouterr().err
    assert "Error: Failed to read phrase: input stream closed" in err


def test_undecodable_stdin_exits_with_error(capsys):
    stdin = io.TextIOWrapper(io.BytesIO(b"\xff\xfe bad\n\n\n"), encoding="utf-8")
    with patch("sys.stdin", stdin), patch("caesar.main.logger"):
        assert main([]) == EXIT_INPUT_FAILED

    err = capsys.readouterr().err
    assert "Error: Failed to read phrase" in err
    assert "Traceback" not in err


def test_keyboard_interrupt():
    with patch("caesar.main.run_session", side_effect=KeyboardInterrupt):
        assert main([]) == EXIT_INTERRUPTED


def test_flags_skip_prompts(capsys):
    with patch("sys.stdin", io.StringIO("")):
        assert main(["--phrase", "Uryyb", "--shift", "13", "--decrypt"]) == EXIT_OK

    out = capsys.readouterr().out
    assert "Enter your" not in out
    assert "    Hello" in out


def test_request_from_args():
    parser = build_parser()
    assert request_from_args(parser.parse_args([])) is None
    assert request_from_args(parser.parse_args(["--decrypt"])) == CipherRequest(
        direction=Direction.DECRYPT
    )
    assert request_from_args(parser.parse_args(["--shift", "3"])) == CipherRequest(
        shift=3
    )
    assert request_from_args(
        parser.parse_args(["--phrase", "  abc  "])
    ) == CipherRequest(phrase="abc")


def test_bad_shift_flag_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--shift", "-4"])
    assert exc_info.value.code == 2
    assert "invalid shift" in capsys.readouterr().err
