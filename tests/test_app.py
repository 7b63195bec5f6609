import base64

import pytest

from b64tool.app import Mode, clipboard_text, main, process
from b64tool.codec import Base64Error


def test_process_encode():
    assert process("hello world", Mode.ENCODE) == base64.b64encode(b"hello world").decode("ascii")


def test_process_accepts_mode_label():
    assert process("hello", "Encode") == process("hello", Mode.ENCODE)


def test_process_decode_round_trip():
    text = "caf\u00e9 and cr\u00e8me"
    assert process(process(text, Mode.ENCODE), Mode.DECODE) == text


def test_process_decode_url_safe_input():
    text = "??>>??"
    encoded = base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii")
    assert process(encoded, Mode.DECODE) == text


def test_process_decode_invalid_raises():
    with pytest.raises(Base64Error):
        process("not base64!", Mode.DECODE)


def test_process_unknown_mode_raises():
    with pytest.raises(ValueError):
        process("abc", "Reverse")


def test_process_decode_invalid_utf8_is_replaced():
    encoded = base64.b64encode(b"\xff").decode("ascii")
    assert process(encoded, Mode.DECODE) == "\ufffd"


def test_clipboard_text_takes_part_after_first_colon():
    assert clipboard_text("Result:  abc \n") == "abc"


def test_clipboard_text_keeps_later_colons():
    assert clipboard_text("a: b:c ") == "b:c"


def test_clipboard_text_without_colon_is_empty():
    assert clipboard_text("Zm9vYmFy") == ""


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "b64tool" in capsys.readouterr().out