"""Tests for base64 text helpers."""

import pytest

from nodeql.utils.encoding import base64, unbase64


class TestBase64:
    """Tests for base64."""

    def test_encodes_ascii(self) -> None:
        assert base64("User:1") == "VXNlcjox"

    def test_encodes_with_padding(self) -> None:
        assert base64("Photo:1") == "UGhvdG86MQ=="

    def test_encodes_utf8(self) -> None:
        assert unbase64(base64("Usuário:ação")) == "Usuário:ação"

    def test_empty_string(self) -> None:
        assert base64("") == ""


class TestUnbase64:
    """Tests for unbase64."""

    def test_decodes(self) -> None:
        assert unbase64("VXNlcjox") == "User:1"

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "not base64!",
            "VXNlcjo",  # truncated
            "ñandú",  # non-ascii
            "//79",  # decodes to invalid utf-8
        ],
    )
    def test_invalid_input_decodes_to_empty_string(self, value: str) -> None:
        assert unbase64(value) == ""

    @pytest.mark.parametrize("value", [None, 1, b"VXNlcjox", ["VXNlcjox"]])
    def test_non_string_input_decodes_to_empty_string(self, value: object) -> None:
        assert unbase64(value) == ""
