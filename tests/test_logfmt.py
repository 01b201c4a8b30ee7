from __future__ import annotations

from assetledger._logfmt import preview_for_log


def test_preview_truncates_long_strings() -> None:
    preview = preview_for_log({"value": "x" * 600}, max_string=10)

    assert preview["value"].startswith("x" * 10)
    assert "<truncated>" in preview["value"]


def test_preview_decodes_utf8_bytes() -> None:
    assert preview_for_log(b'{"assetID":"A1"}') == '{"assetID":"A1"}'


def test_preview_summarizes_binary_bytes() -> None:
    assert preview_for_log(b"\xff\xfe\x00") == "<bytes:3b>"


def test_preview_recurses_into_sequences() -> None:
    assert preview_for_log(["a" * 5, 1, None], max_string=2) == ["aa…<truncated>", 1, None]
