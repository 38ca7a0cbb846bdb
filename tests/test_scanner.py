"""Tests for locfile.scanner."""

import logging

import pytest

from locfile.charsets import is_cjk
from locfile.encoding import EncodingVerdict
from locfile.exceptions import SourceReadError
from locfile.scanner import (
    ByteSequenceIssue,
    FlaggedCharacter,
    scan_buffer,
    scan_file,
    scan_mixed_bytes,
    scan_simplified_text,
    scan_utf8_text,
)


class TestUtf8Scan:
    def test_flags_simplified_only_character(self):
        flagged = scan_utf8_text("ASD_Country=国家")
        assert len(flagged) == 1
        item = flagged[0]
        assert item.line_number == 1
        assert item.char == "国"
        assert item.code_label == "U+56FD"
        assert item.traditional == "國"

    def test_context_default_width(self):
        flagged = scan_utf8_text("ASD_Country=国家")
        assert flagged[0].context == "D_Country=国家"

    def test_context_custom_width(self):
        flagged = scan_utf8_text("ASD_Country=国家", context_width=2)
        assert flagged[0].context == "y=国家"

    def test_context_zero_width(self):
        flagged = scan_utf8_text("a=门b", context_width=0)
        assert flagged[0].context == "门"

    def test_line_numbers(self):
        flagged = scan_utf8_text("a=1\r\nb=门\r\nc=开车\r\n")
        assert [(f.line_number, f.char) for f in flagged] == [(2, "门"), (3, "开"), (3, "车")]
        assert "\r" not in flagged[0].context

    def test_traditional_text_is_clean(self):
        assert scan_utf8_text("ASD_Country=國家\n") == []

    def test_custom_table(self):
        flagged = scan_utf8_text("x=这个", table={"这": "這"})
        assert [f.char for f in flagged] == ["这"]


def test_simplified_scan_flags_every_cjk_character():
    flagged = scan_simplified_text("k=家门\nascii only\n")
    assert [f.char for f in flagged] == ["家", "门"]
    assert all(f.line_number == 1 for f in flagged)


class TestMixedBytes:
    def test_offsets_and_lines(self):
        issues = scan_mixed_bytes(b"ok\n\x80\xb0\xa1x\n")
        assert issues == [ByteSequenceIssue(2, 4, 0xB0, 0xA1)]
        assert issues[0].hex == "B0 A1"

    def test_pair_consumes_two_bytes(self):
        issues = scan_mixed_bytes(b"\xb0\xb0\xb0\xb0")
        assert [i.offset for i in issues] == [0, 2]

    def test_clean_ascii(self):
        assert scan_mixed_bytes(b"a=1\nb=2\n") == []


class TestScanBuffer:
    def test_utf8(self):
        report = scan_buffer("\ufeffASD_Country=国家\n".encode("utf-8"))
        assert report.verdict is EncodingVerdict.UTF8
        assert [f.char for f in report.flagged] == ["国"]
        assert report.flagged[0].context == "D_Country=国家"
        assert report.has_findings

    def test_utf8_clean(self):
        report = scan_buffer(b"key=value\n")
        assert report.verdict is EncodingVerdict.UTF8
        assert not report.has_findings

    def test_gbk_flags_all_cjk(self):
        report = scan_buffer(b"key=\x81\x40\x81\x80\n")
        assert report.verdict is EncodingVerdict.SIMPLIFIED_BYTE_ENCODING
        assert len(report.flagged) == 2
        assert all(is_cjk(f.char) for f in report.flagged)

    def test_undecodable_gbk_pair_is_logged(self, caplog):
        # 0x81 0x7F 符合 GBK 字节规则，但解码器没有对应字符
        caplog.set_level(logging.DEBUG, logger="locfile.scanner")
        report = scan_buffer(b"key=\x81\x40\x81\x7f\n")
        assert report.verdict is EncodingVerdict.SIMPLIFIED_BYTE_ENCODING
        assert "replaced with U+FFFD while decoding as gbk" in caplog.text

    def test_clean_decode_logs_nothing_replaced(self, caplog):
        caplog.set_level(logging.DEBUG, logger="locfile.scanner")
        scan_buffer("ASD_Country=國家\n".encode("big5"))
        assert "U+FFFD" not in caplog.text

    def test_big5_counts_characters(self):
        buffer = "ASD_Country=國家\n".encode("big5")
        report = scan_buffer(buffer)
        assert report.verdict is EncodingVerdict.TRADITIONAL_BYTE_ENCODING
        assert report.character_count == len("ASD_Country=國家\n")
        assert not report.has_findings

    def test_unknown_falls_back_to_byte_scan(self):
        report = scan_buffer(b"ok\n\x80\xb0\xa1x\n")
        assert report.verdict is EncodingVerdict.UNKNOWN
        assert len(report.byte_issues) == 1


class TestScanFile:
    def test_scan_file(self, write_bytes):
        path = write_bytes("global.ini", "a=1\nb=长\n".encode("utf-8"))
        report = scan_file(path, context_width=1)
        assert report.path == str(path)
        assert report.flagged == [FlaggedCharacter(2, "长", "=长", "長")]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceReadError):
            scan_file(tmp_path / "nope.ini")
