"""Tests for request decoding, the command/extension catalogs, and document encoding."""

import pytest

from orbitip.protocol import (
    ASPX,
    DEFAULT_EXT,
    DEFAULT_ROOT,
    EXTENSIONS,
    JSP,
    PHP,
    Command,
    Request,
    decode_request,
    encode_document,
    ext_from_suffix,
)


class TestCommand:
    """Command tokens."""

    def test_tokens(self):
        """Each command maps to its two-letter protocol token."""
        assert Command.POWER_UP == "PU"
        assert Command.HEARTBEAT == "HB"
        assert Command.CARD_READ == "CO"
        assert Command.LEVEL_CHANGE == "SW"
        assert Command.PING == "PG"

    def test_str(self):
        """str() of a command is the bare token."""
        assert str(Command.CARD_READ) == "CO"

    def test_dict_lookup_by_raw_token(self):
        """A dict keyed by Command can be looked up with the raw query string."""
        table = {Command.PING: "ping"}
        assert table.get("PG") == "ping"
        assert table.get("XX") is None


class TestExt:
    """Extension catalog."""

    def test_ids_and_suffixes(self):
        """Catalog is ordered by ID with the protocol's suffixes."""
        assert [(e.id, e.suffix) for e in EXTENSIONS] == [
            (0, ".php"),
            (1, ".asp"),
            (2, ".cfm"),
            (3, ".pl"),
            (4, ".htm"),
            (5, ".html"),
            (6, ".aspx"),
            (7, ".jsp"),
        ]

    def test_str_is_suffix(self):
        """str() of an extension is its suffix."""
        assert str(ASPX) == ".aspx"

    def test_defaults(self):
        """Reader factory defaults to /orbit.php."""
        assert f"{DEFAULT_ROOT}{DEFAULT_EXT}" == "/orbit.php"

    def test_from_suffix(self):
        """Lookup works with or without the leading dot, case-insensitively."""
        assert ext_from_suffix(".jsp") is JSP
        assert ext_from_suffix("php") is PHP
        assert ext_from_suffix(".ASPX") is ASPX

    def test_from_unknown_suffix(self):
        """Unknown suffixes are rejected."""
        with pytest.raises(ValueError, match="Unsupported extension"):
            ext_from_suffix(".py")


class TestDecodeRequest:
    """Query parameters -> Request."""

    def test_all_fields(self):
        """Every query parameter lands in its field."""
        query = {
            "date": "210915",
            "time": "101500",
            "id": "01",
            "ulen": "4",
            "uid": "04A1B2C3",
            "cmd": "CO",
            "ver": "3.1",
            "contact1": "0",
            "contact2": "1",
            "sid": "0000ABCD",
            "data": "payload",
            "psrc": "1",
            "md5": "00112233",
            "mac": "00:11:22:33:44:55",
            "relay": "0",
            "sd": "1",
            "rn": "deadbeef",
        }
        req = decode_request(query)
        assert req == Request(
            date="210915",
            time="101500",
            id="01",
            ulen="4",
            uid="04A1B2C3",
            command="CO",
            version="3.1",
            contact1="0",
            contact2="1",
            sid="0000ABCD",
            data="payload",
            psrc="1",
            md5="00112233",
            mac="00:11:22:33:44:55",
            relay="0",
            sd="1",
            rn="deadbeef",
        )

    def test_missing_fields_default_to_empty(self):
        """Absent parameters decode to empty strings."""
        req = decode_request({"cmd": "HB"})
        assert req.command == "HB"
        assert req.uid == ""
        assert req.rn == ""

    def test_empty_query(self):
        """Decoding never fails, even with nothing to decode."""
        assert decode_request({}) == Request()

    def test_unknown_parameters_ignored(self):
        """Parameters outside the protocol are dropped."""
        req = decode_request({"cmd": "PG", "bogus": "1"})
        assert req == Request(command="PG")

    def test_immutable(self):
        """Request records cannot be modified."""
        req = decode_request({"cmd": "PG"})
        with pytest.raises(AttributeError):
            req.command = "HB"  # type: ignore[misc]


class TestEncodeDocument:
    """<ORBIT> wire document."""

    def test_empty(self):
        """No fields means no body at all."""
        assert encode_document({}) == b""

    def test_single_value(self):
        """A field with a value is written as KEY=VALUE."""
        assert encode_document({"GRNT": "05"}) == b"<ORBIT>\nGRNT=05\n</ORBIT>"

    def test_bare_flag(self):
        """A field with an empty value is written as a bare key."""
        assert encode_document({"DENY": ""}) == b"<ORBIT>\nDENY\n</ORBIT>"

    def test_field_order_and_no_trailing_newline(self):
        """Fields keep mapping order; the document ends right after the closing tag."""
        body = encode_document({"UI": "820532", "DENY": "", "HB": "0060"})
        assert body == b"<ORBIT>\nUI=820532\nDENY\nHB=0060\n</ORBIT>"
        assert not body.endswith(b"\n")
