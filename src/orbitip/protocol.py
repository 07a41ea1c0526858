"""Request/response protocol for Orbit IP readers.

HTTP GET with state in the query string, answered by a delimited text document.

Request:  GET /orbit.php?cmd=CO&id=01&uid=04A1B2C3&ulen=4
Response: <ORBIT>
          GRNT=05
          UI=820532
          </ORBIT>
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

DOCUMENT_OPEN = "<ORBIT>"
DOCUMENT_CLOSE = "</ORBIT>"


class Command(StrEnum):
    """Command tokens sent by the reader in the ``cmd`` query parameter."""

    POWER_UP = "PU"
    HEARTBEAT = "HB"
    CARD_READ = "CO"
    LEVEL_CHANGE = "SW"
    PING = "PG"


@dataclass(frozen=True)
class Ext:
    """Path extension the reader appends to its root path, with its protocol ID."""

    id: int
    suffix: str

    def __str__(self) -> str:
        return self.suffix


PHP = Ext(0, ".php")
ASP = Ext(1, ".asp")
CFM = Ext(2, ".cfm")
PL = Ext(3, ".pl")
HTM = Ext(4, ".htm")
HTML = Ext(5, ".html")
ASPX = Ext(6, ".aspx")
JSP = Ext(7, ".jsp")

EXTENSIONS: tuple[Ext, ...] = (PHP, ASP, CFM, PL, HTM, HTML, ASPX, JSP)

# Reader factory defaults: /orbit.php
DEFAULT_ROOT = "/orbit"
DEFAULT_EXT = PHP


def ext_from_suffix(suffix: str) -> Ext:
    """Look up a catalog extension by suffix, with or without the leading dot.

    Raises:
        ValueError: Suffix is not supported by the reader.

    """
    normalized = suffix if suffix.startswith(".") else f".{suffix}"
    for ext in EXTENSIONS:
        if ext.suffix == normalized.lower():
            return ext
    msg = f"Unsupported extension: {suffix!r}"
    raise ValueError(msg)


@dataclass(frozen=True)
class Request:
    """Parameters sent by the reader. All values are raw query strings."""

    date: str = ""
    time: str = ""
    id: str = ""
    ulen: str = ""
    uid: str = ""
    command: str = ""
    version: str = ""
    contact1: str = ""
    contact2: str = ""
    sid: str = ""
    data: str = ""
    psrc: str = ""
    md5: str = ""
    mac: str = ""
    relay: str = ""
    sd: str = ""
    rn: str = ""  # random nonce for reboot authorization, newer firmware only


# Request field -> query parameter name
_QUERY_NAMES: dict[str, str] = {
    "date": "date",
    "time": "time",
    "id": "id",
    "ulen": "ulen",
    "uid": "uid",
    "command": "cmd",
    "version": "ver",
    "contact1": "contact1",
    "contact2": "contact2",
    "sid": "sid",
    "data": "data",
    "psrc": "psrc",
    "md5": "md5",
    "mac": "mac",
    "relay": "relay",
    "sd": "sd",
    "rn": "rn",
}


def decode_request(query: Mapping[str, str]) -> Request:
    """Build a Request from query parameters. Missing parameters become empty strings."""
    return Request(**{field: query.get(name, "") for field, name in _QUERY_NAMES.items()})


def encode_document(fields: Mapping[str, str]) -> bytes:
    """Serialize response fields into the reader's <ORBIT> document.

    Empty values are written as bare flags (``DENY``). No fields means no document at all.
    """
    if not fields:
        return b""
    lines = [DOCUMENT_OPEN]
    lines.extend(f"{key}={value}" if value else key for key, value in fields.items())
    lines.append(DOCUMENT_CLOSE)
    return "\n".join(lines).encode("ascii")
