"""Response builder: validated setters for every field the reader understands."""

import ipaddress
import string
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import IntEnum

from orbitip.crypto import reboot_digest
from orbitip.protocol import EXTENSIONS, Ext

# ROOT value that restores the reader's factory root path
ROOT_RESET = "000000000"

ROOT_MAX_LENGTH = 8
HOST_MAX_LENGTH = 64
SESSION_ID_LENGTH = 8
MD5_LENGTH = 16


class ResponseError(ValueError):
    """A setter received a value outside the field's protocol domain."""

    def __init__(self, field: str, message: str) -> None:
        """Initialize with the protocol field name and a human-readable message.

        Args:
            field: Protocol field key (e.g. "GRNT").
            message: Human-readable error description.

        """
        super().__init__(message)
        self.field = field


class BeepDuration(IntEnum):
    """Beep length for the BEEP field."""

    LONG = 0
    SHORT = 1


@dataclass(frozen=True)
class UI:
    """LED and buzzer flags for a UI/OFUI pattern."""

    green_on: bool = False
    green_flash: bool = False
    amber_on: bool = False
    amber_flash: bool = False
    red_on: bool = False
    red_flash: bool = False
    buzzer_on: bool = False
    buzzer_intermittent: bool = False

    def to_byte(self) -> int:
        """Pack the flags LSB-first: green_on is bit 0, buzzer_intermittent is bit 7."""
        flags = (
            self.green_on,
            self.green_flash,
            self.amber_on,
            self.amber_flash,
            self.red_on,
            self.red_flash,
            self.buzzer_on,
            self.buzzer_intermittent,
        )
        return sum(1 << bit for bit, flag in enumerate(flags) if flag)


def _flag(value: bool) -> str:
    return "1" if value else "0"


def _require_range(field: str, value: int, low: int, high: int, unit: str = "") -> None:
    """Raise if value is outside [low, high]."""
    if not low <= value <= high:
        raise ResponseError(field, f"{field} must be between {low}{unit} and {high}{unit}, got {value}{unit}")


def _decode_hex(field: str, value: str) -> bytes:
    """Strictly decode a hex string: hex digits only, even length, no whitespace."""
    if len(value) % 2 or any(c not in string.hexdigits for c in value):
        raise ResponseError(field, f"{field} must be a hex string, got {value!r}")
    return bytes.fromhex(value)


def _require_hex(field: str, value: str, length: int) -> None:
    """Raise unless value is exactly `length` hex characters."""
    if len(value) != length:
        raise ResponseError(field, f"{field} must be {length} hex characters, got {len(value)}")
    _decode_hex(field, value)


def _pad_ipv4(field: str, value: str) -> str:
    """Zero-pad each octet to 3 digits: 192.168.1.250 -> 192.168.001.250."""
    try:
        address = ipaddress.IPv4Address(value)
    except ValueError:
        raise ResponseError(field, f"{field} must be an IPv4 address, got {value!r}") from None
    return ".".join(f"{octet:03d}" for octet in address.packed)


def _encode_ui(field: str, ui: UI, cycles: int, interval: int) -> str:
    _require_range(field, cycles, 0, 255)
    _require_range(field, interval, 0, 255, "ms")
    return bytes((ui.to_byte(), cycles, interval)).hex()


class ResponseValues(Mapping[str, str]):
    """Fields to send back to the reader, keyed by protocol name.

    Read-only as a mapping; fields are written only through the typed setters below.
    Every setter validates before writing, so a failed call leaves the builder unchanged.
    Setting a field again overwrites it.
    """

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self._fields: dict[str, str] = {}

    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"ResponseValues({self._fields!r})"

    # --- Access control ---

    def grant(self, seconds: int) -> None:
        """Set GRNT: put the reader into "grant access" state.

        The orange LED stays on for the given seconds and, if the relay is active,
        the relay is engaged for the same time.

        Raises:
            ResponseError: seconds outside 1..99.

        """
        _require_range("GRNT", seconds, 1, 99, "s")
        self._fields["GRNT"] = f"{seconds:02d}"

    def deny(self) -> None:
        """Set DENY: put the reader into "deny access" state."""
        self._fields["DENY"] = ""

    def beep(self, duration: BeepDuration) -> None:
        """Set BEEP: sound the buzzer once, short or long.

        Raises:
            ResponseError: duration is not a BeepDuration value.

        """
        try:
            duration = BeepDuration(duration)
        except ValueError:
            raise ResponseError("BEEP", f"BEEP must be short (1) or long (0), got {duration!r}") from None
        self._fields["BEEP"] = str(int(duration))

    def relay(self, enable: bool) -> None:
        """Set RELAY: enable or disable the relay on GRNT."""
        self._fields["RELAY"] = _flag(enable)

    def default_relay(self, enable: bool) -> None:
        """Set DEFRLY: relay state the reader falls back to."""
        self._fields["DEFRLY"] = _flag(enable)

    def pass_back_time(self, ms: int) -> None:
        """Set PBKT: period between repeated reads of a card held in the field.

        Raises:
            ResponseError: ms outside 1..9999.

        """
        _require_range("PBKT", ms, 1, 9999, "ms")
        self._fields["PBKT"] = f"{ms:04d}"

    # --- LEDs, buzzer, UI patterns ---

    def led(self, on: bool) -> None:
        """Set LED: switch the yellow/orange LED on or off."""
        self._fields["LED"] = _flag(on)

    def led1(self, ms: int) -> None:
        """Set LED1: light the red LED for ms milliseconds (1..9999)."""
        _require_range("LED1", ms, 1, 9999, "ms")
        self._fields["LED1"] = f"{ms:04d}"

    def led2(self, ms: int) -> None:
        """Set LED2: light the orange LED for ms milliseconds (1..9999)."""
        _require_range("LED2", ms, 1, 9999, "ms")
        self._fields["LED2"] = f"{ms:04d}"

    def led3(self, ms: int) -> None:
        """Set LED3: light the green LED for ms milliseconds (1..9999)."""
        _require_range("LED3", ms, 1, 9999, "ms")
        self._fields["LED3"] = f"{ms:04d}"

    def ui(self, ui: UI, cycles: int, interval: int) -> None:
        """Set UI: run an LED/buzzer pattern for a number of cycles.

        Encoded as three bytes (flags, cycles, interval in ms) in hex.

        Raises:
            ResponseError: cycles or interval outside 0..255.

        """
        self._fields["UI"] = _encode_ui("UI", ui, cycles, interval)

    def offline_ui(self, ui: UI, cycles: int, interval: int) -> None:
        """Set OFUI: the UI pattern used while the reader is in offline mode.

        Raises:
            ResponseError: cycles or interval outside 0..255.

        """
        self._fields["OFUI"] = _encode_ui("OFUI", ui, cycles, interval)

    def silent_mode(self, enable: bool) -> None:
        """Set SIL: enable or disable silent mode."""
        self._fields["SIL"] = _flag(enable)

    # --- Reader behaviour ---

    def heartbeat_interval(self, seconds: int) -> None:
        """Set HB: seconds between heartbeat requests.

        Raises:
            ResponseError: seconds outside 1..9999.

        """
        _require_range("HB", seconds, 1, 9999, "s")
        self._fields["HB"] = f"{seconds:04d}"

    def rbm(self, enable: bool) -> None:
        """Set RBM: enable or disable CB requests following a ping."""
        self._fields["RBM"] = _flag(enable)

    def offline_mode(self, enable: bool) -> None:
        """Set OFLE: enable or disable offline mode."""
        self._fields["OFLE"] = _flag(enable)

    def timeout(self, ms: int) -> None:
        """Set RTR: ARP and TCP timeout in milliseconds (0..65535).

        Factory default is 2000ms; the firmware enforces a 500ms minimum.
        The value is unknown after a firmware update, so set it from a PU response.

        Raises:
            ResponseError: ms outside 0..65535.

        """
        _require_range("RTR", ms, 0, 65535, "ms")
        self._fields["RTR"] = f"{ms:04d}"

    def retry(self, count: int) -> None:
        """Set RCR: ARP/TCP retransmissions after an RTR timeout (0..99)."""
        _require_range("RCR", count, 0, 99)
        self._fields["RCR"] = str(count)

    def http_timeout(self, seconds: int) -> None:
        """Set HRTM: overall HTTP request/response timeout (5..9 seconds)."""
        _require_range("HRTM", seconds, 5, 9, "s")
        self._fields["HRTM"] = str(seconds)

    def http_retry(self, count: int) -> None:
        """Set HRTR: failed HTTP requests in a row before the server is assumed down (3..9)."""
        _require_range("HRTR", count, 3, 9)
        self._fields["HRTR"] = str(count)

    # --- Network configuration ---

    def root(self, path: str) -> None:
        """Set ROOT: web server root path the reader calls, up to 8 characters.

        Pass ROOT_RESET to restore the factory default.

        Raises:
            ResponseError: path longer than 8 characters or not ASCII.

        """
        if path != ROOT_RESET and len(path) > ROOT_MAX_LENGTH:
            raise ResponseError("ROOT", f"ROOT can be no more than {ROOT_MAX_LENGTH} characters: {path} is {len(path)}")
        if not path.isascii():
            raise ResponseError("ROOT", f"ROOT must be ASCII: {path!r}")
        self._fields["ROOT"] = path

    def ext(self, ext: Ext) -> None:
        """Set EXT: path extension the reader uses for its requests.

        Raises:
            ResponseError: ext is not one of the supported extensions.

        """
        if ext not in EXTENSIONS:
            raise ResponseError("EXT", f"Unsupported extension: {ext!r}")
        self._fields["EXT"] = str(ext.id)

    def dhcp(self, enable: bool) -> None:
        """Set DHCP: obtain the reader's address via DHCP."""
        self._fields["DHCP"] = _flag(enable)

    def ip(self, address: str) -> None:
        """Set IP: static reader address, sent with zero-padded octets.

        Raises:
            ResponseError: address is not IPv4.

        """
        self._fields["IP"] = _pad_ipv4("IP", address)

    def gateway(self, address: str) -> None:
        """Set GW: default gateway, sent with zero-padded octets."""
        self._fields["GW"] = _pad_ipv4("GW", address)

    def subnet_mask(self, mask: str) -> None:
        """Set NM: subnet mask, sent with zero-padded octets."""
        self._fields["NM"] = _pad_ipv4("NM", mask)

    def web_server(self, address: str) -> None:
        """Set WS: address of the web server the reader sends requests to."""
        self._fields["WS"] = _pad_ipv4("WS", address)

    def port(self, port: int) -> None:
        """Set PT: web server port, zero-padded to 5 digits."""
        self._fields["PT"] = f"{port:05d}"

    def host(self, name: str) -> None:
        """Set WN: web server host name.

        Raises:
            ResponseError: name longer than 64 characters or not ASCII.

        """
        if len(name) > HOST_MAX_LENGTH:
            raise ResponseError("WN", f"host can be no more than {HOST_MAX_LENGTH} characters, got {len(name)}")
        if not name.isascii():
            raise ResponseError("WN", f"host must be ASCII: {name!r}")
        self._fields["WN"] = name

    # --- Session and authentication ---

    def session_id(self, sid: str) -> None:
        """Set SID: current session ID, exactly 8 hex characters.

        Raises:
            ResponseError: Wrong length or not hex.

        """
        _require_hex("SID", sid, SESSION_ID_LENGTH)
        self._fields["SID"] = sid

    def md5(self, secret: str) -> None:
        """Set MD5: shared secret used for reboot authorization, exactly 16 hex characters.

        Raises:
            ResponseError: Wrong length or not hex.

        """
        _require_hex("MD5", secret, MD5_LENGTH)
        self._fields["MD5"] = secret

    def reboot(self, nonce: str, key: str) -> None:
        """Set RBT: authorize a reboot requested in a PG ping.

        The reader sends a random number (``rn``) with the ping; the answer is the MD5
        digest of that number followed by the secret previously set with md5().

        Raises:
            ResponseError: nonce or key is not valid hex.

        """
        self._fields["RBT"] = reboot_digest(_decode_hex("RBT", nonce), _decode_hex("RBT", key))
