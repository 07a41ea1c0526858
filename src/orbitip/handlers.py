"""Stock command handlers used by ``orbitip serve``.

Log every reader event and answer with simple light/buzzer feedback.
Applications embedding orbitip register their own handlers instead.
"""

import logging

from orbitip.config import Config
from orbitip.mux import Handlers
from orbitip.protocol import Command, Request
from orbitip.response import UI, ResponseError, ResponseValues

logger = logging.getLogger(__name__)

POWER_UP_UI = UI(red_flash=True, buzzer_intermittent=True)
CARD_READ_UI = UI(green_flash=True, buzzer_intermittent=True)


def default_handlers(cfg: Config) -> Handlers:
    """Build the stock handler set for the given configuration."""

    def power_up(rv: ResponseValues, req: Request) -> None:
        logger.info("Power up: reader=%s ver=%s mac=%s psrc=%s", req.id, req.version, req.mac, req.psrc)
        rv.ui(POWER_UP_UI, 5, 50)
        if cfg.heartbeat_interval is not None:
            rv.heartbeat_interval(cfg.heartbeat_interval)

    def card_read(rv: ResponseValues, req: Request) -> None:
        logger.info("Card read: reader=%s uid=%s ulen=%s", req.id, req.uid, req.ulen)
        rv.ui(CARD_READ_UI, 3, 50)

    def level_change(rv: ResponseValues, req: Request) -> None:
        logger.info("Level change: reader=%s contact1=%s contact2=%s", req.id, req.contact1, req.contact2)

    def heartbeat(rv: ResponseValues, req: Request) -> None:
        logger.info("Heartbeat: reader=%s", req.id)

    def ping(rv: ResponseValues, req: Request) -> None:
        logger.info("Ping: reader=%s", req.id)
        if cfg.reboot_key is None or not req.rn or req.id not in cfg.reboot_readers:
            return
        try:
            rv.reboot(req.rn, cfg.reboot_key)
        except ResponseError as e:
            logger.warning("Cannot authorize reboot of reader %s: %s", req.id, e)
            return
        logger.info("Authorized reboot of reader %s", req.id)

    return Handlers(
        {
            Command.POWER_UP: power_up,
            Command.CARD_READ: card_read,
            Command.LEVEL_CHANGE: level_change,
            Command.HEARTBEAT: heartbeat,
            Command.PING: ping,
        }
    )
