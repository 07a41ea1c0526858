"""Orbit IP reader protocol: request decoding, command dispatch, response encoding, HTTP server."""

from orbitip.mux import HandlerFunc as HandlerFunc
from orbitip.mux import Handlers as Handlers
from orbitip.mux import Reply as Reply
from orbitip.mux import ServeMux as ServeMux
from orbitip.protocol import ASP as ASP
from orbitip.protocol import ASPX as ASPX
from orbitip.protocol import CFM as CFM
from orbitip.protocol import DEFAULT_EXT as DEFAULT_EXT
from orbitip.protocol import DEFAULT_ROOT as DEFAULT_ROOT
from orbitip.protocol import EXTENSIONS as EXTENSIONS
from orbitip.protocol import HTM as HTM
from orbitip.protocol import HTML as HTML
from orbitip.protocol import JSP as JSP
from orbitip.protocol import PHP as PHP
from orbitip.protocol import PL as PL
from orbitip.protocol import Command as Command
from orbitip.protocol import Ext as Ext
from orbitip.protocol import Request as Request
from orbitip.response import ROOT_RESET as ROOT_RESET
from orbitip.response import UI as UI
from orbitip.response import BeepDuration as BeepDuration
from orbitip.response import ResponseError as ResponseError
from orbitip.response import ResponseValues as ResponseValues
from orbitip.server import create_app as create_app
from orbitip.server import new_server as new_server
