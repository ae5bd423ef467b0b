from __future__ import annotations

import xmlrpc.client
from typing import Any, Iterable
from xml.parsers.expat import ExpatError
from xml.sax.saxutils import escape

from .errors import FaultError, ResponseError

MAXI8 = 2 ** 63 - 1
MINI8 = -2 ** 63


class I8(int):
    """Integer sent as <i8>."""


class I4(int):
    """Integer sent as <i4>."""


class TypedMarshaller(xmlrpc.client.Marshaller):
    dispatch = dict(xmlrpc.client.Marshaller.dispatch)

    def dump_i8(self, value, write):
        if value > MAXI8 or value < MINI8:
            raise OverflowError("int exceeds XML-RPC i8 limits")
        write("<value><i8>")
        write(str(int(value)))
        write("</i8></value>\n")

    dispatch[I8] = dump_i8

    def dump_i4(self, value, write):
        if value > xmlrpc.client.MAXINT or value < xmlrpc.client.MININT:
            raise OverflowError("int exceeds XML-RPC i4 limits")
        write("<value><i4>")
        write(str(int(value)))
        write("</i4></value>\n")

    dispatch[I4] = dump_i4


def scalar_value(arg: Any) -> Any:
    if isinstance(arg, (list, tuple)):
        return None
    if isinstance(arg, int) and not isinstance(arg, bool):
        return int(arg)
    return arg


def dumps_call(method: str, params: Iterable[Any]) -> bytes:
    m = TypedMarshaller("utf-8", allow_none=False)
    body = m.dumps(tuple(params))
    return (
        "<?xml version='1.0'?>\n"
        "<methodCall>\n"
        f"<methodName>{escape(method)}</methodName>\n"
        f"{body}"
        "</methodCall>\n"
    ).encode("utf-8")


def loads_response(body: bytes) -> Any:
    try:
        params, _ = xmlrpc.client.loads(body)
    except xmlrpc.client.Fault as e:
        code = e.faultCode if isinstance(e.faultCode, int) else 0
        raise FaultError(code, str(e.faultString), str(e.faultCode)) from e
    except (ExpatError, xmlrpc.client.ResponseError, ValueError, TypeError) as e:
        raise ResponseError(f"malformed XML-RPC response: {e}") from e
    if not params:
        return None
    return params[0]
