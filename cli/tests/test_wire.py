from __future__ import annotations

import xmlrpc.client

import pytest

from afinimaki_client import FaultError, ResponseError
from afinimaki_client.wire import I4, I8, dumps_call, loads_response, scalar_value


def test_dumps_call_uses_typed_integers() -> None:
    body = dumps_call("set_rate", ["key", "code", I8(1), I8(2), I4(5), True]).decode("utf-8")
    assert "<methodName>set_rate</methodName>" in body
    assert "<value><i8>1</i8></value>" in body
    assert "<value><i8>2</i8></value>" in body
    assert "<value><i4>5</i4></value>" in body
    assert "<value><boolean>1</boolean></value>" in body
    assert "<value><string>key</string></value>" in body


def test_dumps_call_encodes_arrays_of_i8() -> None:
    body = dumps_call("estimate_multiple_rates", [I8(3), [I8(10), I8(20)]]).decode("utf-8")
    assert "<array><data>" in body
    assert "<value><i8>10</i8></value>" in body
    assert "<value><i8>20</i8></value>" in body


def test_i8_keeps_64_bit_precision() -> None:
    big = 2 ** 63 - 1
    params, method = xmlrpc.client.loads(dumps_call("estimate_rate", [I8(big), I8(-big - 1)]))
    assert method == "estimate_rate"
    assert params == (big, -big - 1)


def test_i8_overflow_is_rejected() -> None:
    with pytest.raises(OverflowError):
        dumps_call("estimate_rate", [I8(2 ** 63)])


def test_i4_overflow_is_rejected() -> None:
    with pytest.raises(OverflowError):
        dumps_call("set_rate", [I4(2 ** 31)])


def test_loads_response_returns_single_value() -> None:
    body = xmlrpc.client.dumps(([[101, 0.9], [202, 0.4]],), methodresponse=True).encode("utf-8")
    assert loads_response(body) == [[101, 0.9], [202, 0.4]]


def test_loads_response_maps_fault() -> None:
    body = xmlrpc.client.dumps(xmlrpc.client.Fault(4, "Bad auth code"), methodresponse=True).encode("utf-8")
    with pytest.raises(FaultError) as exc:
        loads_response(body)
    assert exc.value.status_code == 4
    assert str(exc.value) == "Bad auth code"


def test_loads_response_rejects_garbage() -> None:
    with pytest.raises(ResponseError):
        loads_response(b"<html>502 Bad Gateway")


def test_scalar_value() -> None:
    assert scalar_value(I8(5)) == 5
    assert type(scalar_value(I8(5))) is int
    assert scalar_value([I8(1)]) is None
    assert scalar_value("x") == "x"


def test_loads_response_rejects_bad_scalar() -> None:
    body = (
        b"<?xml version='1.0'?><methodResponse><params><param>"
        b"<value><int>abc</int></value>"
        b"</param></params></methodResponse>"
    )
    with pytest.raises(ResponseError):
        loads_response(body)
