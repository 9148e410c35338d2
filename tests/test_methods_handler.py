import pytest

from served.methods_handler import MethodsHandler


def dummy(res, req):
    pass


def test_create_handlers():
    h = MethodsHandler("/dummy")
    h.post(dummy).get(dummy).method("CONNECT", dummy).put(dummy)

    assert h.method_supported("POST") is True
    assert h.method_supported("GET") is True
    assert h.method_supported("CONNECT") is True
    assert h.method_supported("PUT") is True

    assert h.method_supported("DELETE") is False
    assert h.method_supported("HEAD") is False
    assert h.method_supported("BREW") is False


def test_endpoint_propagation_no_description():
    h = MethodsHandler("/this/path/is/great")
    h.post(dummy).get(dummy).method("CONNECT", dummy).put(dummy)

    endpoints = {}
    h.propagate_endpoint(endpoints)

    assert "/this/path/is/great" in endpoints
    info, methods = endpoints["/this/path/is/great"]
    assert len(methods) == 4
    assert info == ""
    assert set(methods) == {"POST", "GET", "CONNECT", "PUT"}


def test_endpoint_propagation_with_description():
    h = MethodsHandler("/this/path/is/great", "This is an endpoint for great stuff")
    h.get(dummy).put(dummy).delete(dummy)

    endpoints = {}
    h.propagate_endpoint(endpoints)

    info, methods = endpoints["/this/path/is/great"]
    assert len(methods) == 3
    assert info == "This is an endpoint for great stuff"
    assert set(methods) == {"GET", "PUT", "DELETE"}


def test_methods_listed_in_canonical_order():
    h = MethodsHandler("/first/test")
    h.delete(dummy).post(dummy).get(dummy)
    endpoints = {}
    h.propagate_endpoint(endpoints)
    assert endpoints["/first/test"][1] == ["GET", "POST", "DELETE"]


def test_registration_chains_and_returns_same_object():
    h = MethodsHandler("/x")
    assert h.get(dummy) is h
    assert h.method("PATCH", dummy) is h


def test_getitem_returns_registered_handler():
    calls = []

    def handler(res, req):
        calls.append((res, req))

    h = MethodsHandler("/x").get(handler)
    found = h["GET"]
    assert found is handler
    found("res", "req")
    assert calls == [("res", "req")]


def test_getitem_missing_method_raises():
    h = MethodsHandler("/x").get(dummy)
    assert h.method_supported("POST") is False
    with pytest.raises(KeyError):
        h.__getitem__("POST")
    assert h["GET"] is dummy


def test_later_registration_replaces_earlier():
    def first(res, req):
        pass

    def second(res, req):
        pass

    h = MethodsHandler("/x").get(first).get(second)
    assert h["GET"] is second
    assert h.methods() == ["GET"]


def test_method_names_are_case_insensitive():
    h = MethodsHandler("/x").method("patch", dummy)
    assert h.method_supported("PATCH")
    assert h.method_supported("patch")


def test_propagate_overwrites_existing_entry():
    endpoints = {"/x": ("old", ["PUT"])}
    MethodsHandler("/x", "new").get(dummy).propagate_endpoint(endpoints)
    assert endpoints == {"/x": ("new", ["GET"])}