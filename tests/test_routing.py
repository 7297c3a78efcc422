"""Tests for the client route table."""

import pytest

from frontend.routing import APP_TITLE, ROUTES, Navigator, Route, resolve


def test_app_title():
    assert APP_TITLE == "DD Task"


def test_route_table():
    assert [r.path for r in ROUTES] == ["", "tutorials", "tutorials/:id", "add"]
    assert ROUTES[0].redirect_to == "tutorials"
    assert ROUTES[0].path_match == "full"


def test_empty_path_redirects_to_list():
    route, params = resolve("")
    assert route.component == "TutorialsList"
    assert params == {}


def test_details_route_extracts_id():
    route, params = resolve("/tutorials/123")
    assert route.component == "TutorialDetails"
    assert params == {"id": "123"}


def test_add_route():
    route, _ = resolve("/add")
    assert route.component == "AddTutorial"


def test_query_string_is_ignored():
    route, _ = resolve("/tutorials?title=angular")
    assert route.component == "TutorialsList"


def test_unknown_path():
    assert resolve("/unknown/path") is None


def test_redirect_loop_detected():
    routes = [Route(path="a", redirect_to="b"), Route(path="b", redirect_to="a")]
    with pytest.raises(ValueError):
        resolve("a", routes)


def test_navigator_starts_on_list():
    navigator = Navigator()
    assert navigator.path == "/tutorials"


def test_navigator_records_history():
    navigator = Navigator()
    navigator.navigate("/tutorials/42")
    navigator.navigate("/add")
    assert navigator.history == ["/tutorials", "/tutorials/42", "/add"]


def test_navigator_ignores_unknown_path():
    navigator = Navigator("/add")
    assert navigator.navigate("/nowhere") is None
    assert navigator.path == "/add"
