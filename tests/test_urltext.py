import pytest

from linkresolve.urltext import (
    remove_get_params_and_separate_fragment,
    trim_error_output,
)


@pytest.mark.parametrize(
    ("link", "expected"),
    [
        ("/", ("/", None)),
        ("index.html?foo=bar", ("index.html", None)),
        ("/index.html?foo=bar", ("/index.html", None)),
        ("/index.html?foo=bar&baz=zorx?bla=blub", ("/index.html", None)),
        (
            "https://example.com/index.html?foo=bar",
            ("https://example.com/index.html", None),
        ),
        ("test.png?foo=bar", ("test.png", None)),
        (
            "https://example.com/index.html#anchor",
            ("https://example.com/index.html", "anchor"),
        ),
        (
            "https://example.com/index.html?foo=bar#anchor",
            ("https://example.com/index.html", "anchor"),
        ),
        ("test.png?foo=bar#anchor", ("test.png", "anchor")),
        ("test.png#anchor?anchor!?", ("test.png", "anchor?anchor!?")),
        ("test.png?foo=bar#anchor?anchor!", ("test.png", "anchor?anchor!")),
    ],
)
def test_remove_get_params_and_fragment(link, expected):
    assert remove_get_params_and_separate_fragment(link) == expected


def test_empty_fragment_is_kept_as_empty_string():
    assert remove_get_params_and_separate_fragment("page.html#") == ("page.html", "")


def test_extract_error_after_connect_marker():
    message = (
        "error sending request for url (https://example.com): "
        "error trying to connect: The certificate was not trusted."
    )
    assert trim_error_output(message) == "The certificate was not trusted."


def test_other_error_messages_unchanged():
    message = "operation timed out"
    assert trim_error_output(message) == "operation timed out"