import logging

import immurl
import pytest


def test_wolfram_alpha_search():
    url = immurl.https("www.wolframalpha.com").path("input/").query("i", "π²").create()
    assert str(url) == "https://www.wolframalpha.com/input/?i=%CF%80%C2%B2"
    assert url.port == 443


def test_port_from_host():
    url = immurl.http("example.com:8080").create()
    assert url.host == "example.com"
    assert url.port == 8080
    assert str(url) == "http://example.com:8080"


def test_empty_host():
    with pytest.raises(immurl.MalformedAuthorityError):
        immurl.http(":8080")


@pytest.mark.parametrize("port", ["65536", "9" * 5000])
def test_invalid_port_in_host(port):
    with pytest.raises(immurl.InvalidPortError):
        immurl.http("example.com:" + port)


@pytest.mark.parametrize("port", [0, 1, 80, 443, 8080, 65535])
def test_explicit_port(port):
    url = immurl.https("example.com").port(port).create()
    assert url.port == port
    if port == 443:
        assert str(url) == "https://example.com"
    else:
        assert str(url) == f"https://example.com:{port}"


@pytest.mark.parametrize("port", [-2, -1, 65536, 100000])
def test_invalid_port_leaves_builder_unchanged(port):
    builder = immurl.http("example.com").port(8080)
    with pytest.raises(immurl.InvalidPortError) as exc_info:
        builder.port(port)
    assert exc_info.value.port == port
    assert builder.create().port == 8080


def test_port_none_reverts_to_default():
    url = immurl.http("example.com:8080").port(None).create()
    assert url.port == 80
    assert str(url) == "http://example.com"


def test_explicit_default_port_equals_implicit():
    explicit = immurl.https("example.com").port(443).create()
    implicit = immurl.https("example.com").create()
    assert explicit == implicit
    assert str(explicit) == str(implicit) == "https://example.com"


def test_setters_replace():
    url = (
        immurl.http("example.com")
        .path("a")
        .path("b/c")
        .query("x", "1")
        .query("y", "2")
        .fragment("one")
        .fragment("two")
        .create()
    )
    assert url.path.segments == ("b", "c")
    assert url.query.params == [("y", "2")]
    assert str(url) == "http://example.com/b/c?y=2#two"


def test_query_mapping():
    url = immurl.http("example.com").query({"q": "a b", "page": "2"}).create()
    assert str(url) == "http://example.com?q=a%20b&page=2"


def test_query_pairs():
    url = immurl.http("example.com").query([("tag", "a"), ("tag", "b")]).create()
    assert str(url) == "http://example.com?tag=a&tag=b"


def test_query_arguments():
    builder = immurl.http("example.com")
    with pytest.raises(TypeError):
        builder.query("key")
    with pytest.raises(TypeError):
        builder.query({"key": "value"}, "value")
    assert builder.create().query.is_empty


def test_path_accepts_path_instance():
    path = immurl.Path.of("a", "b")
    assert immurl.http("example.com").path(path).create().path is path


def test_empty_path_and_query():
    url = immurl.http("x.com").create()
    assert str(url) == "http://x.com"


def test_trailing_slash():
    assert str(immurl.http("x.com").path("").create()) == "http://x.com/"
    assert str(immurl.http("x.com").path("a/").create()) == "http://x.com/a/"


@pytest.mark.parametrize(
    "url",
    [
        immurl.http("x.com").create(),
        immurl.https("www.wolframalpha.com").path("input/").query("i", "π²").create(),
        immurl.builder("ws", "[::1]:9000").path("a b").fragment("c").create(),
        immurl.builder("ftp", "bücher.de").port(21).path("/pub/").create(),
    ],
)
def test_copy_without_changes_is_equal(url):
    copy = immurl.UrlBuilder.from_url(url).create()
    assert copy == url
    assert url.builder().create() == url


def test_copy_and_modify():
    original = immurl.https("example.com:8443").path("docs").query("v", "1").create()
    modified = original.builder().query("v", "2").create()
    assert str(original) == "https://example.com:8443/docs?v=1"
    assert str(modified) == "https://example.com:8443/docs?v=2"


def test_scheme_by_name():
    url = immurl.builder("HTTPS", "example.com").create()
    assert url.scheme is immurl.Scheme.HTTPS


def test_create_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="immurl")
    immurl.http("example.com").create()
    assert caplog.record_tuples == [
        ("immurl", logging.DEBUG, "create url=Url('http://example.com')")
    ]
