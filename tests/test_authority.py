import immurl
import pytest
from immurl._authority import Authority


def test_split_host_and_port():
    assert Authority.split("example.com:8080") == Authority("example.com", 8080)


def test_split_host_only():
    authority = Authority.split("example.com")
    assert authority.host == "example.com"
    assert authority.port is None


def test_empty_host():
    with pytest.raises(immurl.MalformedAuthorityError):
        Authority.split(":8080")
    with pytest.raises(immurl.MalformedAuthorityError):
        Authority.split("")


@pytest.mark.parametrize("authority", ["example.com:", "example.com:http", "example.com:65536", "example.com:-1", "example.com:" + "9" * 5000])
def test_invalid_port(authority):
    with pytest.raises(immurl.InvalidPortError):
        Authority.split(authority)


def test_host_is_lowercased():
    assert Authority.split("WWW.Example.COM").host == "www.example.com"


def test_ipv4_host():
    assert Authority.split("127.0.0.1:8000") == Authority("127.0.0.1", 8000)


def test_ipv6_host():
    assert Authority.split("[::1]") == Authority("[::1]", None)
    assert Authority.split("[0:0::1]:8080") == Authority("[::1]", 8080)
    assert Authority.split("[2001:DB8::1]").host == "[2001:db8::1]"


def test_idna_host():
    assert Authority.split("bücher.de").host == "xn--bcher-kva.de"
    assert Authority.split("BÜCHER.de:81") == Authority("xn--bcher-kva.de", 81)


@pytest.mark.parametrize(
    "authority",
    [
        "exa mple.com",
        "user@example.com",
        "example..com",
        ".example.com",
        "[::1",
        "[not-an-address]",
        "example.com]",
        "example/com",
    ],
)
def test_malformed_host(authority):
    with pytest.raises(immurl.MalformedAuthorityError) as exc_info:
        Authority.split(authority)
    assert exc_info.value.authority == authority


def test_host_must_be_a_string():
    with pytest.raises(TypeError):
        Authority.split(b"example.com")


def test_underscore_only_in_ascii_names():
    assert Authority.split("a_b.de").host == "a_b.de"
    with pytest.raises(immurl.MalformedAuthorityError):
        Authority.split("ü_b.de")


def test_idna_host_follows_ascii_rules():
    assert Authority.split("ＥＸＡＭＰＬＥ.com").host == "example.com"
    with pytest.raises(immurl.MalformedAuthorityError):
        Authority.split("bücher..de")
