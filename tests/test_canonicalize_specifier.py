"""Tests for mapping specifiers to cache paths."""

import pytest

from src.canonicalize_specifier import canonicalize_specifier
from src.malformed_specifier_error import MalformedSpecifierError


def test_remote_urls() -> None:
    """Verify the cache path layout for remote URLs."""
    assert canonicalize_specifier("https://esm.sh/react") == "/-/esm.sh/react.js"
    assert (
        canonicalize_specifier("https://esm.sh/react@17.0.1?target=es2015&dev")
        == "/-/esm.sh/react@17.0.1_target=es2015&dev.js"
    )
    assert (
        canonicalize_specifier("http://localhost:8080/mod")
        == "/-/http_localhost_8080/mod.js"
    )
    assert (
        canonicalize_specifier("https://deno.land/std@0.90.0/path/mod.ts")
        == "/-/deno.land/std@0.90.0/path/mod.ts"
    )


def test_version_suffix_forces_js() -> None:
    """Verify that versioned package URLs always get a .js extension."""
    assert canonicalize_specifier("https://esm.sh/react@17.0.1") == "/-/esm.sh/react@17.0.1.js"
    assert (
        canonicalize_specifier("https://esm.sh/react@17.0.1-beta.1")
        == "/-/esm.sh/react@17.0.1-beta.1.js"
    )
    assert (
        canonicalize_specifier("https://cdn.esm.sh/v41/react@17.0.1/es2020/react.css")
        == "/-/cdn.esm.sh/v41/react@17.0.1/es2020/react.css"
    )


def test_local_paths() -> None:
    """Verify that local paths are normalized but keep their root marker."""
    assert canonicalize_specifier("/components/foo/./logo.tsx") == "/components/foo/logo.tsx"
    assert canonicalize_specifier("/components/foo/../logo.tsx") == "/components/logo.tsx"
    assert canonicalize_specifier("/components/../foo/logo.tsx") == "/foo/logo.tsx"
    assert canonicalize_specifier("../components/logo.tsx") == "../components/logo.tsx"
    assert canonicalize_specifier("./button.tsx") == "./button.tsx"


def test_local_paths_idempotent() -> None:
    """Verify that already-normalized local paths are returned unchanged."""
    for path in ("/components/logo.tsx", "/a/b/c", "./x/y.ts", "../z.css"):
        assert canonicalize_specifier(path) == path


def test_query_strings_are_disjoint() -> None:
    """Verify that URLs differing only by query map to different paths."""
    plain = canonicalize_specifier("https://esm.sh/swr")
    dev = canonicalize_specifier("https://esm.sh/swr?dev")
    assert plain != dev
    assert plain.startswith("/-/esm.sh/swr")
    assert dev.startswith("/-/esm.sh/swr")
    assert dev == "/-/esm.sh/swr_dev.js"


def test_scheme_and_port_are_disjoint() -> None:
    """Verify that scheme and non-default ports are part of the path."""
    assert canonicalize_specifier("http://esm.sh:8080/swr") == "/-/http_esm.sh_8080/swr.js"
    assert canonicalize_specifier("https://esm.sh/swr") == "/-/esm.sh/swr.js"
    assert canonicalize_specifier("http://esm.sh/swr") == "/-/http_esm.sh/swr.js"


def test_default_ports_are_dropped() -> None:
    """Verify that explicit default ports do not change the cache path."""
    assert canonicalize_specifier("https://esm.sh:443/swr") == "/-/esm.sh/swr.js"
    assert canonicalize_specifier("http://esm.sh:80/swr") == "/-/http_esm.sh/swr.js"


@pytest.mark.parametrize(
    "url",
    ["https://:8080/mod.ts", "http://esm.sh:notaport/mod.ts", "https:///mod.ts"],
)
def test_malformed_urls(url: str) -> None:
    """Verify that unparsable URLs raise MalformedSpecifierError."""
    with pytest.raises(MalformedSpecifierError) as exc_info:
        canonicalize_specifier(url)
    assert exc_info.value.specifier == url


def test_remote_dot_segments_are_collapsed() -> None:
    """Verify that remote paths cannot escape the cache root."""
    assert canonicalize_specifier("https://esm.sh/../../etc/passwd") == "/-/esm.sh/etc/passwd.js"
    assert canonicalize_specifier("https://esm.sh/a/../b") == canonicalize_specifier(
        "https://esm.sh/b"
    )
    assert canonicalize_specifier("https://esm.sh/x/./../react@17.0.1") == (
        "/-/esm.sh/react@17.0.1.js"
    )


def test_trailing_slash_keeps_query() -> None:
    """Verify that a trailing slash does not drop the query string."""
    plain = canonicalize_specifier("https://esm.sh/react/")
    dev = canonicalize_specifier("https://esm.sh/react/?dev")
    assert plain == "/-/esm.sh/react.js"
    assert dev == "/-/esm.sh/react_dev.js"


def test_host_root_with_query() -> None:
    """Verify that a query on the bare host still yields a distinct path."""
    assert canonicalize_specifier("https://esm.sh/") == "/-/esm.sh/"
    assert canonicalize_specifier("https://esm.sh/?dev") == "/-/esm.sh/_dev.js"


def test_ipv6_host_keeps_brackets() -> None:
    """Verify that IPv6 literals appear bracketed in the cache path."""
    assert canonicalize_specifier("http://[::1]:8080/mod") == "/-/http_[::1]_8080/mod.js"
