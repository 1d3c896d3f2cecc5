from quinielas_branding.config import refresh_settings
from quinielas_branding.utils.domain import (
    build_brand_url,
    extract_brand_slug,
    matches_brand_domain,
    parse_domain,
)


def test_parse_localhost_subdomain() -> None:
    info = parse_domain("cocacola.localhost:3000")
    assert info.subdomain == "cocacola"
    assert info.base_domain == "localhost"
    assert info.port == "3000"
    assert info.is_subdomain


def test_parse_bare_hosts() -> None:
    local = parse_domain("localhost:3000")
    assert local.subdomain is None
    assert local.base_domain == "localhost"
    assert not local.is_subdomain

    apex = parse_domain("example.com")
    assert apex.subdomain is None
    assert apex.base_domain == "example.com"
    assert apex.port is None


def test_parse_regular_subdomain() -> None:
    info = parse_domain("brand.example.co.uk")
    assert info.subdomain == "brand"
    assert info.base_domain == "example.co.uk"
    assert extract_brand_slug("brand.example.com") == "brand"


def test_matches_brand_domain() -> None:
    assert matches_brand_domain("quinielas.acme.com", ["quinielas.acme.com"])
    assert matches_brand_domain("promo.acme.com:443", ["*.acme.com"])
    assert matches_brand_domain("acme.com", ["*.acme.com"])
    assert not matches_brand_domain("acme.com.evil.io", ["*.acme.com"])
    assert not matches_brand_domain("other.com", ["acme.com", ""])


def test_build_brand_url() -> None:
    assert build_brand_url("acme", "localhost:3000", "/es") == "http://acme.localhost:3000/es"
    assert build_brand_url("acme", "quinielas.mx") == "https://acme.quinielas.mx"


def test_build_brand_url_uses_configured_base_domain(monkeypatch) -> None:
    monkeypatch.setenv("BRAND_BASE_DOMAIN", "quinielas.example.com")
    refresh_settings()
    try:
        assert build_brand_url("acme", path="/pools") == "https://acme.quinielas.example.com/pools"
    finally:
        monkeypatch.delenv("BRAND_BASE_DOMAIN")
        refresh_settings()
    assert build_brand_url("acme") == "http://acme.localhost:3000"
