from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..config import get_settings


@dataclass(frozen=True)
class DomainInfo:
    hostname: str
    subdomain: Optional[str]
    base_domain: str
    port: Optional[str]
    is_subdomain: bool


def _split_host(hostname: str) -> tuple[str, Optional[str]]:
    host, _, port = hostname.partition(":")
    return host.lower(), (port or None)


def parse_domain(hostname: str) -> DomainInfo:
    """Split a request hostname into brand subdomain, base domain and port.

    ``brand.localhost`` counts as a subdomain, any other two-label host
    (``example.com``) does not. With three or more labels the first one is
    the subdomain.
    """
    host, port = _split_host(hostname)
    parts = host.split(".")

    subdomain: Optional[str] = None
    is_subdomain = False
    if len(parts) == 1:
        base_domain = parts[0]
    elif len(parts) == 2:
        if parts[1] == "localhost":
            subdomain = parts[0]
            base_domain = parts[1]
            is_subdomain = True
        else:
            base_domain = host
    else:
        subdomain = parts[0]
        base_domain = ".".join(parts[1:])
        is_subdomain = True

    return DomainInfo(
        hostname=hostname,
        subdomain=subdomain,
        base_domain=base_domain,
        port=port,
        is_subdomain=is_subdomain,
    )


def matches_brand_domain(hostname: str, brand_domains: Iterable[str]) -> bool:
    host, _ = _split_host(hostname)
    for domain in brand_domains:
        candidate = (domain or "").strip().lower()
        if not candidate:
            continue
        if host == candidate:
            return True
        if candidate.startswith("*."):
            base = candidate[2:]
            if host == base or host.endswith(f".{base}"):
                return True
    return False


def extract_brand_slug(hostname: str) -> Optional[str]:
    return parse_domain(hostname).subdomain


def build_brand_url(brand_slug: str, base_domain: Optional[str] = None, path: str = "") -> str:
    """Public URL of a brand subdomain; ``base_domain`` defaults to BRAND_BASE_DOMAIN."""
    base_domain = base_domain or get_settings().brand_base_domain
    protocol = "http" if "localhost" in base_domain else "https"
    return f"{protocol}://{brand_slug}.{base_domain}{path}"


__all__ = [
    "DomainInfo",
    "build_brand_url",
    "extract_brand_slug",
    "matches_brand_domain",
    "parse_domain",
]
