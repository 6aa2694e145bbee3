"""
Subdomain routing for dealer sites.

In production each dealer is served from ``<slug>.<root domain>``; on
development hosts dealers live under ``/dealer/<slug>`` instead.
"""

from dataclasses import dataclass
from typing import Optional

ROOT_DOMAIN = "dealerdelight.com"
DEV_HOSTS = ("localhost", "127.0.0.1", "lovable.app")


@dataclass
class SubdomainInfo:
    """What a hostname says about the dealer being served."""
    is_subdomain: bool
    dealer_slug: Optional[str]
    root_domain: str
    full_domain: str


def _strip_port(hostname: str) -> str:
    return hostname.split(":", 1)[0].strip().lower()


def is_development_host(hostname: str, dev_hosts: tuple[str, ...] = DEV_HOSTS) -> bool:
    host = _strip_port(hostname)
    return any(dev in host for dev in dev_hosts)


def get_subdomain_info(
    hostname: str,
    root_domain: str = ROOT_DOMAIN,
    dev_hosts: tuple[str, ...] = DEV_HOSTS,
) -> SubdomainInfo:
    """
    Resolve the dealer slug from a request hostname.

    Args:
        hostname: Host header value (a port suffix is ignored)
        root_domain: Domain dealer subdomains hang off
        dev_hosts: Host fragments that mark a development environment

    Returns:
        SubdomainInfo; ``dealer_slug`` is the leftmost label of a non-www
        host under ``root_domain``, otherwise None
    """
    host = _strip_port(hostname or "")
    if not host:
        return SubdomainInfo(False, None, "", "")

    if is_development_host(host, dev_hosts):
        return SubdomainInfo(False, None, host, host)

    parts = host.split(".")
    root_parts = root_domain.split(".")
    if len(parts) > len(root_parts) and parts[-len(root_parts):] == root_parts:
        subdomain = parts[0]
        if subdomain == "www":
            return SubdomainInfo(False, None, root_domain, host)
        return SubdomainInfo(True, subdomain, root_domain, host)

    return SubdomainInfo(False, None, host, host)


def supports_subdomains(
    hostname: str,
    root_domain: str = ROOT_DOMAIN,
    dev_hosts: tuple[str, ...] = DEV_HOSTS,
) -> bool:
    info = get_subdomain_info(hostname, root_domain, dev_hosts)
    return not is_development_host(info.root_domain, dev_hosts) and info.root_domain == root_domain


def generate_site_url(
    slug: str,
    hostname: str,
    path: str = "",
    scheme: str = "https",
    root_domain: str = ROOT_DOMAIN,
    dev_hosts: tuple[str, ...] = DEV_HOSTS,
) -> str:
    """Public URL of a dealer site, path-routed on development hosts."""
    info = get_subdomain_info(hostname, root_domain, dev_hosts)
    if is_development_host(info.root_domain, dev_hosts):
        return f"{scheme}://{hostname}/dealer/{slug}{path}"
    return f"{scheme}://{slug}.{root_domain}{path}"
