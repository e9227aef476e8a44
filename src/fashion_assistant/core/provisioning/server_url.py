"""Resolution of the externally reachable base URL of this application."""

import structlog

from fashion_assistant.config import HostingSettings

logger = structlog.get_logger(__name__)

LOCAL_FALLBACK = "localhost:5000"


def resolve_server_url(hosting: HostingSettings) -> str:
    """Work out the base URL the cart API is reachable on.

    Sources are tried in order and the first one set wins: the hosting
    platform's hostname, the explicit ``SERVER_URL`` setting, then the local
    fallback. While still on the fallback, the App Service site name and
    then its default hostname are consulted. Scheme-less results get
    ``http://`` for localhost and ``https://`` otherwise.

    Never fails; the result is only a best guess until the cart API probe
    confirms it.
    """
    logger.info(
        "Resolving server URL",
        website_hostname=hosting.website_hostname,
        server_url=hosting.server_url,
        website_site_name=hosting.website_site_name,
    )

    server_url = hosting.website_hostname or hosting.server_url or LOCAL_FALLBACK

    if server_url == LOCAL_FALLBACK and hosting.website_site_name:
        server_url = f"{hosting.website_site_name}.{hosting.cloud_domain}"
        logger.info("Using App Service site name", site_name=hosting.website_site_name)

    if server_url == LOCAL_FALLBACK and hosting.website_default_hostname:
        server_url = hosting.website_default_hostname
        logger.info(
            "Using App Service default hostname",
            default_hostname=hosting.website_default_hostname,
        )

    if not server_url.startswith("http"):
        scheme = "http" if "localhost" in server_url else "https"
        server_url = f"{scheme}://{server_url}"

    logger.info("Resolved server URL", server_url=server_url)
    return server_url
