"""Loading the store API description and pointing it at this server."""

from pathlib import Path

import structlog

from fashion_assistant.config import ProvisioningSettings
from fashion_assistant.core.errors import (
    PlaceholderSubstitutionFailed,
    SpecNotFound,
)

logger = structlog.get_logger(__name__)

SERVER_URL_PLACEHOLDER = "<APP-SERVICE-URL>"

# The application base directory ships a copy of the document
PACKAGE_DIR = Path(__file__).resolve().parents[2]


def default_spec_paths(settings: ProvisioningSettings) -> list[Path]:
    """Primary then alternative location of the API specification."""
    primary = settings.spec_path or PACKAGE_DIR / settings.spec_filename
    return [primary, Path.cwd() / settings.spec_filename]


def find_spec(search_paths: list[Path]) -> Path:
    """Return the first existing path, or raise SpecNotFound."""
    for path in search_paths:
        logger.debug("Looking for API specification", path=str(path))
        if path.is_file():
            return path
    raise SpecNotFound(search_paths)


def load_and_patch_spec(server_url: str, search_paths: list[Path]) -> str:
    """Read the API specification and replace the server URL placeholder.

    A document without the placeholder is returned as is. The file on disk
    is left untouched.
    """
    path = find_spec(search_paths)
    content = path.read_text(encoding="utf-8")

    has_placeholder = SERVER_URL_PLACEHOLDER in content
    logger.info(
        "Read API specification",
        path=str(path),
        length=len(content),
        has_placeholder=has_placeholder,
    )
    if not has_placeholder:
        logger.warning(
            "API specification does not contain the server URL placeholder",
            placeholder=SERVER_URL_PLACEHOLDER,
            path=str(path),
        )
        return content

    patched = content.replace(SERVER_URL_PLACEHOLDER, server_url)
    if SERVER_URL_PLACEHOLDER in patched:
        raise PlaceholderSubstitutionFailed(SERVER_URL_PLACEHOLDER, path)

    logger.info("Patched API specification server URL", server_url=server_url)
    return patched
