"""Pre-flight connectivity check against the cart API."""

import httpx
import structlog

from fashion_assistant.core.errors import ProbeFailed

logger = structlog.get_logger(__name__)

CART_API_PATH = "/api/Cart"
DEFAULT_PROBE_TIMEOUT = 10.0


async def probe_cart_api(
    server_url: str,
    *,
    timeout: float = DEFAULT_PROBE_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> httpx.Response:
    """GET the cart endpoint once and require a 2xx answer.

    No retries. Raises ProbeFailed on any other status, on timeout and on
    transport errors.
    """
    cart_url = f"{server_url.rstrip('/')}{CART_API_PATH}"
    logger.info("Testing cart API", url=cart_url, timeout=timeout)

    owns_client = client is None
    http = client or httpx.AsyncClient()
    try:
        response = await http.get(cart_url, timeout=timeout)
    except httpx.TimeoutException as e:
        raise ProbeFailed(cart_url, reason=f"timed out after {timeout}s") from e
    except httpx.RequestError as e:
        raise ProbeFailed(cart_url, reason=f"request failed: {e}") from e
    finally:
        if owns_client:
            await http.aclose()

    if not response.is_success:
        raise ProbeFailed(
            cart_url,
            reason=response.reason_phrase,
            status_code=response.status_code,
            body=response.text,
        )

    logger.info(
        "Cart API test successful",
        url=cart_url,
        status_code=response.status_code,
        response=response.text,
    )
    return response
