import httpx


def get_http_transport() -> httpx.BaseTransport | None:
    """Transport for outbound provider calls; ``None`` selects httpx's default."""
    return None
