from urllib.parse import urlparse

from search.results import ErrorCode, Result


def normalize(raw: str) -> Result:
    """
    Estrae il dominio da un URL.
    Es: "https://www.example.com/path" -> "example.com"
    """
    try:
        parsed = urlparse((raw or "").strip())
        hostname = parsed.hostname or ""
        # porta non numerica o fuori range -> ValueError
        parsed.port
    except ValueError:
        return Result.failure(ErrorCode.INVALID_URL)

    if not parsed.scheme or any(ch.isspace() for ch in hostname):
        return Result.failure(ErrorCode.INVALID_URL)

    # solo un "www." iniziale
    if hostname.startswith("www."):
        hostname = hostname[4:]
    domain = hostname.lower()

    if not domain:
        return Result.failure(ErrorCode.EMPTY_DOMAIN)
    return Result.success(domain)


def looks_like_domain(value: str) -> bool:
    value = (value or "").strip()
    if not value or any(ch.isspace() for ch in value):
        return False
    labels = value.split(".")
    return len(labels) > 1 and all(labels)
