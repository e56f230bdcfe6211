"""Domain name validation backed by the public suffix list."""

import logging
import re
from functools import lru_cache

import tldextract


logger = logging.getLogger(__name__)

# RFC 1123 labels, dot separated, optional trailing dot
_DOMAIN_RE = re.compile(
    r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)(\.(?!-)[A-Za-z0-9-]{1,63}(?<!-))*\.?$"
)

_IPV4_RE = re.compile(r"^\d{1,3}(\.\d{1,3}){3}$")


@lru_cache(maxsize=1)
def _extractor() -> tldextract.TLDExtract:
    # Bundled snapshot only, never fetch the list over the network
    return tldextract.TLDExtract(suffix_list_urls=())


def is_valid_syntax(domain: str) -> bool:
    """Check that ``domain`` is a syntactically valid DNS name."""
    if not domain or len(domain.rstrip(".")) > 253:
        return False
    if _IPV4_RE.match(domain):
        return False
    return bool(_DOMAIN_RE.match(domain))


def public_suffix(domain: str) -> str:
    """Return the public suffix of ``domain`` or an empty string."""
    return _extractor()(domain.rstrip(".").lower()).suffix


def has_public_suffix(domain: str) -> bool:
    """True when ``domain`` is a valid name ending in a recognised public suffix.

    A bare suffix such as ``com`` qualifies; ``localhost`` or any other
    single label that is not itself a suffix does not.
    """
    if not is_valid_syntax(domain):
        return False
    suffix = public_suffix(domain)
    logger.debug(f"Public suffix of {domain!r}: {suffix!r}")
    return bool(suffix)
