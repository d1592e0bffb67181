"""
Domain extraction used to compare final and expected URLs
"""
import re
from typing import Optional

DOMAIN_PATTERN = re.compile(r'^(?:https?://)?(?:[^@/?#\n]+@)?(?:www\.)*([^:/\n?#@]+)')

def extract_domain(url: Optional[str]) -> str:
    """
    Extract the registrable domain from a URL

    Strips the scheme, credentials and leading "www." labels and cuts at the
    first ':', '/', '?', '#' or '@'. An '@' after the host (in the path or
    query) is not read as credentials. Case is preserved.

    Args:
        url: URL or bare host, may be empty

    Returns:
        Domain string, or "" when nothing matches
    """
    if not url:
        return ""

    match = DOMAIN_PATTERN.match(url)
    if match:
        return match.group(1)
    return ""
