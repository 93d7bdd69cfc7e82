from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode, urlsplit

from google_contacts.api import constants

if TYPE_CHECKING:
    from google_contacts.api.models import RequestParams


def build_path(params: RequestParams) -> str:
    """
    Builds the feed path for the request.

    Args:
        params (RequestParams): The request parameters.
    Returns:
        The literal path when one was supplied, otherwise the feed path with its query.

    >>> from google_contacts.api.models import RequestParams
    >>> build_path(RequestParams())
    '/m8/feeds/contacts/default/thin?alt=json&max-results=2000'
    >>> build_path(RequestParams(type="groups", path="/m8/feeds/contacts/default/thin?start-index=3"))
    '/m8/feeds/contacts/default/thin?start-index=3'
    """
    if params.path:
        return params.path

    query = urlencode({"alt": params.alt, "max-results": params.max_results})
    return f"{constants.FEED_ROOT}/{params.type}/{params.email}/{params.projection}?{query}"


def path_from_href(href: str) -> str:
    """
    Reduces an absolute URL to its path and query.

    >>> path_from_href("https://www.google.com/m8/feeds/contacts/default/thin?start-index=26")
    '/m8/feeds/contacts/default/thin?start-index=26'
    >>> path_from_href("/m8/feeds/photos/media/default/abc")
    '/m8/feeds/photos/media/default/abc'
    """
    parts = urlsplit(href)
    path = parts.path or "/"
    return f"{path}?{parts.query}" if parts.query else path
