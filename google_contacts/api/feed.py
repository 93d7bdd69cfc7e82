from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple, cast

import structlog

from google_contacts.api import constants, utils
from google_contacts.api.errors import MalformedResponseError
from google_contacts.api.models import ContactRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = structlog.get_logger(__name__)


class Feed(NamedTuple):
    entries: list[dict[str, Any]]
    links: list[dict[str, Any]]


def decode_feed(document: Any) -> Feed:  # noqa: ANN401
    """
    Validates the top-level shape of a contacts feed document.

    Args:
        document (Any): The decoded JSON response.
    Returns:
        The Feed with its entry and link lists (empty when the feed omits them).
    Raises:
        MalformedResponseError: The document has no feed object, or its entry/link members are not lists.
    """
    feed = document.get("feed") if isinstance(document, dict) else None
    if not isinstance(feed, dict):
        msg = "Response has no feed object"
        raise MalformedResponseError(msg)

    entries = feed.get("entry", [])
    links = feed.get("link", [])
    if not isinstance(entries, list) or not isinstance(links, list):
        msg = "Feed entry and link members must be lists"
        raise MalformedResponseError(msg)

    return Feed(entries, links)


def find_next_path(feed: Feed) -> str | None:
    """Gets the path of the next page, or None on the last page."""
    for link in feed.links:
        if not isinstance(link, dict) or link.get("rel") != constants.NEXT_REL:
            continue

        href = link.get("href")
        if not isinstance(href, str) or not href:
            msg = f"Next link has no usable href: {href!r}"
            raise MalformedResponseError(msg)
        return utils.path_from_href(href)
    return None


def extract_contacts(feed: Feed) -> list[ContactRecord]:
    """Extracts the ContactRecords of a page, skipping entries that cannot produce one."""
    return [contact for contact in _extract(feed.entries) if contact is not None]


def _extract(entries: Iterable[dict[str, Any]]) -> Iterable[ContactRecord | None]:
    for idx, entry in enumerate(entries):
        try:
            yield extract_contact(entry)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            logger.debug("Skipping malformed entry", index=idx, reason=repr(e))
            yield None


def extract_contact(entry: dict[str, Any]) -> ContactRecord | None:
    """
    Extracts a ContactRecord from a single feed entry.

    Returns None when the entry has no email address or no photo link.
    Raises KeyError, IndexError or TypeError when the entry is malformed.
    """
    contact_id = cast("str", entry["id"]["$t"])
    name = cast("str", entry["title"]["$t"])
    email = cast("str", entry["gd$email"][0]["address"])  # only the first address is kept
    if not email:
        logger.debug("Skipping entry (no email)", id=contact_id)
        return None

    photo = _find_photo_link(entry["link"])
    if photo is None:
        logger.debug("Skipping entry (no photo)", id=contact_id)
        return None

    photo_url, mime_type = photo
    return ContactRecord(contact_id, name, email, photo_url, mime_type)


def _find_photo_link(links: list[dict[str, Any]]) -> tuple[str, str] | None:
    for link in links:
        rel = link.get("rel") or ""
        if constants.PHOTO_REL_MARKER not in rel:
            continue

        # A photo link without a media type makes the whole entry unusable.
        mime_type = link["type"]
        if constants.IMAGE_TYPE_MARKER in mime_type:
            return link["href"], mime_type
    return None
