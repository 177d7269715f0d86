"""Curation of link lists returned by the API."""

import logging
import re
from functools import cmp_to_key
from typing import Any, List, Optional, Sequence, Union

from .types import CurationOptions, DEFAULT_IGNORE_REL, LinkRecord
from .utils.classification import coerce_string, compare_string_case_insensitive, is_object
from .utils.strings import prettify_string


_SCHEME_PREFIX = re.compile(r'^https?://(www\.)?', re.IGNORECASE)


class LinkCurator:
    """
    Makes link lists from API responses more user-friendly.

    Sets a readable title where none is given, removes unwanted relation
    types and sorts by title. Input lists and link records are never
    modified.
    """

    def __init__(self, options: Optional[CurationOptions] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the link curator.

        Args:
            options: Curation settings, defaults to CurationOptions()
            logger: Optional logger instance
        """
        self.options = options or CurationOptions()
        self.logger = logger or logging.getLogger(__name__)

    def curate(self, links: Any) -> List[LinkRecord]:
        """
        Curate a link list.

        Args:
            links: List of link records

        Returns:
            New list of link copies, empty if ``links`` is not a list
        """
        if not isinstance(links, (list, tuple)):
            self.logger.debug(f"Expected a list of links, got {type(links).__name__}")
            return []

        ignore_rel = self.options.ignore_rel
        if isinstance(ignore_rel, str):
            ignore_rel = [ignore_rel]
        ignored = {rel.lower() for rel in ignore_rel}
        curated = []

        for index, link in enumerate(links):
            if not is_object(link):
                self.logger.debug(f"Skipping link {index}: not an object")
                continue

            link = dict(link)
            rel = link.get("rel")
            if isinstance(rel, str) and rel.lower() in ignored:
                self.logger.debug(f"Dropping link {index} with rel '{rel}'")
                continue

            title = link.get("title")
            if not isinstance(title, str) or len(title) == 0:
                link["title"] = self.derive_title(link)

            curated.append(link)

        if self.options.sort:
            curated.sort(key=cmp_to_key(lambda a, b: compare_string_case_insensitive(a["title"], b["title"])))

        return curated

    def derive_title(self, link: LinkRecord) -> str:
        """Build a title from the relation type, falling back to the URL."""
        rel = link.get("rel")
        if isinstance(rel, str) and len(rel) > 1:
            return prettify_string(rel, self.options.separator, self.options.min_length)

        href = link.get("href")
        title = _SCHEME_PREFIX.sub("", "" if href is None else coerce_string(href))
        if title.endswith("/"):
            title = title[:-1]
        return title

    def find_link(self, links: Any, rel: str) -> Optional[LinkRecord]:
        """
        Find the first link with the given relation type.

        Args:
            links: List of link records
            rel: Relation type, compared case-insensitively

        Returns:
            The matching link record or None
        """
        if not isinstance(links, (list, tuple)):
            return None
        wanted = rel.lower()
        for link in links:
            if is_object(link) and isinstance(link.get("rel"), str) and link["rel"].lower() == wanted:
                return link
        return None


def friendly_links(links: Any, sort: bool = True,
                   ignore_rel: Union[str, Sequence[str]] = DEFAULT_IGNORE_REL) -> List[LinkRecord]:
    """
    Make a link list more user-friendly.

    Args:
        links: List of link records
        sort: Sort the links by title
        ignore_rel: A relation type or a sequence of relation types to
            remove, by default the self links

    Returns:
        Curated list of link copies
    """
    if isinstance(ignore_rel, str):
        ignore_rel = [ignore_rel]
    options = CurationOptions(sort=sort, ignore_rel=list(ignore_rel))
    return LinkCurator(options).curate(links)
