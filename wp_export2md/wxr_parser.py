"""
Parsing of WordPress WXR export documents into ``ParsedExport`` records.

``parse_document`` turns the raw text into an lxml tree and checks it looks
like an export; ``extract_export`` walks the ``channel`` element and builds
the records. Both are pure: nothing is printed or written.
"""

import re
from typing import Dict, List, Optional, Union

import lxml.etree as etree

from .errors import MalformedDocument
from .models import (
    Category,
    ContentItem,
    ParsedExport,
    PostType,
    SiteInfo,
    Tag,
    sort_key,
)

# Default namespaces for lxml lookups (WXR 1.2). Documents declaring other
# WXR versions override wp/excerpt through their own nsmap.
NAMESPACES = {
    "excerpt": "http://wordpress.org/export/1.2/excerpt/",
    "content": "http://purl.org/rss/1.0/modules/content/",
    "wp": "http://wordpress.org/export/1.2/",
    "dc": "http://purl.org/dc/elements/1.1/",
}

CDATA_MARKERS = re.compile(r"<!\[CDATA\[|\]\]>")


def clean_cdata(text: Optional[str]) -> str:
    """Removes CDATA markers left in a text value and trims it."""
    if not text:
        return ""
    return CDATA_MARKERS.sub("", text).strip()


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        recover=False,
        strip_cdata=True,
        resolve_entities=False,
        no_network=True,
        huge_tree=True,
    )


def parse_document(xml_content: Union[str, bytes]) -> etree._Element:
    """
    Parses the raw export and returns its ``channel`` element.

    Args:
        xml_content: The export document, as text or UTF-8 bytes

    Returns:
        The ``channel`` element of the document

    Raises:
        MalformedDocument: If the text is not well-formed XML or has no
            ``channel`` element
    """
    if isinstance(xml_content, str):
        # lxml refuses str input carrying an encoding declaration
        xml_content = xml_content.encode("utf-8")
    if not xml_content.strip():
        raise MalformedDocument()

    try:
        root = etree.fromstring(xml_content, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        raise MalformedDocument() from e

    channel = next(root.iter("channel"), None)
    if channel is None:
        raise MalformedDocument(MalformedDocument.unrecognized_message)
    return channel


def document_namespaces(element: etree._Element) -> Dict[str, str]:
    """Returns the lookup namespaces, preferring the URIs the document declares."""
    namespaces = dict(NAMESPACES)
    for prefix, uri in element.nsmap.items():
        if prefix in namespaces and uri:
            namespaces[prefix] = uri
    return namespaces


def _text_of(element: Optional[etree._Element]) -> str:
    if element is None:
        return ""
    return clean_cdata("".join(element.itertext()))


def extract_site_info(channel: etree._Element) -> SiteInfo:
    def get_text(tag):
        return _text_of(channel.find(tag))

    return SiteInfo(
        title=get_text("title"),
        link=get_text("link"),
        description=get_text("description"),
        language=get_text("language"),
        pub_date=get_text("pubDate"),
    )


def extract_categories(
    channel: etree._Element, namespaces: Dict[str, str]
) -> List[Category]:
    categories = []
    for element in channel.findall("wp:category", namespaces):

        def get_text(tag):
            return _text_of(element.find(tag, namespaces))

        slug = get_text("wp:category_nicename")
        name = get_text("wp:cat_name") or slug
        if not name:
            continue
        categories.append(
            Category(
                name=name,
                slug=slug,
                description=get_text("wp:category_description"),
            )
        )
    return categories


def extract_tags(channel: etree._Element, namespaces: Dict[str, str]) -> List[Tag]:
    tags = []
    for element in channel.findall("wp:tag", namespaces):
        name = _text_of(element.find("wp:tag_name", namespaces))
        if not name:
            continue
        tags.append(
            Tag(name=name, slug=_text_of(element.find("wp:tag_slug", namespaces)))
        )
    return tags


def extract_item(
    item: etree._Element, post_type: PostType, namespaces: Dict[str, str]
) -> ContentItem:
    """Builds a ContentItem from an ``item`` element already known to be a post or page."""

    def get_text(tag):
        return _text_of(item.find(tag, namespaces))

    categories = []
    tags = []
    for element in item.findall("category"):
        domain = element.get("domain")
        name = _text_of(element)
        if not name:
            continue
        if domain == "category":
            categories.append(name)
        elif domain == "post_tag":
            tags.append(name)

    return ContentItem(
        title=get_text("title"),
        link=get_text("link"),
        pub_date=get_text("pubDate"),
        post_date=get_text("wp:post_date"),
        creator=get_text("dc:creator"),
        content=get_text("content:encoded"),
        excerpt=get_text("excerpt:encoded"),
        post_id=get_text("wp:post_id"),
        status=get_text("wp:status"),
        post_type=post_type,
        categories=tuple(categories),
        tags=tuple(tags),
    )


def extract_export(channel: etree._Element) -> ParsedExport:
    """
    Extracts site info, taxonomies, posts and pages from a ``channel`` element.

    Items whose wp:post_type is neither ``post`` nor ``page`` are dropped.
    Posts and pages are returned newest first by wp:post_date; undated items
    come last in document order.

    Args:
        channel: The element returned by ``parse_document``

    Returns:
        The extracted records
    """
    namespaces = document_namespaces(channel)

    posts = []
    pages = []
    skipped = 0
    for item in channel.findall("item"):
        post_type = PostType.from_raw(_text_of(item.find("wp:post_type", namespaces)))
        if post_type is None:
            skipped += 1
            continue
        record = extract_item(item, post_type, namespaces)
        if post_type is PostType.POST:
            posts.append(record)
        else:
            pages.append(record)

    # sorted() stays stable with reverse=True, so ties keep document order
    return ParsedExport(
        site_info=extract_site_info(channel),
        categories=tuple(extract_categories(channel, namespaces)),
        tags=tuple(extract_tags(channel, namespaces)),
        posts=tuple(sorted(posts, key=sort_key, reverse=True)),
        pages=tuple(sorted(pages, key=sort_key, reverse=True)),
        skipped_items=skipped,
    )


def parse_wordpress_xml(xml_content: Union[str, bytes]) -> ParsedExport:
    """Parses an export document and extracts its records in one step."""
    return extract_export(parse_document(xml_content))
