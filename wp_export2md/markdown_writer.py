"""
Assembly of the final Markdown document from a ``ParsedExport``.

The layout is fixed and deterministic; labels are in Italian.
"""

from datetime import date
from typing import List, Optional

from .html2md import convert_html_to_markdown
from .models import ContentItem, ParsedExport, PostStatus, parse_wp_date

DEFAULT_SITE_TITLE = "WordPress Export"
DEFAULT_ITEM_TITLE = "Senza titolo"
NOT_AVAILABLE = "N/A"

STATUS_LABELS = {
    PostStatus.PUBLISH: "Pubblicato",
    PostStatus.DRAFT: "Bozza",
    PostStatus.PENDING: "In attesa",
    PostStatus.PRIVATE: "Privato",
    PostStatus.FUTURE: "Programmato",
    PostStatus.TRASH: "Cestinato",
}

ITALIAN_MONTHS = (
    "gennaio",
    "febbraio",
    "marzo",
    "aprile",
    "maggio",
    "giugno",
    "luglio",
    "agosto",
    "settembre",
    "ottobre",
    "novembre",
    "dicembre",
)


def translate_status(status: Optional[str]) -> str:
    """Returns the Italian label for a wp:status value; unknown values pass through."""
    label = STATUS_LABELS.get(PostStatus.from_raw(status))
    if label is None:
        return status or ""
    return label


def format_date(value: Optional[str]) -> str:
    """Formats a date as ``19 ottobre 2026``; unparseable values are returned as-is."""
    if not value:
        return NOT_AVAILABLE
    parsed = parse_wp_date(value)
    if parsed is None:
        return value
    return f"{parsed.day} {ITALIAN_MONTHS[parsed.month - 1]} {parsed.year}"


def quote_block(text: str) -> str:
    return "> " + text.replace("\n", "\n> ")


def _header(export: ParsedExport) -> List[str]:
    site = export.site_info
    lines = [f"# {site.title or DEFAULT_SITE_TITLE}\n\n"]
    if site.description:
        lines.append(f"{quote_block(site.description)}\n\n")
    lines.append(f"**Sito:** {site.link or NOT_AVAILABLE}\n")
    lines.append(f"**Lingua:** {site.language or NOT_AVAILABLE}\n")
    lines.append(f"**Data export:** {format_date(site.pub_date)}\n\n")
    lines.append("---\n\n")
    return lines


def _summary(export: ParsedExport) -> List[str]:
    lines = [
        "## Riepilogo Contenuti\n\n",
        f"- **Articoli:** {len(export.posts)}\n",
        f"- **Pagine:** {len(export.pages)}\n",
        f"- **Categorie:** {len(export.categories)}\n",
        f"- **Tag:** {len(export.tags)}\n\n",
    ]

    if export.categories:
        lines.append("## Categorie\n\n")
        for category in export.categories:
            entry = f"- **{category.name}**"
            if category.description:
                entry += f": {category.description}"
            lines.append(entry + "\n")
        lines.append("\n")

    if export.tags:
        lines.append("## Tag\n\n")
        lines.append(", ".join(f"`{tag.name}`" for tag in export.tags) + "\n\n")

    lines.append("---\n\n")
    return lines


def _item(index: int, item: ContentItem, with_taxonomies: bool) -> List[str]:
    lines = [
        f"## {index}. {item.title or DEFAULT_ITEM_TITLE}\n\n",
        f"**Autore:** {item.creator or NOT_AVAILABLE}\n",
        f"**Data:** {format_date(item.post_date)}\n",
        f"**Stato:** {translate_status(item.status)}\n",
    ]
    if with_taxonomies:
        if item.categories:
            lines.append(f"**Categorie:** {', '.join(item.categories)}\n")
        if item.tags:
            lines.append(f"**Tag:** {', '.join(item.tags)}\n")
    if item.link:
        lines.append(f"**Link:** {item.link}\n")
    lines.append("\n")

    # Pages never show an excerpt
    if with_taxonomies and item.excerpt:
        excerpt = convert_html_to_markdown(item.excerpt)
        if excerpt:
            lines.append("### Riassunto\n\n")
            lines.append(f"{quote_block(excerpt)}\n\n")

    if item.content:
        lines.append("### Contenuto\n\n")
        lines.append(convert_html_to_markdown(item.content) + "\n\n")

    lines.append("---\n\n")
    return lines


def _footer(generated_on: date) -> List[str]:
    return [
        "\n---\n\n",
        "*Documento generato da WordPress XML to Markdown Converter*\n",
        f"*Data generazione: {generated_on.day}/{generated_on.month}/{generated_on.year}*\n",
    ]


def generate_markdown(export: ParsedExport, generated_on: Optional[date] = None) -> str:
    """
    Renders the whole export as a single Markdown document.

    Args:
        export: The records returned by the extractor
        generated_on: Date written in the footer, today when omitted

    Returns:
        The Markdown document
    """
    if generated_on is None:
        generated_on = date.today()

    lines = _header(export)
    lines.extend(_summary(export))

    if export.posts:
        lines.append("# ARTICOLI\n\n")
        for index, post in enumerate(export.posts, start=1):
            lines.extend(_item(index, post, with_taxonomies=True))

    if export.pages:
        lines.append("# PAGINE\n\n")
        for index, page in enumerate(export.pages, start=1):
            lines.extend(_item(index, page, with_taxonomies=False))

    lines.extend(_footer(generated_on))
    return "".join(lines)
