from collections.abc import Sequence
import copy
import logging
import re

from lxml import etree, html

from wcpe.errors import ParseFailure
from wcpe.services.playlist_types import PlaylistField, PlaylistRow

logger = logging.getLogger(__name__)

CARD_CLASS = "playlist-item"

# lxml rejects str input that still declares a byte encoding
XML_DECLARATION = re.compile(r"^[\s\ufeff]*<\?xml[^>]*\?>", re.IGNORECASE)


def decode_page(raw: bytes, fallback_encoding: str = "windows-1252") -> str:
    """
    Decode a downloaded playlist page

    Pages are UTF-8 except for older ones served in the station's legacy
    single-byte encoding. Bytes that encoding cannot map are replaced with
    U+FFFD rather than failing the lookup.

    Args:
        raw: Page body as downloaded
        fallback_encoding: Encoding to use when the body is not valid UTF-8

    Returns:
        Decoded page text
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Page is not valid UTF-8, decoding as %s", fallback_encoding)
        return raw.decode(fallback_encoding, errors="replace")


def parse_playlist(content: str, expected_labels: Sequence[PlaylistField]) -> list[PlaylistRow]:
    """
    Parse a playlist page into rows, in page order

    The playlist is either the first table whose header row names every
    expected label, or failing that a list of '.playlist-item' cards made of
    <dt>label</dt><dd>value</dd> pairs.

    Args:
        content: Decoded page text
        expected_labels: Fields whose headers identify the playlist table

    Returns:
        List of PlaylistRow, spacer rows without a start time dropped

    Raises:
        ParseFailure: If no playlist container (or its rows) can be found
    """
    logger.debug(f"Parsing playlist page ({len(content)} characters)")

    if not content.strip():
        raise ParseFailure("Failed to parse the playlist page: document is empty")

    try:
        document = html.document_fromstring(XML_DECLARATION.sub("", content, count=1))
    except (etree.ParserError, ValueError) as e:
        raise ParseFailure(f"Failed to parse the playlist page: {e}") from e

    table = _find_table(document, expected_labels)
    if table is not None:
        columns, body_rows = table
        logger.debug(f"  Found playlist table with columns {[c.label for c in columns if c]}")
        if not body_rows:
            raise ParseFailure("Playlist table has no rows")
        records = (_record_from_table_row(columns, tr) for tr in body_rows)
    else:
        cards = document.find_class(CARD_CLASS)
        if not cards:
            labels = ", ".join(label.label for label in expected_labels)
            raise ParseFailure(f"Failed to find the playlist table (headers: {labels})")
        logger.debug(f"  Found {len(cards)} playlist cards")
        records = (_record_from_card(card) for card in cards)

    rows = []
    for record in records:
        start_time = record.pop(PlaylistField.START_TIME, "")
        if not start_time.strip():
            logger.debug("  Skipping row without a start time")
            continue
        rows.append(PlaylistRow(start_time_raw=start_time, fields=record))

    logger.debug(f"Playlist parsing complete: {len(rows)} rows")
    return rows


def _find_table(
    document: html.HtmlElement,
    expected_labels: Sequence[PlaylistField]
) -> tuple[list[PlaylistField | None], list[html.HtmlElement]] | None:
    """Return (column fields, body rows) of the first table with all expected headers"""
    for table in document.iter("table"):
        rows = table.xpath("./tr | ./thead/tr | ./tbody/tr | ./tfoot/tr")
        if not rows:
            continue

        header_index = next(
            (i for i, tr in enumerate(rows) if tr.xpath("./th")),
            0,
        )
        header_cells = rows[header_index].xpath("./th | ./td")
        columns = [PlaylistField.from_header(_normalize(_inner_text(cell))) for cell in header_cells]

        if all(label in columns for label in expected_labels):
            return columns, rows[header_index + 1:]

    return None


def _record_from_table_row(
    columns: list[PlaylistField | None],
    tr: html.HtmlElement
) -> dict[PlaylistField, str]:
    cells = tr.xpath("./td | ./th")
    return {
        column: _inner_text(cell)
        for column, cell in zip(columns, cells)
        if column is not None
    }


def _record_from_card(card: html.HtmlElement) -> dict[PlaylistField, str]:
    record = {}
    for term in card.iter("dt"):
        definition = term.getnext()
        if definition is None or definition.tag != "dd":
            continue
        column = PlaylistField.from_header(_normalize(_inner_text(term)))
        if column is not None:
            record[column] = _inner_text(definition)
    return record


def _inner_text(element: html.HtmlElement) -> str:
    """Text content with line breaks kept as whitespace"""
    element = copy.deepcopy(element)
    for br in element.iter("br"):
        br.tail = "\n" + (br.tail or "")
    return element.text_content()


def _normalize(text: str) -> str:
    return " ".join(text.split())
