import logging
from typing import IO, Union

from bs4 import BeautifulSoup, ParserRejectedMarkup

from caltrain.exceptions import DocumentError

logger = logging.getLogger(__name__)

DocumentSource = Union[bytes, str, IO[bytes], IO[str]]


def load_document(source: DocumentSource) -> BeautifulSoup:
    """Parse a status page into a tree.

    Accepts raw bytes (must be UTF-8), text, or a stream of either. The
    html5lib builder closes optional end tags (td, tr, p) the way browsers
    do, so unclosed cells end before the next one starts. Class
    attributes are kept as the raw attribute string instead of being split
    into tokens, so marker suffixes can be matched against the whole value.
    """
    if hasattr(source, "read"):
        source = source.read()

    if isinstance(source, (bytes, bytearray)):
        try:
            text = bytes(source).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DocumentError(f"Status page is not valid UTF-8: {str(e)}")
    elif isinstance(source, str):
        text = source
    else:
        raise DocumentError(f"Unsupported document type: {type(source).__name__}")

    logger.debug(f"Parsing status page ({len(text)} characters)")
    try:
        return BeautifulSoup(text, "html5lib", multi_valued_attributes=None)
    except ParserRejectedMarkup as e:
        raise DocumentError(f"Could not parse status page: {str(e)}")
