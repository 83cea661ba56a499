"""
Page content extraction from various sources.

This module turns a source into the raw visible text and structural
context that the analysis consumes:
- Web URLs (fetched with requests, parsed with BeautifulSoup)
- Saved HTML files
- Word documents (.docx files using python-docx)
- Plain text files

Any failure to obtain content is reported as ContentExtractionError,
which callers surface to the user with retry guidance. Analysis itself
never sees these failures.
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup
from charset_normalizer import from_bytes
from docx import Document
from docx.opc.constants import RELATIONSHIP_TYPE as RT

from .config import DEFAULT_USER_AGENT, REQUEST_TIMEOUT
from .models import PageContent, StructuralContext

logger = logging.getLogger(__name__)


# Default headers for web requests
DEFAULT_HEADERS = {
    "User-Agent": DEFAULT_USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

# Elements whose text is never visible
NON_VISIBLE_TAGS = ["script", "style", "noscript", "iframe"]

# Word paragraph styles counted as headings
DOCX_HEADING_STYLES = {
    "Title": 1,
    "Heading 1": 1,
    "Heading 2": 2,
    "Heading 3": 3,
}

RETRY_GUIDANCE = "Please check the source is reachable, refresh it and try again."


class ContentExtractionError(Exception):
    """Raised when page content cannot be obtained or parsed."""
    pass


def _decode_html_safely(response) -> str:
    """
    Decode an HTTP response body to text.

    Detection order:
    1. Content-Type header charset
    2. HTML meta charset tag
    3. charset_normalizer detection
    4. UTF-8 with replacement characters

    Args:
        response: requests.Response object.

    Returns:
        Decoded HTML string.
    """
    content_bytes = response.content

    content_type = response.headers.get("Content-Type", "")
    if "charset=" in content_type.lower():
        charset = content_type.lower().split("charset=")[-1].split(";")[0].strip().strip("\"'")
        try:
            return content_bytes.decode(charset)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Header charset {charset} failed: {e}")

    head_text = content_bytes[:8192].decode("ascii", errors="ignore")
    charset_match = re.search(r'<meta[^>]+charset=["\']?([^"\'>\s;]+)', head_text, re.I)
    if charset_match:
        charset = charset_match.group(1)
        try:
            return content_bytes.decode(charset)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Meta charset {charset} failed: {e}")

    detected = from_bytes(content_bytes).best()
    if detected is not None:
        logger.debug(f"charset_normalizer detected: {detected.encoding}")
        return str(detected)

    logger.debug("Falling back to UTF-8 decode")
    return content_bytes.decode("utf-8", errors="replace")


def extract_visible_text(soup: BeautifulSoup) -> str:
    """
    Get the visible text of a parsed page.

    Works on a copy of the body so the caller's tree is left untouched.
    Script, style, noscript and iframe content is removed.
    """
    body = soup.body or soup
    clone = BeautifulSoup(str(body), "lxml")
    for element in clone.find_all(NON_VISIBLE_TAGS):
        element.decompose()
    return clone.get_text(separator="\n")


def extract_structural_context(soup: BeautifulSoup, hostname: str = "") -> StructuralContext:
    """Count paragraphs, headings, emphasis and links in a parsed page."""
    paragraph_texts = [
        text for text in (p.get_text() for p in soup.find_all("p"))
        if text.strip()
    ]

    return StructuralContext(
        paragraph_texts=paragraph_texts,
        h1_count=len(soup.find_all("h1")),
        h2_count=len(soup.find_all("h2")),
        h3_count=len(soup.find_all("h3")),
        strong_count=len(soup.find_all(["strong", "b"])),
        link_hrefs=[a.get("href", "") for a in soup.find_all("a", href=True)],
        hostname=hostname,
    )


def extract_page_content(
    html: str,
    hostname: str = "",
    source: Optional[str] = None,
) -> PageContent:
    """
    Extract analysis inputs from an HTML document.

    Args:
        html: HTML markup.
        hostname: Hostname the page was served from, used to tell
            internal links from external ones.
        source: Optional label (URL or path) recorded on the result.

    Returns:
        PageContent with visible text and structural context.
    """
    soup = BeautifulSoup(html, "lxml")
    return PageContent(
        text=extract_visible_text(soup),
        context=extract_structural_context(soup, hostname=hostname),
        source=source,
    )


def fetch_url_content(
    url: str,
    timeout: int = REQUEST_TIMEOUT,
    user_agent: Optional[str] = None,
) -> PageContent:
    """
    Fetch a web page and extract analysis inputs from it.

    Args:
        url: The URL to fetch.
        timeout: Request timeout in seconds.
        user_agent: Optional User-Agent overriding the browser-like default.

    Returns:
        PageContent for the page, with the URL's hostname in its context.

    Raises:
        ContentExtractionError: If the URL is invalid or the fetch fails.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ContentExtractionError(f"Invalid URL: {url}")

    headers = dict(DEFAULT_HEADERS)
    if user_agent:
        headers["User-Agent"] = user_agent

    logger.info(f"Fetching {url}")
    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise ContentExtractionError(f"Failed to fetch URL: {e}. {RETRY_GUIDANCE}") from e

    html = _decode_html_safely(response)
    return extract_page_content(html, hostname=parsed.hostname or "", source=url)


def load_html_file(file_path: Union[str, Path], hostname: str = "") -> PageContent:
    """
    Load a saved HTML page from disk.

    Raises:
        ContentExtractionError: If the file cannot be read.
    """
    path = Path(file_path)
    if not path.exists():
        raise ContentExtractionError(f"File not found: {file_path}")

    try:
        html = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ContentExtractionError(f"Failed to read HTML file: {e}") from e

    return extract_page_content(html, hostname=hostname, source=str(path))


def load_text_file(file_path: Union[str, Path]) -> PageContent:
    """Load a plain text file; it carries no structural context."""
    path = Path(file_path)
    if not path.exists():
        raise ContentExtractionError(f"File not found: {file_path}")

    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ContentExtractionError(f"Failed to read text file: {e}") from e

    return PageContent(text=text, source=str(path))


def load_docx_content(file_path: Union[str, Path], hostname: str = "") -> PageContent:
    """
    Load and extract analysis inputs from a Word document.

    Body paragraphs become the paragraph list, Title and Heading 1-3
    styles are counted as headings, bold runs count as strong text and
    external hyperlinks become the link list.

    Args:
        file_path: Path to the .docx file.
        hostname: Hostname to treat as "this site" for link classification.

    Returns:
        PageContent for the document.

    Raises:
        ContentExtractionError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise ContentExtractionError(f"File not found: {file_path}")

    if not path.suffix.lower() == ".docx":
        raise ContentExtractionError(f"File must be a .docx file: {file_path}")

    try:
        doc = Document(str(path))
    except Exception as e:
        raise ContentExtractionError(f"Failed to open Word document: {e}") from e

    texts: list[str] = []
    paragraph_texts: list[str] = []
    heading_counts = {1: 0, 2: 0, 3: 0}
    strong_count = 0

    for para in doc.paragraphs:
        text = para.text.strip()
        if not text:
            continue
        texts.append(text)

        style_name = para.style.name if para.style is not None else None
        level = DOCX_HEADING_STYLES.get(style_name)
        if level:
            heading_counts[level] += 1
        elif not (style_name and style_name.startswith("Heading")):
            paragraph_texts.append(text)

        strong_count += sum(1 for run in para.runs if run.bold and run.text.strip())

    link_hrefs = [
        rel.target_ref
        for rel in doc.part.rels.values()
        if rel.reltype == RT.HYPERLINK and rel.is_external
    ]

    return PageContent(
        text="\n\n".join(texts),
        context=StructuralContext(
            paragraph_texts=paragraph_texts,
            h1_count=heading_counts[1],
            h2_count=heading_counts[2],
            h3_count=heading_counts[3],
            strong_count=strong_count,
            link_hrefs=link_hrefs,
            hostname=hostname,
        ),
        source=str(path),
    )


def load_content(
    source: str,
    hostname: Optional[str] = None,
    timeout: int = REQUEST_TIMEOUT,
    user_agent: Optional[str] = None,
) -> PageContent:
    """
    Load content from a URL or a file path.

    Args:
        source: URL or path to a .html/.htm, .docx or .txt file.
        hostname: Hostname for link classification of local files. URLs
            always use their own hostname.
        timeout: Request timeout in seconds for URLs.
        user_agent: Optional User-Agent header for URLs.

    Returns:
        PageContent for the source.

    Raises:
        ContentExtractionError: If the source is invalid or cannot be loaded.
    """
    parsed = urlparse(source)
    if parsed.scheme in ("http", "https"):
        return fetch_url_content(source, timeout=timeout, user_agent=user_agent)

    path = Path(source)
    suffix = path.suffix.lower()
    if suffix in (".html", ".htm"):
        return load_html_file(path, hostname=hostname or "")
    if suffix == ".docx":
        return load_docx_content(path, hostname=hostname or "")
    if suffix == ".txt":
        return load_text_file(path)

    raise ContentExtractionError(
        f"Invalid source: {source}. Must be a URL (http/https) or a .html, .docx or .txt file path."
    )
