"""
Pytest fixtures and configuration for N-Gram SEO Analyzer tests.
"""

import pytest
from pathlib import Path

from docx import Document
from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.oxml import OxmlElement
from docx.oxml.ns import qn

from ngram_analyzer.models import StructuralContext


def _add_hyperlink(paragraph, url: str, text: str) -> None:
    """Append an external hyperlink run to a python-docx paragraph."""
    r_id = paragraph.part.relate_to(url, RT.HYPERLINK, is_external=True)
    hyperlink = OxmlElement("w:hyperlink")
    hyperlink.set(qn("r:id"), r_id)
    run = OxmlElement("w:r")
    text_element = OxmlElement("w:t")
    text_element.text = text
    run.append(text_element)
    hyperlink.append(run)
    paragraph._p.append(hyperlink)


@pytest.fixture
def sample_html_content() -> str:
    """Sample HTML page with hidden content, headings, emphasis and links."""
    return """
<!DOCTYPE html>
<html>
<head>
    <title>Coffee Brewing | Expert Guide</title>
    <style>.hero { color: brown; }</style>
</head>
<body>
    <script>var hidden = "secret tracking code";</script>
    <h1>Coffee Brewing Guide</h1>
    <p>Great coffee starts with <strong>fresh beans</strong>. Grind them right before brewing!</p>
    <h2>Equipment</h2>
    <p>You need a grinder, a kettle and a <b>scale</b>.</p>
    <p>   </p>
    <h2>Method</h2>
    <h3>Pour over</h3>
    <p>Read our <a href="/guides/pour-over">pour over guide</a> or the
    <a href="https://example.com/faq">FAQ</a>.</p>
    <a href="https://other.org/beans">Buy beans</a>
    <a href="#top">Back to top</a>
    <a name="anchor">No href here</a>
    <noscript>Enable JavaScript to continue</noscript>
    <iframe src="https://ads.example.net/frame"></iframe>
</body>
</html>
"""


@pytest.fixture
def sample_docx(tmp_path: Path) -> Path:
    """Create a sample Word document with headings, bold text and a link."""
    docx_path = tmp_path / "sample.docx"
    doc = Document()

    doc.add_heading("Coffee Brewing Guide", level=1)
    intro = doc.add_paragraph("Great coffee starts with ")
    intro.add_run("fresh beans").bold = True
    intro.add_run(". Grind them right before brewing.")
    doc.add_heading("Equipment", level=2)
    supplier = doc.add_paragraph("You can order a grinder from our supplier ")
    _add_hyperlink(supplier, "https://other.org/grinders", "here")
    doc.add_heading("Pour over", level=3)

    doc.save(str(docx_path))
    return docx_path


@pytest.fixture
def sample_context() -> StructuralContext:
    """Structural context for a small page on example.com."""
    return StructuralContext(
        paragraph_texts=["one two", "   ", "three four five six"],
        h1_count=1,
        h2_count=2,
        h3_count=0,
        strong_count=3,
        link_hrefs=["/about", "https://example.com/blog", "https://other.com", ""],
        hostname="example.com",
    )


@pytest.fixture
def stuffed_bigram_text() -> str:
    """
    500-word text where "buy now" has exactly 6.2% density.

    31 occurrences of "buy now", each followed by 14 unique filler words,
    plus 4 trailing filler words.
    """
    segments = []
    for i in range(31):
        fillers = " ".join(f"f{i}x{j}" for j in range(14))
        segments.append(f"buy now {fillers}")
    segments.append("tail1 tail2 tail3 tail4")
    return " ".join(segments)
