# docscraper/tests/test_extractor.py

from datetime import datetime, timezone

from docscraper.extractor import ContentExtractor, parse_html, strip_boilerplate
from docscraper.types import CodeBlock, Section


def extract(html: str):
    return ContentExtractor().extract(strip_boilerplate(parse_html(html)))


def test_headings_and_paragraphs_become_flat_sections():
    html = """
    <html>
      <head><title>Docs</title></head>
      <body>
        <main>
          <h1>API Reference</h1>
          <p>Intro.</p>
          <h2>Auth</h2>
          <p>Use a token.</p>
        </main>
      </body>
    </html>
    """
    content = extract(html)

    assert content.title == "API Reference"
    assert content.summary == "Intro."
    assert content.sections == [
        Section(heading="API Reference", content="Intro.", level=1),
        Section(heading="Auth", content="Use a token.", level=2),
    ]
    assert all(section.subsections == () for section in content.sections)
    assert "Use a token." in content.full_text


def test_heading_without_body_is_not_a_section():
    html = "<main><h2>Empty</h2><h3>Filled</h3><ul><li>One</li></ul><p>Two</p></main>"
    # li is not a direct sibling of the heading; the ul around it is ignored
    content = extract(html)
    assert content.sections == [Section(heading="Filled", content="Two", level=3)]


def test_code_is_left_out_of_section_text():
    html = """
    <main>
      <h2>Install</h2>
      <p>Run <code>pip install thing</code> first.</p>
      <pre><code>pip install thing</code></pre>
      <div class="code-block">ignored()</div>
      <div>More words.</div>
    </main>
    """
    content = extract(html)
    assert content.sections == [Section(heading="Install", content="Run first.\nMore words.", level=2)]


def test_language_class_sets_code_block_language():
    html = '<main><pre><code class="language-python">print(1)</code></pre></main>'
    content = extract(html)
    assert content.code_blocks == [CodeBlock(code="print(1)", language="python")]


def test_code_block_context_and_filename_come_from_preceding_sibling():
    html = """
    <main>
      <p>Run this:</p>
      <pre><code class="language-bash">  ls -la  </code></pre>
      <div class="filename">app.py</div>
      <pre><code>x = 1</code></pre>
      <pre><code>   </code></pre>
    </main>
    """
    blocks = extract(html).code_blocks

    assert blocks == [
        CodeBlock(code="ls -la", language="bash", context="Run this:"),
        CodeBlock(code="x = 1", language="text", filename="app.py"),
    ]


def test_code_outside_main_content_is_ignored():
    html = '<div><pre><code>outside()</code></pre></div><article><p>Body</p></article>'
    assert extract(html).code_blocks == []


def test_title_falls_back_to_title_tag_then_open_graph():
    assert extract("<head><title> Page </title></head><main><p>x</p></main>").title == "Page"
    og = '<head><meta property="og:title" content=" OG Title "></head><main><p>x</p></main>'
    assert extract(og).title == "OG Title"
    assert extract("<main><p>x</p></main>").title == ""


def test_summary_falls_back_to_meta_description():
    html = '<head><meta name="description" content="Describes it"></head><main><h2>Only heading</h2></main>'
    assert extract(html).summary == "Describes it"


def test_boilerplate_does_not_reach_the_extracted_text():
    html = """
    <header><h1>Site Name</h1></header>
    <main>
      <nav>Home | Guides</nav>
      <div class="toc">Contents</div>
      <h1>Guide</h1>
      <p>Real text.</p>
      <script>var x = 1;</script>
    </main>
    <footer>Copyright</footer>
    """
    content = extract(html)

    assert content.title == "Guide"
    assert "Home" not in content.full_text
    assert "Contents" not in content.full_text
    assert "var x" not in content.full_text
    assert content.sections == [Section(heading="Guide", content="Real text.", level=1)]


def test_page_without_main_content():
    content = extract("<body><h1>Lonely</h1><p>Text</p></body>")
    assert content.title == "Lonely"
    assert content.full_text == ""
    assert content.sections == []
    assert content.code_blocks == []


def test_extract_metadata_reads_meta_tags():
    html = """
    <head>
      <meta name="description" content="About the API">
      <meta name="keywords" content="api, auth ,, api, tokens">
      <meta name="author" content="Docs Team">
    </head>
    """
    captured = datetime(2024, 5, 1, tzinfo=timezone.utc)
    metadata = ContentExtractor().extract_metadata(parse_html(html), captured_at=captured)

    assert metadata.description == "About the API"
    assert metadata.keywords == ("api", "auth", "tokens")
    assert metadata.author == "Docs Team"
    assert metadata.last_updated == captured


def test_extract_metadata_without_tags():
    metadata = ContentExtractor().extract_metadata(parse_html("<main></main>"))
    assert metadata.description is None
    assert metadata.keywords is None
    assert metadata.author is None
    assert metadata.last_updated.tzinfo is not None


def test_prism_pre_with_language_yields_one_block():
    html = '<main><p>Install:</p><pre class="prism-code language-bash"><code>npm i x</code></pre></main>'
    blocks = extract(html).code_blocks
    assert blocks == [CodeBlock(code="npm i x", language="bash", context="Install:")]


def test_language_on_both_pre_and_code_yields_one_block():
    html = '<main><pre class="language-python"><code class="language-python">print(1)</code></pre></main>'
    assert extract(html).code_blocks == [CodeBlock(code="print(1)", language="python")]


def test_code_block_wrapper_div_does_not_duplicate_inner_code():
    html = """
    <main>
      <div class="code-block"><pre><code class="language-js">run()</code></pre></div>
      <div class="code-block">plain()</div>
    </main>
    """
    assert extract(html).code_blocks == [
        CodeBlock(code="run()", language="js"),
        CodeBlock(code="plain()", language="text"),
    ]
