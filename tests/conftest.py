import pytest

SAMPLE_WXR = """<?xml version="1.0" encoding="UTF-8" ?>
<rss version="2.0"
    xmlns:excerpt="http://wordpress.org/export/1.2/excerpt/"
    xmlns:content="http://purl.org/rss/1.0/modules/content/"
    xmlns:wfw="http://wellformedweb.org/CommentAPI/"
    xmlns:dc="http://purl.org/dc/elements/1.1/"
    xmlns:wp="http://wordpress.org/export/1.2/"
>
<channel>
    <title>Il Mio Blog</title>
    <link>https://example.com</link>
    <description>Appunti di viaggio</description>
    <pubDate>Mon, 19 Oct 2026 10:00:00 +0000</pubDate>
    <language>it-IT</language>
    <wp:wxr_version>1.2</wp:wxr_version>

    <wp:category>
        <wp:term_id>1</wp:term_id>
        <wp:category_nicename><![CDATA[viaggi]]></wp:category_nicename>
        <wp:cat_name><![CDATA[Viaggi]]></wp:cat_name>
        <wp:category_description><![CDATA[Racconti di viaggio]]></wp:category_description>
    </wp:category>
    <wp:category>
        <wp:term_id>2</wp:term_id>
        <wp:category_nicename><![CDATA[cucina]]></wp:category_nicename>
    </wp:category>
    <wp:category>
        <wp:term_id>3</wp:term_id>
        <wp:cat_name><![CDATA[]]></wp:cat_name>
    </wp:category>

    <wp:tag>
        <wp:term_id>4</wp:term_id>
        <wp:tag_slug><![CDATA[mare]]></wp:tag_slug>
        <wp:tag_name><![CDATA[Mare]]></wp:tag_name>
    </wp:tag>
    <wp:tag>
        <wp:term_id>5</wp:term_id>
        <wp:tag_slug><![CDATA[montagna]]></wp:tag_slug>
        <wp:tag_name><![CDATA[Montagna]]></wp:tag_name>
    </wp:tag>
    <wp:tag>
        <wp:term_id>6</wp:term_id>
        <wp:tag_slug><![CDATA[vuoto]]></wp:tag_slug>
    </wp:tag>

    <item>
        <title><![CDATA[Vecchio post]]></title>
        <link>https://example.com/vecchio-post/</link>
        <pubDate>Wed, 10 Jan 2024 08:00:00 +0000</pubDate>
        <dc:creator><![CDATA[mario]]></dc:creator>
        <content:encoded><![CDATA[<p>Ciao <strong>mondo</strong></p>]]></content:encoded>
        <excerpt:encoded><![CDATA[<p>Prima riga<br>seconda riga</p>]]></excerpt:encoded>
        <wp:post_id>10</wp:post_id>
        <wp:post_date><![CDATA[2024-01-10 08:00:00]]></wp:post_date>
        <wp:status><![CDATA[publish]]></wp:status>
        <wp:post_type><![CDATA[post]]></wp:post_type>
        <category domain="category" nicename="viaggi"><![CDATA[Viaggi]]></category>
        <category domain="post_tag" nicename="mare"><![CDATA[Mare]]></category>
        <category domain="post_format" nicename="post-format-aside"><![CDATA[Aside]]></category>
        <category domain="category" nicename="vuota"><![CDATA[]]></category>
    </item>
    <item>
        <title><![CDATA[Post recente]]></title>
        <link>https://example.com/post-recente/</link>
        <dc:creator><![CDATA[lucia]]></dc:creator>
        <content:encoded><![CDATA[<h2>Titolo</h2><p>Testo</p>]]></content:encoded>
        <excerpt:encoded><![CDATA[]]></excerpt:encoded>
        <wp:post_id>11</wp:post_id>
        <wp:post_date><![CDATA[2025-06-01 09:30:00]]></wp:post_date>
        <wp:status><![CDATA[draft]]></wp:status>
        <wp:post_type><![CDATA[post]]></wp:post_type>
    </item>
    <item>
        <title><![CDATA[Chi siamo]]></title>
        <link>https://example.com/chi-siamo/</link>
        <dc:creator><![CDATA[mario]]></dc:creator>
        <content:encoded><![CDATA[<p>Siamo noi.</p>]]></content:encoded>
        <excerpt:encoded><![CDATA[<p>Non mostrato</p>]]></excerpt:encoded>
        <wp:post_id>12</wp:post_id>
        <wp:post_date><![CDATA[2023-03-01 12:00:00]]></wp:post_date>
        <wp:status><![CDATA[publish]]></wp:status>
        <wp:post_type><![CDATA[page]]></wp:post_type>
        <category domain="category" nicename="viaggi"><![CDATA[Viaggi]]></category>
    </item>
    <item>
        <title><![CDATA[foto.jpg]]></title>
        <wp:post_id>13</wp:post_id>
        <wp:post_date><![CDATA[2026-01-01 00:00:00]]></wp:post_date>
        <wp:status><![CDATA[inherit]]></wp:status>
        <wp:post_type><![CDATA[attachment]]></wp:post_type>
    </item>
    <item>
        <title><![CDATA[Bozza senza data]]></title>
        <dc:creator><![CDATA[lucia]]></dc:creator>
        <content:encoded><![CDATA[]]></content:encoded>
        <wp:post_id>14</wp:post_id>
        <wp:post_date><![CDATA[0000-00-00 00:00:00]]></wp:post_date>
        <wp:status><![CDATA[draft]]></wp:status>
        <wp:post_type><![CDATA[post]]></wp:post_type>
    </item>
    <item>
        <title><![CDATA[Menu]]></title>
        <wp:post_id>15</wp:post_id>
        <wp:post_type><![CDATA[nav_menu_item]]></wp:post_type>
    </item>
    <item>
        <title><![CDATA[Contatti]]></title>
        <content:encoded><![CDATA[<p>Scrivici</p>]]></content:encoded>
        <wp:post_id>16</wp:post_id>
        <wp:post_date><![CDATA[2024-05-05 10:00:00]]></wp:post_date>
        <wp:status><![CDATA[weird-status]]></wp:status>
        <wp:post_type><![CDATA[page]]></wp:post_type>
    </item>
</channel>
</rss>
"""

MINIMAL_WXR = """<?xml version="1.0" encoding="UTF-8" ?>
<rss version="2.0"
    xmlns:content="http://purl.org/rss/1.0/modules/content/"
    xmlns:wp="http://wordpress.org/export/1.2/"
>
<channel>
    <item>
        <title><![CDATA[Hi]]></title>
        <content:encoded><![CDATA[<p>Body</p>]]></content:encoded>
        <wp:status>publish</wp:status>
        <wp:post_type>post</wp:post_type>
    </item>
</channel>
</rss>
"""


@pytest.fixture
def sample_wxr():
    return SAMPLE_WXR


@pytest.fixture
def minimal_wxr():
    return MINIMAL_WXR


@pytest.fixture
def export_file(tmp_path):
    """Writes ``SAMPLE_WXR`` to a temporary .xml file and returns its path."""
    path = tmp_path / "export.xml"
    path.write_text(SAMPLE_WXR, encoding="utf-8")
    return path
