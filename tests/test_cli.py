from __future__ import annotations

import json

from ldjson_author.cli import main


def test_cli_prints_author_per_file(tmp_path, make_page, capsys) -> None:
    page = tmp_path / "article.html"
    page.write_text(make_page({"@type": "Article", "author": ["A", "B"]}), encoding="utf-8")
    empty = tmp_path / "empty.html"
    empty.write_text("<html><body>nothing</body></html>", encoding="utf-8")

    assert main([str(page), str(empty)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith("article.html\tA, B")
    assert lines[1].endswith("empty.html\t-")


def test_cli_all_fields_as_json(tmp_path, make_page, capsys) -> None:
    page = tmp_path / "post.html"
    page.write_text(
        make_page({"@type": "BlogPosting", "author": "Jane"}, head="<title>Post</title>"),
        encoding="utf-8",
    )

    assert main(["--all", str(page)]) == 0

    record = json.loads(capsys.readouterr().out)
    assert record["author"] == "Jane"
    assert record["title"] == "Post"


def test_cli_missing_file_exits_non_zero(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "missing.html")]) == 1
    assert capsys.readouterr().out == ""


def test_cli_render_reports_final_url(monkeypatch, make_page, capsys) -> None:
    from ldjson_author import render
    from ldjson_author.render import RenderedPage

    seen = {}

    async def fake_render_pages(urls, config):
        seen["urls"] = urls
        seen["wait"] = config.wait_after_load
        return [
            RenderedPage(
                url=urls[0],
                final_url="https://example.com/story",
                html=make_page({"@type": "NewsArticle", "author": {"name": "Jane Doe"}}),
                jsonld_blocks=1,
            )
        ]

    monkeypatch.setattr(render, "render_pages", fake_render_pages)

    assert main(["--render", "--wait", "2.5", "https://example.com/s"]) == 0

    assert seen == {"urls": ["https://example.com/s"], "wait": 2.5}
    assert capsys.readouterr().out == "https://example.com/story\tJane Doe\n"


def test_cli_render_with_no_pages_exits_non_zero(monkeypatch, capsys) -> None:
    from ldjson_author import render

    async def fake_render_pages(urls, config):
        return []

    monkeypatch.setattr(render, "render_pages", fake_render_pages)

    assert main(["--render", "https://example.com/down"]) == 1
    assert capsys.readouterr().out == ""
