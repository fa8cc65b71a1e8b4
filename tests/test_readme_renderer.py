"""Tests for README rendering."""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import make_repo
from src.domain.repository import AICredit
from src.infrastructure.readme_renderer import ReadmeRenderer, RenderFailure


def test_render_lists_cards_in_given_order() -> None:
    repos = [make_repo("zeta"), make_repo("alpha")]

    text = ReadmeRenderer(title="Projects").render(repos)

    assert text.startswith("# Projects\n")
    assert text.index("zeta") < text.index("alpha")
    assert '<a href="https://github.com/octo/zeta">zeta</a>' in text
    assert "No description provided" in text
    assert "No language detected" in text
    assert "Pushed: Mar 01, 2025" in text
    assert "## Contact" not in text


def test_render_optional_card_details() -> None:
    repo = make_repo(
        "tool",
        description="A <fast> tool",
        language="Go",
        homepage="https://tool.example",
        fork=True,
        source_url="https://github.com/upstream/tool",
        has_releases=True,
    )

    text = ReadmeRenderer().render([repo])

    assert "A &lt;fast&gt; tool" in text
    assert "🔵 Go" in text
    assert '<a href="https://github.com/octo/tool/releases">Releases</a>' in text
    assert '<a href="https://tool.example">Homepage</a>' in text
    assert 'Forked from <a href="https://github.com/upstream/tool">source</a>' in text


def test_render_without_releases_has_no_release_link() -> None:
    text = ReadmeRenderer().render([make_repo("plain")])

    assert "Releases" not in text


def test_render_contact_and_ai_credit() -> None:
    credit = AICredit("TOOL", "img/ai.png", "AI", "Made with AI", 20, 16)

    text = ReadmeRenderer().render(
        [make_repo("tool")],
        contact_lines=["Email: me@example.com", "[Blog](https://example.com)"],
        ai_credits=[credit],
    )

    assert '<img src="img/ai.png" alt="AI" title="Made with AI" width="20" height="16">' in text
    assert "## Contact" in text
    assert "[Blog](https://example.com)" in text


def test_write_creates_file(tmp_path: Path) -> None:
    output = tmp_path / "README.md"

    ReadmeRenderer().write("# hi\n", str(output))

    assert output.read_text(encoding="utf-8") == "# hi\n"
    assert not (tmp_path / "README.md.tmp").exists()


def test_write_failure_raises_render_failure(tmp_path: Path) -> None:
    output = tmp_path / "missing-dir" / "README.md"

    with pytest.raises(RenderFailure):
        ReadmeRenderer().write("# hi\n", str(output))
    assert not output.exists()


def test_render_shows_star_and_fork_counts() -> None:
    text = ReadmeRenderer().render([make_repo("popular", stargazers_count=42, forks_count=7)])

    assert "⭐ 42 stars · 🍴 7 forks" in text


def test_render_escapes_api_text_but_keeps_contact_lines_verbatim() -> None:
    repo = make_repo('x"y', description="<script>alert(1)</script>")

    text = ReadmeRenderer().render([repo], contact_lines=['<a href="https://example.com">Site</a>'])

    assert "<script>" not in text
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in text
    assert ">x&#34;y</a>" in text
    assert '<a href="https://example.com">Site</a>' in text


def test_missing_template_raises_render_failure(tmp_path: Path) -> None:
    renderer = ReadmeRenderer(templates_dir=tmp_path)

    with pytest.raises(RenderFailure, match="template"):
        renderer.render([make_repo("tool")])
