"""Tests for the ``scripts.build`` command."""

import json

from scripts.build import main


def test_builds_artifact(content_dir, tmp_path, capsys):
    output = tmp_path / "out" / "blog-data.json"

    exit_code = main(["--content-dir", str(content_dir), "--output", str(output)])

    assert exit_code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["posts"][0]["slug"] == "february"
    assert data["tags"]["Go"] == ["february", "january"]
    assert "Generated blog data with 2 posts" in capsys.readouterr().out


def test_malformed_document_fails_build(write_post, tmp_path, capsys):
    write_post("bad.md", "title: [unclosed")
    output = tmp_path / "blog-data.json"

    exit_code = main(["--content-dir", str(tmp_path / "posts"), "-o", str(output)])

    assert exit_code == 1
    assert not output.exists()
    assert "bad.md" in capsys.readouterr().err


def test_skip_invalid_flag(write_post, tmp_path):
    write_post("good.md", "title: Good")
    write_post("bad.md", "title: [unclosed")
    output = tmp_path / "blog-data.json"

    exit_code = main(
        ["--content-dir", str(tmp_path / "posts"), "-o", str(output), "--skip-invalid"]
    )

    assert exit_code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert [p["slug"] for p in data["posts"]] == ["good"]


def test_duplicate_slug_fails_build(write_post, tmp_path):
    write_post("one.md", "slug: twin")
    write_post("two.md", "slug: twin")

    exit_code = main(
        ["--content-dir", str(tmp_path / "posts"), "-o", str(tmp_path / "x.json")]
    )
    assert exit_code == 1
