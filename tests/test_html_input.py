from __future__ import annotations

from pathlib import Path

import pytest

from deploy_errors import InputValidationError, UsageError
from html_input import validate_html_file


def _never(warning: str) -> bool:
    raise AssertionError(f"unexpected prompt: {warning}")


def test_missing_argument_is_usage_error(tmp_path: Path) -> None:
    with pytest.raises(UsageError, match="Usage"):
        validate_html_file(None, base_dir=tmp_path, confirm=_never)
    with pytest.raises(UsageError):
        validate_html_file("", base_dir=tmp_path, confirm=_never)


def test_relative_path_resolves_against_base_dir(html_file: Path) -> None:
    result = validate_html_file("site.html", base_dir=html_file.parent, confirm=_never)

    assert result == html_file
    assert result.is_absolute()


def test_nonexistent_file_rejected(tmp_path: Path) -> None:
    with pytest.raises(InputValidationError, match="does not exist"):
        validate_html_file("missing.html", base_dir=tmp_path, confirm=_never)


def test_directory_is_not_a_regular_file(tmp_path: Path) -> None:
    (tmp_path / "folder.html").mkdir()
    with pytest.raises(InputValidationError, match="does not exist"):
        validate_html_file("folder.html", base_dir=tmp_path, confirm=_never)


def test_wrong_extension_rejected_without_prompt(tmp_path: Path) -> None:
    notes = tmp_path / "notes.txt"
    notes.write_text("<html></html>", encoding="utf-8")

    with pytest.raises(InputValidationError, match="not an HTML file"):
        validate_html_file(str(notes), base_dir=tmp_path, confirm=_never)


@pytest.mark.parametrize("name", ["page.HTML", "page.htm", "page.Htm"])
def test_extension_is_case_insensitive(tmp_path: Path, name: str) -> None:
    path = tmp_path / name
    path.write_text("<HTML><BODY>x</BODY></HTML>", encoding="utf-8")

    assert validate_html_file(name, base_dir=tmp_path, confirm=_never) == path


def test_missing_root_tag_declined(tmp_path: Path) -> None:
    path = tmp_path / "fragment.html"
    path.write_text("<p>just a fragment</p>", encoding="utf-8")
    prompts = []

    def decline(warning: str) -> bool:
        prompts.append(warning)
        return False

    with pytest.raises(InputValidationError, match="Aborted"):
        validate_html_file(str(path), base_dir=tmp_path, confirm=decline)
    assert len(prompts) == 1
    assert "no <html> tag" in prompts[0]


def test_missing_root_tag_accepted(tmp_path: Path) -> None:
    path = tmp_path / "fragment.html"
    path.write_text("<p>just a fragment</p>", encoding="utf-8")

    assert validate_html_file(str(path), base_dir=tmp_path, confirm=lambda w: True) == path


def test_undecodable_bytes_do_not_crash(tmp_path: Path) -> None:
    path = tmp_path / "latin.html"
    path.write_bytes(b"<html>\xff\xfe caf\xe9</html>")

    assert validate_html_file(str(path), base_dir=tmp_path, confirm=_never) == path
