import pytest

from mdbatch.markdown.images import fix_image_attributes, strip_image_attributes


@pytest.mark.parametrize(
    "alt,src,attrs",
    [
        ("", "images/media/image1.png", 'width="3.5in" height="2in"'),
        ("Диаграмма 1", "media/img 2.jpeg", "width=50%"),
        ("a(b)", "x.png", ""),
        ("alt", "", ".class #id"),
    ],
)
def test_strip_image_attributes_drops_block(alt, src, attrs):
    text = f"![{alt}]({src}){{{attrs}}}"
    out, count = strip_image_attributes(text)
    assert out == f"![{alt}]({src})"
    assert count == 1


def test_strip_image_attributes_multiple_in_document():
    text = (
        "# Title\n\n"
        "![](images/media/image1.png){width=\"1in\"} and ![b](c.png){height=2}\n"
        "trailing"
    )
    out, count = strip_image_attributes(text)
    assert count == 2
    assert out == "# Title\n\n![](images/media/image1.png) and ![b](c.png)\ntrailing"


def test_strip_image_attributes_leaves_plain_images():
    text = "![a](b.png) text {not attrs}"
    out, count = strip_image_attributes(text)
    assert out == text
    assert count == 0


def test_strip_image_attributes_requires_adjacency():
    text = "![a](b.png) {width=1in}"
    assert strip_image_attributes(text) == (text, 0)


def test_strip_image_attributes_ignores_links_and_loose_braces():
    text = "[link](http://x){.external} and {width=2} and !(x){y}"
    assert strip_image_attributes(text) == (text, 0)


def test_strip_image_attributes_is_idempotent():
    text = "![a](b){c} text ![e](f){g}\n{h}"
    once, _ = strip_image_attributes(text)
    twice, count = strip_image_attributes(once)
    assert once == "![a](b) text ![e](f)\n{h}"
    assert twice == once
    assert count == 0


def test_fix_image_attributes_rewrites_file_and_keeps_backup(tmp_path):
    md = tmp_path / "doc.md"
    original = "Intro\r\n![x](images/media/image1.png){width=\"2in\"}\r\nEnd"
    md.write_bytes(original.encode("utf-8"))

    changes = fix_image_attributes(str(md), backup=True)

    assert changes == 1
    assert md.read_bytes() == "Intro\r\n![x](images/media/image1.png)\r\nEnd".encode("utf-8")
    backup = tmp_path / "doc.md.bak"
    assert backup.read_bytes() == original.encode("utf-8")


def test_fix_image_attributes_without_changes_still_backs_up(tmp_path):
    md = tmp_path / "plain.md"
    md.write_text("no images here", encoding="utf-8")

    assert fix_image_attributes(str(md), backup=True) == 0
    assert md.read_text(encoding="utf-8") == "no images here"
    assert (tmp_path / "plain.md.bak").read_text(encoding="utf-8") == "no images here"


def test_fix_image_attributes_no_backup(tmp_path):
    md = tmp_path / "doc.md"
    md.write_text("![a](b){c}", encoding="utf-8")

    assert fix_image_attributes(str(md), backup=False) == 1
    assert md.read_text(encoding="utf-8") == "![a](b)"
    assert not (tmp_path / "doc.md.bak").exists()


def test_fix_image_attributes_overwrites_previous_backup(tmp_path):
    md = tmp_path / "doc.md"
    (tmp_path / "doc.md.bak").write_text("stale", encoding="utf-8")
    md.write_text("![a](b){c}", encoding="utf-8")

    fix_image_attributes(str(md))
    assert (tmp_path / "doc.md.bak").read_text(encoding="utf-8") == "![a](b){c}"


def test_fix_image_attributes_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        fix_image_attributes(str(tmp_path / "missing.md"))
    assert not (tmp_path / "missing.md.bak").exists()


def test_fix_image_attributes_backup_failure_leaves_file_untouched(tmp_path):
    md = tmp_path / "doc.md"
    md.write_text("![a](b){c}", encoding="utf-8")
    # a directory in the way makes the backup copy fail
    (tmp_path / "doc.md.bak").mkdir()

    with pytest.raises(OSError):
        fix_image_attributes(str(md), backup=True)
    assert md.read_text(encoding="utf-8") == "![a](b){c}"
