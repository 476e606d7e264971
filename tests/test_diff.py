"""Tests for the change summary."""

from wdym.diff import print_diff, summarize_changes


class TestSummary:

    def test_three_additions(self):
        old = "a\nb"
        new = "a\nb\nc\nd\ne"
        out = summarize_changes(old, new)
        assert out[0] == "  3 additions (+)"
        assert "  + c" in out
        assert "  + e" in out

    def test_deletions(self):
        out = summarize_changes("a\nb\nc", "a")
        assert out[0] == "  2 deletions (-)"

    def test_same_line_count_is_modified(self):
        out = summarize_changes("a\nb", "a\nB")
        assert out == ["  Content modified", "", "Key changes:", "  - b", "  + B"]

    def test_identical_content_has_no_key_changes(self):
        assert summarize_changes("x\ny", "x\ny") == ["  Content modified"]

    def test_empty_old_line_not_shown_as_removed(self):
        out = summarize_changes("\nb", "a\nb")
        assert not any(line.startswith("  - ") for line in out)
        assert "  + a" in out

    def test_capped_at_five_changes(self):
        old = "\n".join(str(i) for i in range(10))
        new = "\n".join(f"x{i}" for i in range(10))
        out = summarize_changes(old, new)
        assert len([line for line in out if line.startswith("  + ")]) == 5
        assert out[-1] == "  ... and more changes"

    def test_short_files_have_no_more_marker(self):
        assert "  ... and more changes" not in summarize_changes("a", "b")


def test_print_diff(capsys):
    print_diff("notes.txt", "a", "a\nb\nc\nd")
    out = capsys.readouterr().out
    assert "Changes for notes.txt" in out
    assert "3 additions (+)" in out
