"""Tests for the ChangeLog contributor summary."""

from gentoo_metadata.changelog import grab_changelog_stuff


def test_most_frequent_first(portdir):
	assert grab_changelog_stuff(str(portdir / "app-misc" / "orphan")) == "2 alice, 1 bob"


def test_ties_sorted_by_name(tmp_path):
	(tmp_path / "ChangeLog").write_text(
		"  01 Jan 2005; <zed@gentoo.org> a:\n"
		"  01 Jan 2005; <amy@Gentoo.org> b:\n"
		"  01 Jan 2005; <someone@example.com> c:\n")
	assert grab_changelog_stuff(str(tmp_path)) == "1 amy, 1 zed"


def test_no_changelog(tmp_path):
	assert grab_changelog_stuff(str(tmp_path)) == ""
