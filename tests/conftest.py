"""Shared fixtures: a throwaway portage tree and a color-free terminal."""

import pytest
import portage.output

import gentoo_metadata.metadata
import gentoo_metadata.report

MYSQL_METADATA = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE pkgmetadata SYSTEM "http://www.gentoo.org/dtd/metadata.dtd">
<pkgmetadata>
<herd>mysql</herd>
<longdescription>
  MySQL is a fast, multi-threaded, multi-user
  SQL database server &amp; client.
</longdescription>
<use>
  <flag name='cluster'>Add support for NDB clustering</flag>
  <flag name="embedded">Build embedded server (<pkg>dev-db/mysql</pkg>)</flag>
</use>
</pkgmetadata>
"""


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
	"""Disable colors and pretend the terminal size is unknown."""
	monkeypatch.setattr(portage.output, "havecolor", 0)
	monkeypatch.setattr(gentoo_metadata.report, "get_term_size",
		lambda: (0, 0))
	monkeypatch.setattr(gentoo_metadata.metadata, "color_disabled",
		lambda: False)


def make_package(portdir, atom, metadata=None, changelog=None):
	"""Creates portdir/atom, optionally with metadata.xml and ChangeLog."""
	directory = portdir.joinpath(*atom.split("/"))
	directory.mkdir(parents=True)
	if metadata is not None:
		(directory / "metadata.xml").write_text(metadata)
	if changelog is not None:
		(directory / "ChangeLog").write_text(changelog)
	return directory


@pytest.fixture
def portdir(tmp_path, monkeypatch):
	"""A small tree with dev-db/mysql, a virtual and a metadata-less package."""
	root = tmp_path / "portage"
	root.mkdir()
	make_package(root, "dev-db/mysql", MYSQL_METADATA)
	make_package(root, "virtual/jdk", "<pkgmetadata>\n<herd>java</herd>\n</pkgmetadata>\n")
	make_package(root, "app-misc/orphan", changelog=(
		"# ChangeLog for app-misc/orphan\n"
		"  01 Jan 2005; Alice <alice@gentoo.org> orphan-1.ebuild:\n"
		"  02 Jan 2005; Bob <bob@gentoo.org> orphan-1.ebuild:\n"
		"  03 Jan 2005; Alice <alice@gentoo.org> orphan-2.ebuild:\n"))
	monkeypatch.setattr(gentoo_metadata.metadata, "get_portdir",
		lambda: str(root))
	return root
