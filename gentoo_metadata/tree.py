# Copyright (C) 2004
# Distributed under the terms of the GNU General Public License, v2 or later

"""Locate package directories inside the portage tree."""

import glob
import os
from collections import namedtuple

import portage
from portage.exception import (AmbiguousPackageName, InvalidAtom,
	PackageNotFound, PortageException)

DEFAULT_PORTDIR = "/usr/portage"
METADATA_FILENAME = "metadata.xml"

PackageRecord = namedtuple("PackageRecord",
	("identifier", "directory", "metadata_path"))


def get_setting(key, default=""):
	"""Returns a portage setting, or default if unset or unavailable."""
	try:
		value = portage.settings.get(key)
	except PortageException:
		return default
	return value or default


def get_portdir():
	return get_setting("PORTDIR", DEFAULT_PORTDIR)


def color_disabled():
	return get_setting("NOCOLOR").lower() in ("yes", "true")


def _record(identifier, directory):
	return PackageRecord(identifier, directory,
		os.path.join(directory, METADATA_FILENAME))


def resolve_package(identifier, portdir):
	"""Maps [category/]package to a PackageRecord.

	Bare names are looked up in every category directory (those named
	word-word) and then in virtual/.
	"""
	if "/" in identifier:
		# stay inside the tree
		parts = identifier.split("/")
		if identifier.startswith("/") or "." in parts or ".." in parts:
			raise InvalidAtom(identifier)
		directory = os.path.join(portdir, identifier)
		if not os.path.isdir(directory):
			raise InvalidAtom(identifier)
		return _record(identifier, directory)

	if identifier in ("", ".", "..") or os.sep in identifier:
		raise PackageNotFound(identifier)
	pattern = os.path.join(glob.escape(portdir), "*-*", glob.escape(identifier))
	matches = sorted(x for x in glob.glob(pattern) if os.path.isdir(x))
	if len(matches) > 1:
		raise AmbiguousPackageName(
			[os.path.relpath(x, portdir) for x in matches])
	if matches:
		return _record(identifier, matches[0])

	directory = os.path.join(portdir, "virtual", identifier)
	if not os.path.isdir(directory):
		raise PackageNotFound(identifier)
	return _record(identifier, directory)


def resolve_packages(identifiers, portdir):
	"""Resolves every identifier before anything is printed.

	The first failure propagates, so one bad name aborts the whole run.
	"""
	return [resolve_package(x, portdir) for x in identifiers]


def read_metadata(record):
	"""Returns the metadata.xml text of a package, or None if missing."""
	if not os.path.exists(record.metadata_path):
		return None
	with open(record.metadata_path, encoding="utf-8", errors="replace") as f:
		return f.read()
