# Copyright (C) 2004
# Distributed under the terms of the GNU General Public License, v2 or later

"""metadata: show what a package's metadata.xml says about it."""

import logging
import sys

from portage.exception import AmbiguousPackageName, InvalidAtom, PackageNotFound
from portage.output import bold, darkgreen, green, nocolor, red
from portage.util import writemsg_level

from . import __version__
from .changelog import grab_changelog_stuff
from .herds import annotated_herds, herd_string
from .maintainer import maintainer_info
from .markup import (decode_entities, extract_flags, extract_tag,
	render_flags, strip_markup)
from .report import format_field, format_raw
from .tree import color_disabled, get_portdir, read_metadata, resolve_packages

OPTIONS = {
	"-d": "directory", "--directory": "directory",
	"-H": "herd", "--herd": "herd",
	"-l": "long_desc", "--long-desc": "long_desc",
	"-m": "maintainer", "--maintainer": "maintainer",
	"-nc": "no_color", "--no-color": "no_color",
	"-r": "raw_metadata", "--raw-metadata": "raw_metadata",
	"-u": "use_flags", "--use-flags": "use_flags",
}

# fixed output order of the field options
FIELDS = ("directory", "herd", "maintainer", "long_desc", "use_flags",
	"raw_metadata")

HERD_NOTE = "(metadata.xml should name a herd, please file a bug)"

HELP = """Usage: metadata [options] [category/]package ...

Options:
  -d, --directory      show the package directory
  -H, --herd           show the herd(s) of the package
  -l, --long-desc      show the long description
  -m, --maintainer     show the maintainer(s) of the package
  -nc, --no-color      do not colorize output
  -r, --raw-metadata   show metadata.xml as is
  -u, --use-flags      show local USE flag descriptions
  -h, --help           show this help message

Without options herd, maintainer, description and USE flags are shown."""


def error(msg):
	writemsg_level(red("!!! ") + msg + "\n", level=logging.ERROR, noiselevel=-1)


def usage(code):
	"""Prints usage information and exits with code."""
	if code:
		writemsg_level("Usage: metadata [options] [category/]package ...\n"
			"Try 'metadata --help' for more information.\n",
			level=logging.ERROR, noiselevel=-1)
	else:
		print(green("metadata v" + __version__))
		print()
		print(HELP)
	sys.exit(code)


def parse_args(args):
	"""Returns (options, packages); bad options exit through usage()."""
	options = dict.fromkeys(list(OPTIONS.values()), False)
	packages = []
	for arg in args:
		if arg in ("-h", "--help"):
			usage(0)
		elif arg in OPTIONS:
			options[OPTIONS[arg]] = True
		elif arg.startswith("-"):
			error("unknown option %r" % arg)
			usage(1)
		else:
			packages.append(arg)
	return options, packages


def long_description(document):
	region = extract_tag(document, "longdescription", limit=1)
	return decode_entities(strip_markup(region, flatten=True)).strip()


def useflag_lines(document):
	return render_flags(extract_flags(document))


def missing_metadata(record):
	print(darkgreen("Metadata: ") + "missing? candidate for tree removal")
	contributors = grab_changelog_stuff(record.directory)
	if contributors:
		print(darkgreen("ChangeLog: ") + contributors)


def full_report(document):
	print(format_field("Herd:", annotated_herds(document), note=HERD_NOTE))
	print(format_field("Maintainer:", maintainer_info(document)))
	print(format_field("Description:", long_description(document)))
	print(format_field("USE flags:", useflag_lines(document)))


def show_package(record, options):
	selected = [x for x in FIELDS if options[x]]
	if selected == ["directory"]:
		print(record.directory)
		return

	document = read_metadata(record)
	if document is None:
		if options["directory"]:
			print(record.directory)
		missing_metadata(record)
		return
	if not selected:
		full_report(document)
		return

	for field in selected:
		if field == "directory":
			print(record.directory)
		elif field == "herd":
			print(format_raw(herd_string(document)))
		elif field == "maintainer":
			print(format_raw(maintainer_info(document)))
		elif field == "long_desc":
			print(format_raw(long_description(document)))
		elif field == "use_flags":
			print(format_raw(useflag_lines(document)))
		elif field == "raw_metadata":
			print(document.rstrip("\n"))


def main(argv=None):
	if argv is None:
		argv = sys.argv[1:]
	options, packages = parse_args(argv)
	if options["no_color"] or color_disabled():
		nocolor()
	if not packages:
		error("no package specified")
		usage(1)

	try:
		records = resolve_packages(packages, get_portdir())
	except AmbiguousPackageName as e:
		error("package name is ambiguous, use one of: %s"
			% ", ".join(e.args[0]))
		usage(1)
	except InvalidAtom as e:
		error("%r is not a valid package atom" % str(e))
		usage(1)
	except PackageNotFound as e:
		error("%r does not exist" % str(e))
		usage(1)

	for i, record in enumerate(records):
		if len(records) > 1:
			if i:
				print()
			print(bold(" * ") + record.identifier)
		show_package(record, options)


if __name__ == "__main__":
	main()
