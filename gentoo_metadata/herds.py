# Copyright (C) 2004
# Distributed under the terms of the GNU General Public License, v2 or later

"""Herd lookup: metadata.xml often names only a herd, so give a contact."""

import logging

from portage.output import red
from portage.util import writemsg_level

from .markup import decode_entities, extract_tag, nonblank_lines, strip_markup

EMAIL_DOMAIN = "gentoo.org"

# herds without a public alias map to ""
HERD_EMAILS = {
	"alpha": "",
	"amd64": "",
	"arm": "",
	"hppa": "",
	"ia64": "",
	"mips": "",
	"ppc": "",
	"ppc64": "",
	"s390": "",
	"sh": "",
	"sparc": "",
	"x86": "",
	"no-herd": "",
	"apache": "(apache-bugs@gentoo.org)",
	"mysql": "(mysql-bugs@gentoo.org)",
	"php": "(php-bugs@gentoo.org)",
	"postgresql": "(pgsql-bugs@gentoo.org)",
	"kernel": "(kernel-bugs@gentoo.org)",
	"netmon": "(netmon-bugs@gentoo.org)",
	"tex": "(tex-bugs@gentoo.org)",
}


def herd_email(herd):
	"""Returns "(address)" for herd, or "" if it has no public contact."""
	try:
		return HERD_EMAILS[herd.lower()]
	except KeyError:
		return "(%s@%s)" % (herd, EMAIL_DOMAIN)


def annotate_herd(herd):
	return "%s\t%s" % (herd, herd_email(herd))


def herd_list(document):
	"""Returns the herd names listed in a metadata.xml document."""
	region = extract_tag(document, "herd")
	herds = nonblank_lines(decode_entities(strip_markup(region)))
	if region and not herds:
		writemsg_level(red("metadata.xml has an empty <herd> tag") + "\n",
			level=logging.WARNING, noiselevel=-1)
	return herds


def herd_string(document):
	return "\n".join(herd_list(document))


def annotated_herds(document):
	return "\n".join(annotate_herd(x) for x in herd_list(document))
