# Copyright (C) 2007
# Distributed under the terms of the GNU General Public License, v2 or later

from .markup import decode_entities, extract_tag, nonblank_lines, strip_markup


def maintainer_lines(document):
	"""Returns email, name and description lines of every <maintainer>."""
	region = extract_tag(document, "maintainer")
	return nonblank_lines(decode_entities(strip_markup(region)))


def maintainer_info(document):
	return "\n".join(maintainer_lines(document))
