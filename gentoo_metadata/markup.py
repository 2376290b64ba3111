# Copyright (C) 2004
# Distributed under the terms of the GNU General Public License, v2 or later

"""Line-oriented tag extraction and markup cleanup for metadata.xml.

metadata.xml is only loosely structured, so instead of a validating parser
this module slices out the few regions we care about and strips the markup
from them.
"""

import re

from portage.output import blue, green

ENTITIES = {
	"quot": '"',
	"amp": "&",
	"lt": "<",
	"gt": ">",
	"trade": "(tm)",
	"copy": "(c)",
	"#xae": "(r)",
}

INLINE_TAGS = ("pkg", "cat")

TEXT, START, END = "text", "start", "end"

_entity_re = re.compile(r"&(%s);" % "|".join(ENTITIES), re.I)
_open_tag_re = re.compile(r"<[A-Za-z][\w.:-]*(?:\s[^<>]*)?/?>")
_close_tag_re = re.compile(r"</([A-Za-z][\w.:-]*)\s*>")
_space_re = re.compile(r"\s+")
_attr_re = re.compile(r"""([\w.:-]+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))""")
_flag_start_re = re.compile(r"<flag[\s>]")


def decode_entities(text):
	"""Replaces the known named entities; anything else is left alone."""
	return _entity_re.sub(lambda m: ENTITIES[m.group(1).lower()], text)


def extract_tag(text, tag, limit=None):
	"""Returns the lines from each <tag> through the following </tag>.

	Every region is returned in document order unless limit is given.
	An opening tag with no closing tag runs to the end of the text.
	"""
	start_re = re.compile(r"<%s(?:\s[^>]*)?>" % re.escape(tag))
	end = "</%s>" % tag
	regions = []
	region = None
	for line in text.splitlines(True):
		if region is None:
			match = start_re.search(line)
			if match is None:
				continue
			region = [line]
			if end not in line[match.end():]:
				continue
		else:
			region.append(line)
			if end not in line:
				continue
		regions.append("".join(region))
		region = None
		if limit is not None and len(regions) >= limit:
			break
	if region is not None:
		regions.append("".join(region))
	return "".join(regions)


def extract_flags(text):
	"""Returns everything from the first <flag> line to the last </flag> line."""
	lines = text.splitlines(True)
	first = None
	for i, line in enumerate(lines):
		if _flag_start_re.search(line):
			first = i
			break
	if first is None:
		return ""
	last = len(lines) - 1
	for i in range(len(lines) - 1, first - 1, -1):
		if "</flag>" in lines[i]:
			last = i
			break
	return "".join(lines[first:last + 1])


def _close_tag(match):
	if match.group(1).lower() in INLINE_TAGS:
		return ""
	return "\n"


def strip_markup(text, flatten=False):
	"""Removes tags, putting each closed element on a line of its own."""
	if flatten:
		text = " ".join(text.splitlines())
	text = _open_tag_re.sub("", text)
	text = _close_tag_re.sub(_close_tag, text)
	lines = [_space_re.sub(" ", line).strip() for line in text.split("\n")]
	return "\n".join(lines)


def nonblank_lines(text):
	return [x for x in text.splitlines() if x.strip()]


def _parse_tag(body):
	if body.startswith("/"):
		return (END, body[1:].strip().lower(), None)
	body = body.rstrip("/")
	name = body.split(None, 1)[0].lower() if body.strip() else ""
	attrs = {}
	for match in _attr_re.finditer(body[len(name):]):
		value = [x for x in match.group(2, 3, 4) if x is not None][0]
		attrs[match.group(1).lower()] = decode_entities(value)
	return (START, name, attrs)


def tokenize(text):
	"""Splits markup into (kind, name, value) tuples.

	Text tokens are (TEXT, None, data), start tags (START, name, attrs) and
	end tags (END, name, None).  A '>' inside a quoted attribute value does
	not end the tag.  Comments and declarations produce no token.
	"""
	tokens = []
	pos = 0
	size = len(text)
	while pos < size:
		lt = text.find("<", pos)
		if lt < 0:
			tokens.append((TEXT, None, text[pos:]))
			break
		if lt > pos:
			tokens.append((TEXT, None, text[pos:lt]))
		if text.startswith("<!--", lt):
			end = text.find("-->", lt + 4)
			if end < 0:
				break
			pos = end + 3
			continue
		quote = None
		i = lt + 1
		while i < size:
			c = text[i]
			if quote:
				if c == quote:
					quote = None
			elif c in "\"'":
				quote = c
			elif c == ">":
				break
			i += 1
		if i >= size:
			tokens.append((TEXT, None, text[lt:]))
			break
		body = text[lt + 1:i]
		if body[:1] not in ("!", "?"):
			tokens.append(_parse_tag(body))
		pos = i + 1
	return tokens


def render_flags(text):
	"""Turns a run of <flag> elements into display text.

	Each flag becomes a "[name]" line, optionally annotated with its
	restrict atom, followed by its description and a blank line.
	"""
	out = []
	span = None
	for kind, name, value in tokenize(text):
		if kind == TEXT:
			# literal quotes are dropped, &quot; still gives one
			data = decode_entities(_space_re.sub(" ", value.replace("\"", "")))
			if span is not None:
				span.append(data)
			else:
				out.append(data)
		elif name in INLINE_TAGS:
			if kind == START:
				span = []
			elif span is not None:
				out.append(blue("".join(span).strip()))
				span = None
		elif name == "flag":
			if kind == START:
				out.append("\n" + green("[%s]" % value.get("name", "")))
				if value.get("restrict"):
					out.append(" (%s only)" % value["restrict"])
				out.append("\n")
			else:
				out.append("\n\n")
	if span is not None:
		out.append(blue("".join(span).strip()))

	lines = []
	for line in "".join(out).split("\n"):
		line = _space_re.sub(" ", line).strip()
		if line or (lines and lines[-1]):
			lines.append(line)
	while lines and not lines[-1]:
		lines.pop()
	return "\n".join(lines)
