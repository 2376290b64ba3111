# Copyright (C) 2004
# Distributed under the terms of the GNU General Public License, v2 or later

"""Wrap field text and lay it out under a label column."""

import re
import textwrap

from portage.output import darkgreen, get_term_size

LABEL_WIDTH = 14
DEFAULT_COLUMNS = 80
PLACEHOLDER = "None specified"

_color_re = re.compile(r"\x1b\[[0-9;]*m")


def strip_color(text):
	return _color_re.sub("", text)


class TextWrapper(textwrap.TextWrapper):
	"""A TextWrapper that does not count color escapes toward the width."""

	def _wrap_chunks(self, chunks):
		lines = []
		chunks.reverse()
		while chunks:
			indent = self.subsequent_indent if lines else self.initial_indent
			width = self.width - len(indent)
			if self.drop_whitespace and lines and not chunks[-1].strip():
				del chunks[-1]
			cur_line = []
			cur_len = 0
			while chunks:
				length = len(strip_color(chunks[-1]))
				if cur_len + length > width:
					break
				cur_line.append(chunks.pop())
				cur_len += length
			# a word wider than the line gets a line of its own
			if chunks and not cur_line:
				cur_line.append(chunks.pop())
			if self.drop_whitespace and cur_line and not cur_line[-1].strip():
				del cur_line[-1]
			if cur_line:
				lines.append(indent + "".join(cur_line))
		return lines


def terminal_width():
	"""Returns the terminal width, or DEFAULT_COLUMNS if it is unknown."""
	columns = get_term_size()[1]
	if columns <= 0:
		return DEFAULT_COLUMNS
	return columns


def wrap_paragraphs(text, width):
	"""Greedy word wrap of every line in text, keeping blank lines.

	Returns one list of wrapped pieces per input line; a blank line gives
	an empty list.  Words are never split, even when longer than width.
	"""
	wrapper = TextWrapper(width=max(width, 1), expand_tabs=False,
		replace_whitespace=False, break_long_words=False,
		break_on_hyphens=False)
	return [wrapper.wrap(line) if line.strip() else []
		for line in text.strip("\n").splitlines()]


def _label(label):
	if not label:
		return ""
	return darkgreen(label.ljust(LABEL_WIDTH))


def format_field(label, body, width=None, note=None):
	"""Formats body as a labelled block.

	The first line follows the label.  Each later line of body starts with
	its line number, right-justified under the label; the overflow of a
	wrapped line only gets blank indentation.
	"""
	if not body or not body.strip():
		if note:
			return "%s%s %s" % (_label(label), PLACEHOLDER, note)
		return _label(label) + PLACEHOLDER
	if width is None:
		width = terminal_width() - LABEL_WIDTH

	out = []
	number = 0
	for pieces in wrap_paragraphs(body, width):
		if not pieces:
			if out:
				out.append("")
			continue
		number += 1
		for i, piece in enumerate(pieces):
			if not out:
				out.append(_label(label) + piece)
			elif i == 0:
				out.append("%*d  %s" % (LABEL_WIDTH - 2, number, piece))
			else:
				out.append(" " * LABEL_WIDTH + piece)
	return "\n".join(out)


def format_raw(body, width=None):
	"""Wraps body to the full terminal width without labels or numbers."""
	if not body or not body.strip():
		return PLACEHOLDER
	if width is None:
		width = terminal_width()
	return "\n".join("\n".join(pieces)
		for pieces in wrap_paragraphs(body, width))
