# Copyright (C) 2004
# Distributed under the terms of the GNU General Public License, v2 or later

import os
import re
from collections import Counter

from portage.util import grabfile

_dev_re = re.compile(r"<([^<>@\s]+)@gentoo\.org>", re.I)


def grab_changelog_stuff(directory):
	"""Returns "count dev, ..." for everyone named in a package's ChangeLog.

	The most frequent contributors come first.  Returns "" when there is no
	ChangeLog or nobody is named in it.
	"""
	text = "\n".join(grabfile(os.path.join(directory, "ChangeLog")))
	counts = Counter(x.lower() for x in _dev_re.findall(text))
	ranked = sorted(counts.items(), key=lambda x: (-x[1], x[0]))
	return ", ".join("%d %s" % (count, dev) for dev, count in ranked)
