# Copyright (C) 2004
# Distributed under the terms of the GNU General Public License, v2 or later

"""Query herd, maintainer, description and USE flag docs from metadata.xml."""

__version__ = "0.3.0"
