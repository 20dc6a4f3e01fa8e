# -*- coding: utf-8 -*-
#
# This file is part of `karaoke`, a library for ABC notation songs with lyrics
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Meta-information about the karaoke package.

This information is used by the package itself to report its version.

"""

name = "karaoke"
description = "Compile ABC notation songs with lyrics into playable music"
maintainer = "Wilbert Berendsen"
maintainer_email = "info@wilbertberendsen.nl"
url = "https://github.com/frescobaldi/karaoke"

# keep in sync with the version in pyproject.toml
version = (0, 1, 0)
version_string = ".".join(map(str, version))
