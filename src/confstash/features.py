# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Build-time feature switches.

Exactly one codec feature must be listed. The package resolves it when
``confstash`` is imported, so an invalid selection fails the import instead
of surfacing later as a runtime choice. Packagers shipping the YAML build
replace ``toml_conf`` with ``yaml_conf`` here.
"""

from __future__ import annotations

ENABLED_FEATURES: frozenset[str] = frozenset({"toml_conf"})
