from __future__ import annotations

REQUIRED_TOOLS: tuple[str, ...] = ("git", "gh")

GITHUB_BASE_URL = "https://github.com"
DEFAULT_TAP_NAME = "homebrew-tap"

FORMULA_DIR = "Formula"
TEMP_DIR_PREFIX = "brewship-"
TAP_CHECKOUT_DIR = "tap"

# Checked in order; the first file that exists decides the license.
LICENSE_CANDIDATES: tuple[str, ...] = (
    "LICENSE",
    "LICENSE.md",
    "LICENSE.txt",
    "LICENCE",
    "LICENCE.md",
    "COPYING",
    "COPYING.md",
)
