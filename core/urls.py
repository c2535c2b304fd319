"""URL syntax validation with an optional top-level-domain whitelist.

The accepted grammar is one anchored pattern built from four parts:

    [protocol://] subdomain TLD [suffix]

* protocol  -- one or more alphanumerics followed by ``://`` (optional)
* subdomain -- one or more letters, digits, dots or hyphens
* TLD       -- the default TLD grammar, or an alternation of whitelisted TLDs
* suffix    -- empty, or ``/`` or ``#`` followed by anything

Validation is purely syntactic; nothing is resolved or fetched.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from core.errors import ErrorKind, VaultError

logger = logging.getLogger(__name__)

PROTOCOL_PATTERN = r"[A-Za-z0-9]+://"
SUBDOMAIN_PATTERN = r"[A-Za-z0-9.-]+"
SUFFIX_PATTERN = r"(?:[/#].*)?"

# Literal dot, letters-or-dots, ending in one letter. Accepts stray dot runs
# such as "..a"; kept for callers that need the historical verdicts.
LEGACY_TLD_PATTERN = r"\.[A-Za-z.]+[A-Za-z]"

# Same verdicts as the legacy grammar minus empty labels: either two or more
# dot-separated letter labels, or a single label of at least two letters.
STRICT_TLD_PATTERN = r"\.(?:[A-Za-z]+(?:\.[A-Za-z]+)+|[A-Za-z]{2,})"

DEFAULT_MAX_URL_LENGTH = 2048


def compose_url_pattern(tld_pattern: str) -> str:
    return rf"(?:{PROTOCOL_PATTERN})?{SUBDOMAIN_PATTERN}(?:{tld_pattern}){SUFFIX_PATTERN}"


class UrlValidator:
    """Matches URLs against the composed grammar.

    The default pattern is compiled once per instance. A whitelist is call
    scoped, so its pattern is composed and compiled on each call after every
    entry has been checked against the TLD grammar.
    """

    def __init__(self, strict_tld: bool = True, max_length: int = DEFAULT_MAX_URL_LENGTH) -> None:
        self.strict_tld = strict_tld
        self.max_length = max_length
        self.tld_pattern = STRICT_TLD_PATTERN if strict_tld else LEGACY_TLD_PATTERN
        self._tld_re = re.compile(self.tld_pattern)
        self._default_re = re.compile(compose_url_pattern(self.tld_pattern))

    def is_valid_tld(self, tld: str) -> bool:
        if not isinstance(tld, str):
            return False
        return self._tld_re.fullmatch(tld) is not None

    def whitelist_pattern(self, whitelist: Sequence[str]) -> str:
        """Build a case-insensitive alternation of escaped whitelist entries.

        Raises:
            VaultError(invalid_whitelist_entry): an entry fails the TLD grammar.
        """
        if isinstance(whitelist, str):
            whitelist = [whitelist]

        entries: list[str] = []
        for entry in whitelist:
            if not self.is_valid_tld(entry):
                raise VaultError(ErrorKind.invalid_whitelist_entry, entry=entry)
            entries.append(re.escape(entry))

        if not entries:
            # Empty whitelist: no TLD is acceptable
            return "(?!)"
        return "(?i:" + "|".join(entries) + ")"

    def validate(self, url: str, whitelist: Sequence[str] | None = None) -> bool:
        if whitelist is None:
            pattern = self._default_re
        else:
            pattern = re.compile(compose_url_pattern(self.whitelist_pattern(whitelist)))

        if not isinstance(url, str) or len(url) > self.max_length:
            logger.debug("Rejected URL of unsupported type or length")
            return False
        return pattern.fullmatch(url) is not None


def is_valid_top_level_domain(tld: str, strict: bool = True) -> bool:
    return UrlValidator(strict_tld=strict).is_valid_tld(tld)


def validate_url(
    url: str,
    whitelist: Sequence[str] | None = None,
    strict_tld: bool = True,
    max_length: int = DEFAULT_MAX_URL_LENGTH,
) -> bool:
    """Validate ``url`` syntactically, optionally restricted to ``whitelist`` TLDs.

    Raises:
        VaultError(invalid_whitelist_entry): a whitelist entry is not a valid
            TLD. Raised before any matching, whatever the URL.
    """
    return UrlValidator(strict_tld=strict_tld, max_length=max_length).validate(url, whitelist)
