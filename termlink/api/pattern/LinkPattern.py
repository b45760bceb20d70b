"""Compiled local path grammar for one platform family."""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LinkPattern:
    """Immutable matching rule built from prefix, separator, and path-character clauses.

    The compiled regex has a single capturing group (group 1) spanning the whole path:

        (prefix?(separator(escaped|excluded)+)+)

    ``escaped`` is tried before ``excluded`` so a backslash-escaped delimiter is kept
    inside the path instead of ending it.
    """

    name: str
    prefix: str
    separator: str
    excluded: str
    escaped: str | None = None
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "regex", re.compile(self.source))

    @property
    def path_character(self) -> str:
        if self.escaped:
            return f"(?:{self.escaped}|{self.excluded})"
        return self.excluded

    @property
    def source(self) -> str:
        return f"((?:{self.prefix})?(?:(?:{self.separator}){self.path_character}+)+)"
