"""Regex clauses for local path grammars."""

# '":; are allowed in paths but they are often separators so ignore them
UNIX_PATH_PREFIX = r"\.\.?|~"
UNIX_PATH_SEPARATOR = r"/"
UNIX_EXCLUDED_PATH_CHARACTERS = r"""[^\x00\s!$`&*()\[\]+'":;]"""
UNIX_ESCAPED_EXCLUDED_PATH_CHARACTERS = r"\\[\s!$`&*()+]"

WINDOWS_PATH_PREFIX = r"[a-zA-Z]:|\.\.?|~"
WINDOWS_PATH_SEPARATOR = r"[\\/]"
WINDOWS_EXCLUDED_PATH_CHARACTERS = r"""[^\x00<>?|/\s!$`&*()\[\]+'":;]"""
