import re

# Pattern for web links: scheme://... or www.host...; trailing punctuation is left out
HYPERTEXT_PATTERN = re.compile(
    r"""(?:(?:https?|ftp|file)://|www\.)[^\s<>"'`]*[^\s<>"'`.,;:!?)\]}]""",
    re.IGNORECASE,
)
