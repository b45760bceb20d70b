"""termlink API: pattern library, matcher registry, resolver, and link handler."""
