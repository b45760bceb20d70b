from collections.abc import Iterable

from .LinkSpan import LinkSpan


def _arbitrate_spans(candidates: Iterable[LinkSpan]) -> list[LinkSpan]:
    """Reduce candidate spans to a disjoint set.

    Spans are accepted by descending priority; among equal priorities the
    first-registered matcher (lowest id) wins, then the earliest and longest span.
    A candidate overlapping an accepted span is dropped.
    """
    ordered = sorted(
        candidates,
        key=lambda s: (-s.priority, s.matcher_id, s.start, -(s.end - s.start)),
    )
    accepted: list[LinkSpan] = []
    for span in ordered:
        if any(span.overlaps(kept) for kept in accepted):
            continue
        accepted.append(span)
    return sorted(accepted, key=lambda s: s.start)
