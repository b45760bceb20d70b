from dataclasses import dataclass


@dataclass(frozen=True)
class LinkSpan:
    """Clickable span over a chunk of terminal text, owned by one matcher."""

    matcher_id: int
    start: int
    end: int
    text: str
    priority: int

    def overlaps(self, other: "LinkSpan") -> bool:
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> dict[str, object]:
        return {
            "matcher_id": self.matcher_id,
            "start": self.start,
            "end": self.end,
            "text": self.text,
            "priority": int(self.priority),
        }
