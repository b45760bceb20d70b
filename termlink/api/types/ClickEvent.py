from dataclasses import dataclass


@dataclass
class ClickEvent:
    """Plain pointer event for hosts without their own event type."""

    ctrl_key: bool = False
    meta_key: bool = False
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True
