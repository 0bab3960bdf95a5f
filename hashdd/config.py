"""Device detection configuration options."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ConfigDeviceDetection"]


@dataclass
class ConfigDeviceDetection:
    """Options controlling how a User-Agent is handled during detection.

    ``update_matched_user_agent`` records the matched characters of the
    target User-Agent; ``max_matched_user_agent_length`` limits how many
    characters are considered and is ignored when updating is off;
    ``allow_unmatched`` lets results with no matched node count as valid.
    """

    update_matched_user_agent: bool = True
    max_matched_user_agent_length: int = 500
    allow_unmatched: bool = False

    def __post_init__(self) -> None:
        length = self.max_matched_user_agent_length
        if isinstance(length, bool) or not isinstance(length, int):
            raise TypeError("max_matched_user_agent_length must be an integer")
        if length < 0:
            raise ValueError("max_matched_user_agent_length must not be negative")