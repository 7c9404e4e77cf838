"""Configuration schemas for gvt.

Defines dataclasses for all configuration structures.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MessageConfig:
    """Default commit message templates. `{file}` is replaced by the file name."""
    add: str = "File added successfully. File: {file}"
    detach: str = "File detached successfully. File: {file}"
    commit: str = "File committed successfully. File: {file}"

    @classmethod
    def from_dict(cls, data: dict) -> MessageConfig:
        """Create MessageConfig from dictionary."""
        defaults = cls()
        return cls(
            add=_template(data.get("add"), defaults.add),
            detach=_template(data.get("detach"), defaults.detach),
            commit=_template(data.get("commit"), defaults.commit),
        )

    def render(self, operation: str, file_name: str) -> str:
        template = getattr(self, operation)
        return template.replace("{file}", file_name)


def _template(val: object, default: str) -> str:
    if isinstance(val, str) and val.strip():
        return val
    return default


@dataclass
class GvtConfig:
    """Main gvt configuration."""
    encoding: str = "utf-8"
    messages: MessageConfig = field(default_factory=MessageConfig)

    @classmethod
    def from_dict(cls, data: dict) -> GvtConfig:
        """Create GvtConfig from dictionary."""
        encoding = data.get("encoding")
        messages = data.get("messages", {})
        return cls(
            encoding=encoding if _known_encoding(encoding) else "utf-8",
            messages=MessageConfig.from_dict(messages if isinstance(messages, dict) else {}),
        )


def _known_encoding(val: object) -> bool:
    if not isinstance(val, str) or not val:
        return False
    try:
        "".encode(val)
    except LookupError:
        return False
    return True
