from __future__ import annotations

from .base import RespondError
from .guidance import build_guidance_message
from .render import format_error

__all__ = ["RespondError", "build_guidance_message", "format_error"]
