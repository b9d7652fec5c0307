"""Display surfaces the host renders onto."""

from .base import Display, MenuItem
from .console import ConsoleDisplay
from .test_display import MockDisplay

__all__ = ["Display", "MenuItem", "ConsoleDisplay", "MockDisplay"]
