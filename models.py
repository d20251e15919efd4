"""
Models Module - Display mode and blog content records
Plain value types shared by the display-mode preference, the content
catalog loader and the templates.
"""

from dataclasses import dataclass
from enum import Enum


class DisplayMode(Enum):
    """Light or dark presentation styling."""

    LIGHT = False
    DARK = True

    @classmethod
    def from_bool(cls, is_dark):
        return cls.DARK if is_dark else cls.LIGHT

    @property
    def is_dark(self):
        return self.value

    @property
    def container_class(self):
        return 'dark-mode' if self.is_dark else 'light-mode'


@dataclass(frozen=True)
class ContentSummary:
    """Summary metadata of one blog post, taken from its front matter."""

    title: str
    excerpt: str = ''

    def to_dict(self):
        return {'title': self.title, 'excerpt': self.excerpt}


__all__ = ['DisplayMode', 'ContentSummary']
