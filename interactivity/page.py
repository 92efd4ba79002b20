"""
Pages: the content blocks a selection displays.

A :class:`PageBuilder` is the mutable form, edited in place and chained; :meth:`PageBuilder.build` checks it against
Discord's embed limits and renders an immutable :class:`Page`, which converts into a :class:`disnake.Embed` to send.
"""

import copy
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

import disnake

from .errors import InvalidPage

__all__ = ("PageField", "Page", "PageBuilder")

# Discord embed limits
MAX_TITLE_LENGTH = 256
MAX_DESCRIPTION_LENGTH = 4096
MAX_FIELDS = 25
MAX_FIELD_NAME_LENGTH = 256
MAX_FIELD_VALUE_LENGTH = 1024
MAX_FOOTER_LENGTH = 2048
MAX_TOTAL_LENGTH = 6000


class PageField(NamedTuple):
    name: str
    value: str
    inline: bool = False


@dataclass(frozen=True)
class Page:
    """A rendered, immutable page."""

    title: Optional[str] = None
    description: Optional[str] = None
    color: Optional[disnake.Colour] = None
    fields: Tuple[PageField, ...] = ()
    footer: Optional[str] = None
    thumbnail_url: Optional[str] = None

    def to_embed(self) -> disnake.Embed:
        embed = disnake.Embed(title=self.title, description=self.description, colour=self.color)
        for field in self.fields:
            embed.add_field(name=field.name, value=field.value, inline=field.inline)
        if self.footer:
            embed.set_footer(text=self.footer)
        if self.thumbnail_url:
            embed.set_thumbnail(url=self.thumbnail_url)
        return embed

    def to_builder(self) -> "PageBuilder":
        return PageBuilder(
            title=self.title,
            description=self.description,
            color=self.color,
            fields=list(self.fields),
            footer=self.footer,
            thumbnail_url=self.thumbnail_url,
        )


class PageBuilder:
    def __init__(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        color: Optional[disnake.Colour] = None,
        fields: Optional[List[PageField]] = None,
        footer: Optional[str] = None,
        thumbnail_url: Optional[str] = None,
    ):
        self.title = title
        self.description = description
        self.color = color
        self.fields = fields if fields is not None else []
        self.footer = footer
        self.thumbnail_url = thumbnail_url

    @classmethod
    def from_embed(cls, embed: disnake.Embed):
        """Creates a builder holding the same content as *embed*."""
        return cls(
            title=embed.title or None,
            description=embed.description or None,
            color=embed.colour or None,
            fields=[PageField(f.name, f.value, bool(f.inline)) for f in embed.fields],
            footer=embed.footer.text or None,
            thumbnail_url=embed.thumbnail.url or None,
        )

    # ==== fluent setters ====
    def with_title(self, title: Optional[str]):
        self.title = title
        return self

    def with_description(self, description: Optional[str]):
        self.description = description
        return self

    def with_color(self, color):
        self.color = disnake.Colour(color) if isinstance(color, int) else color
        return self

    def with_footer(self, footer: Optional[str]):
        self.footer = footer
        return self

    def with_thumbnail_url(self, url: Optional[str]):
        self.thumbnail_url = url
        return self

    def add_field(self, name: str, value: str, inline: bool = False):
        self.fields.append(PageField(name, value, inline))
        return self

    def copy(self):
        """Returns a copy of this builder whose field list can be changed independently."""
        inst = copy.copy(self)
        inst.fields = list(self.fields)
        return inst

    # ==== rendering ====
    def build(self) -> Page:
        """
        Renders this builder into a :class:`Page`.

        :raises InvalidPage: if the content does not fit in a Discord embed.
        """
        total = 0
        if self.title:
            if len(self.title) > MAX_TITLE_LENGTH:
                raise InvalidPage(f"Page titles cannot be longer than {MAX_TITLE_LENGTH} characters.")
            total += len(self.title)
        if self.description:
            if len(self.description) > MAX_DESCRIPTION_LENGTH:
                raise InvalidPage(f"Page descriptions cannot be longer than {MAX_DESCRIPTION_LENGTH} characters.")
            total += len(self.description)
        if len(self.fields) > MAX_FIELDS:
            raise InvalidPage(f"Pages cannot have more than {MAX_FIELDS} fields.")
        for field in self.fields:
            if not field.name or not field.value:
                raise InvalidPage("Page fields must have a name and a value.")
            if len(field.name) > MAX_FIELD_NAME_LENGTH:
                raise InvalidPage(f"Field names cannot be longer than {MAX_FIELD_NAME_LENGTH} characters.")
            if len(field.value) > MAX_FIELD_VALUE_LENGTH:
                raise InvalidPage(f"Field values cannot be longer than {MAX_FIELD_VALUE_LENGTH} characters.")
            total += len(field.name) + len(field.value)
        if self.footer:
            if len(self.footer) > MAX_FOOTER_LENGTH:
                raise InvalidPage(f"Page footers cannot be longer than {MAX_FOOTER_LENGTH} characters.")
            total += len(self.footer)
        if total > MAX_TOTAL_LENGTH:
            raise InvalidPage(f"Pages cannot contain more than {MAX_TOTAL_LENGTH} characters in total.")

        return Page(
            title=self.title,
            description=self.description,
            color=self.color,
            fields=tuple(self.fields),
            footer=self.footer,
            thumbnail_url=self.thumbnail_url,
        )

    def __repr__(self):
        return f"<PageBuilder title={self.title!r} fields={len(self.fields)}>"
