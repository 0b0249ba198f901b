"""Turn annotated markup into one attribute snapshot per opening tag."""

from __future__ import annotations

from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Callable, Dict, List, Optional, Tuple

from .annotator import LOCATION_ATTRIBUTE
from .errors import ParseError
from .result import Location


@dataclass(frozen=True)
class TagSnapshot:
    """Attributes of a single opening tag, as seen by the rules."""

    tag_name: str
    location: Location
    attrs: Dict[str, str] = field(default_factory=dict)
    duplicates: Dict[str, str] = field(default_factory=dict)

    @property
    def attr_keys(self) -> Tuple[str, ...]:
        """Attribute names in first-seen order."""

        return tuple(self.attrs)


TagHandler = Callable[[TagSnapshot], None]


class TagEventParser(HTMLParser):
    """Tokenize a document and hand each opening tag to ``on_tag`` in order.

    Repeated attribute names keep their first value in ``attrs`` and their
    last repeated value in ``duplicates``. Tracking is scoped to a single tag.
    """

    def __init__(self, path: str, on_tag: TagHandler) -> None:
        super().__init__(convert_charrefs=True)
        self.path = path
        self.on_tag = on_tag

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        seen: Dict[str, str] = {}
        duplicates: Dict[str, str] = {}
        location: Optional[Location] = None
        for name, value in attrs:
            value = value or ""
            if name == LOCATION_ATTRIBUTE:
                if location is None:
                    location = self._marker_location(value)
                continue
            if name in seen:
                duplicates[name] = value
            else:
                seen[name] = value
        if location is None:
            location = Location(self.path, self.getpos()[0])
        self.on_tag(TagSnapshot(tag_name=tag, location=location, attrs=seen, duplicates=duplicates))

    def _marker_location(self, value: str) -> Optional[Location]:
        try:
            return Location.parse(value)
        except ValueError:
            return None


def parse_document(text: str, path: str, on_tag: TagHandler) -> None:
    """Feed the whole of ``text`` through the tokenizer, raising :class:`ParseError` on failure."""

    parser = TagEventParser(path, on_tag)
    try:
        parser.feed(text)
        parser.close()
    except AssertionError as exc:
        raise ParseError(path, str(exc) or exc.__class__.__name__) from exc
