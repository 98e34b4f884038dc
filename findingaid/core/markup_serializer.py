"""
Markup Serialization Component.

Responsible for turning descriptive rich text (scope content paragraphs)
back into an XML fragment stored on the node.
"""

import re
import xml.etree.ElementTree as ET
from typing import List

from core.models import MarkupElement


# XML 1.0 name (ASCII subset plus any non-ASCII letter)
_XML_NAME = re.compile(r'^[A-Za-z_:\u00c0-\uffef][\w.\-:\u00b7\u00c0-\uffef]*$')

# Characters that are not allowed anywhere in an XML 1.0 document
_INVALID_XML_CHARS = re.compile('[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]')


class MarkupSerializer:
    """
    Serializes markup element trees to XML strings.

    Raises ValueError or TypeError for content that cannot be written as
    well-formed XML; the caller decides how to report it.
    """

    @staticmethod
    def _check_name(name) -> None:
        if not isinstance(name, str) or not _XML_NAME.match(name):
            raise ValueError(f"Invalid XML name: {name!r}")

    @staticmethod
    def _check_text(text) -> None:
        if not isinstance(text, str):
            raise TypeError(f"Cannot serialize {text!r} (type {type(text).__name__})")
        if _INVALID_XML_CHARS.search(text):
            raise ValueError(f"Text contains characters not allowed in XML: {text!r}")

    @classmethod
    def to_element(cls, markup: MarkupElement) -> ET.Element:
        """
        Build an ElementTree element from a markup element.

        Args:
            markup: Markup element with nested children

        Returns:
            Equivalent ET.Element
        """
        cls._check_name(markup.tag)
        for name, value in markup.attributes.items():
            cls._check_name(name)
            cls._check_text(value)
        cls._check_text(markup.text)
        cls._check_text(markup.tail)

        element = ET.Element(markup.tag, dict(markup.attributes))
        element.text = markup.text or None
        element.tail = markup.tail or None

        for child in markup.children:
            element.append(cls.to_element(child))

        return element

    @classmethod
    def serialize(cls, paragraphs: List[MarkupElement]) -> str:
        """
        Serialize a list of paragraphs into one XML fragment.

        Args:
            paragraphs: Top-level markup elements in source order

        Returns:
            Concatenated XML of all paragraphs
        """
        return ''.join(
            ET.tostring(cls.to_element(paragraph), encoding='unicode', short_empty_elements=False)
            for paragraph in paragraphs
        )
