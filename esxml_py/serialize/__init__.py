"""Markup serialization for esxml trees."""

from .xml import serialize_to_xml, to_markup

__all__ = ["serialize_to_xml", "to_markup"]
