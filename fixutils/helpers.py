"""Small helpers for loading schema files."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET


class XMLLoadError(Exception):
    """Raised when an XML file cannot be opened, read or parsed."""


def parse_xml(path: str | os.PathLike[str]) -> ET.Element:
    """Load the XML document at ``path`` and return its root element."""
    try:
        source = open(path, "rb")
    except OSError as exc:
        raise XMLLoadError(f"could not open the file: {path}") from exc

    with source:
        try:
            data = source.read()
        except OSError as exc:
            raise XMLLoadError(f"could not read the file: {path}") from exc

    try:
        return ET.fromstring(data)
    except ET.ParseError as exc:
        raise XMLLoadError(f"could not unmarshal the XML: {path}") from exc