"""Manifest — schema + parser."""
from .schema import SectionManifest
from .parser import ParsedSection, parse_manifest

__all__ = [
    "SectionManifest",
    "ParsedSection",
    "parse_manifest",
]
