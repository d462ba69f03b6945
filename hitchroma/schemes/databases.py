"""Fixed colors for domain annotation databases (InterPro member databases)."""
from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ..config import UNCLASSIFIED_GREY
from ..conversions.to_rgb import format_rgb
from ..types.scheme_types import RGB


class DomainDatabase(str, Enum):
    PFAM = "Pfam"
    SUPERFAMILY = "SUPERFAMILY"
    SMART = "SMART"
    HAMAP = "HAMAP"
    PANTHER = "PANTHER"
    PRODOM = "PRODOM"
    PROSITE_PROFILES = "PROSITE profiles"
    CDD = "CDD"
    CATH_GENE3D = "CATH-Gene3D"
    PIRSF = "PIRSF"
    PRINTS = "PRINTS"
    TIGRFAMS = "TIGRFAMs"
    SFLD = "SFLD"
    PROSITE_PATTERNS = "PROSITE patterns"

    @classmethod
    def lookup(cls, name: str) -> Optional[DomainDatabase]:
        """
        Resolve a database from its display name or the raw name found in
        InterPro annotations (``PFAM``, ``GENE3D``, ``SSF``, ``PROFILE`` ...).

        Matching is case-insensitive. Returns None for anything unknown.
        """
        try:
            return cls(name)
        except ValueError:
            pass
        return database_aliases.get(name.strip().upper())


# Upper-cased raw names -> database. Display names are added below.
database_aliases: Dict[str, DomainDatabase] = {
    "CATHGENE3D": DomainDatabase.CATH_GENE3D,
    "GENE3D": DomainDatabase.CATH_GENE3D,
    "PROSITE_PROFILES": DomainDatabase.PROSITE_PROFILES,
    "PROFILE": DomainDatabase.PROSITE_PROFILES,
    "PROSITE_PATTERNS": DomainDatabase.PROSITE_PATTERNS,
    "PROSITE": DomainDatabase.PROSITE_PATTERNS,
    "SSF": DomainDatabase.SUPERFAMILY,
    "TIGERFAMS": DomainDatabase.TIGRFAMS,
}
database_aliases.update({database.value.upper(): database for database in DomainDatabase})


database_colors: Mapping[DomainDatabase, RGB] = MappingProxyType({
    DomainDatabase.PFAM: (211, 47, 47),
    DomainDatabase.SUPERFAMILY: (171, 71, 188),
    DomainDatabase.SMART: (106, 27, 154),
    DomainDatabase.HAMAP: (57, 73, 171),
    DomainDatabase.PANTHER: (33, 150, 243),
    DomainDatabase.PRODOM: (0, 188, 212),
    DomainDatabase.PROSITE_PROFILES: (0, 150, 136),
    DomainDatabase.CDD: (76, 175, 80),
    DomainDatabase.CATH_GENE3D: (205, 220, 57),
    DomainDatabase.PIRSF: (255, 235, 59),
    DomainDatabase.PRINTS: (255, 193, 7),
    DomainDatabase.TIGRFAMS: (255, 112, 67),
    DomainDatabase.SFLD: (121, 85, 72),
    DomainDatabase.PROSITE_PATTERNS: (55, 71, 79),
})


def color_by_database(name: Optional[str]) -> str:
    """Color for a domain's source database. Unknown databases are grey."""
    database = DomainDatabase.lookup(name) if name is not None else None
    if database is None:
        return format_rgb(UNCLASSIFIED_GREY)
    return format_rgb(database_colors[database])
