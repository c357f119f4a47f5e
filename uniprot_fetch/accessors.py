# uniprot_fetch/accessors.py
# Read-only accessors over the entries yielded by parser.uniprot_entries.

from datetime import date
from typing import Any, Dict, List, NamedTuple, Optional
import xml.etree.ElementTree as ET

from . import config

# Tried in this order when an entry has no recommended name.
OTHER_NAME_TAGS = (
    "alternativeName",
    "submittedName",
    "allergenName",
    "biotechName",
    "cdAntigenName",
    "innName",
)


class DbReference(NamedTuple):
    type: str
    id: str
    properties: Dict[str, str]


def _text(element: Optional[ET.Element]) -> Optional[str]:
    if element is None or element.text is None:
        return None
    return element.text.strip() or None


def accessions(entry: ET.Element) -> List[str]:
    """All accessions of the entry, primary accession first."""
    return [a.text.strip() for a in entry.findall("accession") if a.text]


def accession(entry: ET.Element) -> Optional[str]:
    found = accessions(entry)
    return found[0] if found else None


def tax_name(entry: ET.Element) -> Optional[str]:
    """Scientific name of the organism the entry belongs to."""
    return _text(entry.find("organism/name[@type='scientific']"))


def biosequence(entry: ET.Element) -> str:
    """Protein sequence with the whitespace padding of the XML removed."""
    sequence = entry.find("sequence")
    if sequence is None or sequence.text is None:
        return ""
    return "".join(sequence.text.split())


def protein_name(entry: ET.Element) -> str:
    """
    Returns the recommended full name of the protein or, failing that, the
    first other name UniProt records for it. "Unknown" if there is none.
    """
    name = _text(entry.find("protein/recommendedName/fullName"))
    if name:
        return name
    for tag in OTHER_NAME_TAGS:
        other = entry.find(f"protein/{tag}")
        if other is None:
            continue
        name = _text(other.find("fullName")) or _text(other)
        if name:
            return name
    return "Unknown"


def description(entry: ET.Element) -> str:
    """Protein name followed by the species, e.g. 'Cytochrome c [Homo sapiens]'."""
    return f"{protein_name(entry)} [{tax_name(entry)}]"


def db_references(entry: ET.Element) -> List[DbReference]:
    """Cross-references to other databases, in document order."""
    references = []
    for ref in entry.findall("dbReference"):
        properties = {
            p.get("type"): p.get("value")
            for p in ref.findall("property")
            if p.get("type") is not None
        }
        references.append(DbReference(ref.get("type"), ref.get("id"), properties))
    return references


def dataset(entry: ET.Element) -> Optional[str]:
    """'Swiss-Prot' or 'TrEMBL'."""
    return entry.get("dataset")


def _date_attribute(entry: ET.Element, name: str) -> Optional[date]:
    value = entry.get(name)
    return date.fromisoformat(value) if value else None


def created(entry: ET.Element) -> Optional[date]:
    return _date_attribute(entry, "created")


def modified(entry: ET.Element) -> Optional[date]:
    return _date_attribute(entry, "modified")


def version(entry: ET.Element) -> Optional[int]:
    value = entry.get("version")
    return int(value) if value else None


def to_fasta(entry: ET.Element, width: int = config.FASTA_LINE_WIDTH) -> str:
    """
    Converts an entry to a FASTA record.

    Args:
        entry: An entry from parser.uniprot_entries.
        width: Number of residues per sequence line.

    Returns:
        The header line ('>' accession description) and the wrapped sequence,
        without a trailing newline.
    """
    sequence = biosequence(entry)
    lines = [sequence[i:i + width] for i in range(0, len(sequence), width)]
    return "\n".join([f">{accession(entry)} {description(entry)}"] + lines)


def to_record(entry: ET.Element) -> Dict[str, Any]:
    """Flattens an entry into a JSON-serialisable dictionary."""
    entry_created = created(entry)
    entry_modified = modified(entry)
    return {
        "accession": accession(entry),
        "accessions": accessions(entry),
        "dataset": dataset(entry),
        "created": entry_created.isoformat() if entry_created else None,
        "modified": entry_modified.isoformat() if entry_modified else None,
        "version": version(entry),
        "name": protein_name(entry),
        "organism": tax_name(entry),
        "description": description(entry),
        "sequence": biosequence(entry),
        "db_references": [ref._asdict() for ref in db_references(entry)],
    }
