import io
from datetime import date
import xml.etree.ElementTree as ET

import pytest

from uniprot_fetch import accessors
from uniprot_fetch.parser import uniprot_entries


@pytest.fixture
def entries(three_entries_xml):
    return list(uniprot_entries(io.BytesIO(three_entries_xml)))


def entry_from(xml):
    return ET.fromstring(xml)


def test_accessions(entries):
    assert accessors.accessions(entries[0]) == ["P99999", "B2R5J0", "Q6NUR2"]
    assert accessors.accession(entries[0]) == "P99999"
    assert accessors.accession(entry_from("<entry/>")) is None


def test_tax_name_uses_scientific_name(entries):
    assert accessors.tax_name(entries[1]) == "Schistosoma mansoni"


def test_biosequence_strips_whitespace(entries):
    sequence = accessors.biosequence(entries[0])

    assert len(sequence) == 105
    assert sequence.startswith("MGDVEKGKKI") and sequence.endswith("KKATNE")
    assert accessors.biosequence(entries[2]) == "MVLSPADKTNVKAAWGKVGA"


def test_description_prefers_recommended_name(entries):
    assert accessors.description(entries[0]) == "Cytochrome c [Homo sapiens]"
    assert accessors.description(entries[2]) == "Hemoglobin subunit alpha [Homo sapiens]"


def test_description_falls_back_to_other_names(entries):
    assert accessors.description(entries[1]) == "Putative tetraspanin [Schistosoma mansoni]"

    inn = entry_from(
        '<entry><protein><innName>Insulin glargine</innName></protein>'
        '<organism><name type="scientific">Homo sapiens</name></organism></entry>'
    )
    assert accessors.description(inn) == "Insulin glargine [Homo sapiens]"


def test_description_without_any_name():
    entry = entry_from('<entry><organism><name type="scientific">Mus musculus</name></organism></entry>')

    assert accessors.description(entry) == "Unknown [Mus musculus]"


def test_db_references(entries):
    refs = accessors.db_references(entries[0])

    assert [(r.type, r.id) for r in refs] == [("PDB", "1J3S"), ("GO", "GO:0005758"), ("Pfam", "PF00034")]
    assert refs[0].properties == {"method": "NMR", "chains": "A=2-105"}
    assert refs[2].properties == {}


def test_entry_attributes(entries):
    entry = entries[1]

    assert accessors.dataset(entry) == "TrEMBL"
    assert accessors.created(entry) == date(2011, 7, 27)
    assert accessors.modified(entry) == date(2023, 9, 13)
    assert accessors.version(entry) == 45


def test_to_fasta_wraps_at_seventy_columns(entries):
    lines = accessors.to_fasta(entries[0]).split("\n")

    assert lines[0] == ">P99999 Cytochrome c [Homo sapiens]"
    assert [len(line) for line in lines[1:]] == [70, 35]
    assert "".join(lines[1:]) == accessors.biosequence(entries[0])


def test_to_record(entries):
    record = accessors.to_record(entries[1])

    assert record["accession"] == "G4VFD7"
    assert record["created"] == "2011-07-27"
    assert record["sequence"] == "MGCFSKFLKILLFIFNLLFWLAGI"
    assert record["db_references"] == [
        {
            "type": "EMBL",
            "id": "HE601625",
            "properties": {"protein sequence ID": "CCD78634.1", "molecule type": "Genomic_DNA"},
        }
    ]
