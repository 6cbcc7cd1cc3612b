import pytest

from pepview.database import blast_db_exists, prepare_blast_db
from pepview.errors import PipelineError

@pytest.fixture
def reference(tmp_path):
    fasta_file = tmp_path / "HCMVProteins.fasta"
    fasta_file.write_text(">UL123\nMESSAKRKMDPDNPDEGPSSK\n")
    return str(fasta_file)

def test_build_command(tmp_path, reference, tool_calls):
    db_path = str(tmp_path / "HCMV")

    assert prepare_blast_db(db_path, reference, str(tmp_path)) == db_path
    assert tool_calls == [["makeblastdb", "-in", reference, "-dbtype", "prot", "-out", db_path,
                           "-title", "HCMV genome", "-parse_seqids", "-blastdb_version", "4"]]

def test_build_is_idempotent(tmp_path, reference, tool_calls):
    db_path = str(tmp_path / "HCMV")

    prepare_blast_db(db_path, reference, str(tmp_path))
    prepare_blast_db(db_path, reference, str(tmp_path))

    assert len(tool_calls) == 1
    assert blast_db_exists(db_path)

def test_existing_alias_database_is_reused(tmp_path, tool_calls):
    db_path = str(tmp_path / "HCMV")
    open(db_path + ".pal", "w").close()

    # no reference FASTA needed once the database exists
    prepare_blast_db(db_path, str(tmp_path / "missing.fasta"), str(tmp_path))

    assert tool_calls == []

def test_missing_reference(tmp_path, tool_calls):
    with pytest.raises(PipelineError, match="missing.fasta"):
        prepare_blast_db(str(tmp_path / "HCMV"), str(tmp_path / "missing.fasta"), str(tmp_path))
    assert tool_calls == []
