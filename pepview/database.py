import os

from . import config, tools
from .errors import PipelineError

def blast_db_exists(db_path):
    """makeblastdb writes <db>.pin for a single volume, <db>.pal for several."""
    return os.path.exists(db_path + ".pin") or os.path.exists(db_path + ".pal")

def prepare_blast_db(db_path, fasta_file, log_dir):
    """
    Build a BLAST protein database from a reference FASTA.
    Nothing is run when the database already exists at db_path.
    Returns db_path.
    """
    if blast_db_exists(db_path):
        print(f"Using existing database {db_path}")
        return db_path

    if not os.path.exists(fasta_file):
        raise PipelineError(f"Reference FASTA {fasta_file} not found, cannot build {db_path}")

    cmd = ["makeblastdb",
           "-in", fasta_file,
           "-dbtype", "prot",
           "-out", db_path,
           "-title", config.DB_TITLE,
           "-parse_seqids",
           "-blastdb_version", str(config.DB_VERSION)]
    tools.run_tool(cmd, os.path.join(log_dir, "makeblastdb.log"))

    return db_path
