from .errors import *
from .fasta import *
from .database import *
from .search import *
from .reformat import *
from .viewer import *
from .report import summarize, print_summary

import os

from . import config

def run_pipeline(csv_file, launch=True):
    """
    Run every stage on a peptide CSV and return the MView FASTA files.
    All outputs are written next to the CSV.
    """
    csv_file = os.path.abspath(csv_file)
    parent_dir = os.path.dirname(csv_file)
    log_dir = os.path.join(parent_dir, config.LOG_DIR_NAME)

    # Stage 1 convert CSV to FASTA files
    print("Converting CSV to FASTA.")
    fasta_files = csv_to_fasta(csv_file, parent_dir)
    os.makedirs(log_dir, exist_ok=True)

    # Stage 2 build database if it does not exist
    print("Building DB.")
    db_path = prepare_blast_db(os.path.join(parent_dir, config.DB_NAME),
                               os.path.join(parent_dir, config.REFERENCE_FASTA),
                               log_dir)

    # Stage 3 BLAST every peptide
    print("Building results")
    result_files = run_blastp(db_path, fasta_files, parent_dir, log_dir)

    # Stage 4 convert results to FASTA alignments
    fa_files = run_mview(result_files, parent_dir, log_dir)
    print_summary(summarize(fa_files))

    # Stage 5 open Genome Workbench
    if launch:
        print("Opening Genome Workbench...")
        launch_viewer(fa_files)

    return fa_files
