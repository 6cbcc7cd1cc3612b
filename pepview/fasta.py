import os

from . import config
from .errors import MalformedRowError, PipelineError

DELIMITER = ","
PREFIX = "pep"

def csv_to_fasta(csv_file, output_dir, column=None, skip_malformed=None):
    """
    Write one single-sequence FASTA file per data row of a peptide CSV.

    The header line is skipped and row i becomes output_dir/pep<i>.fasta
    holding ">pep<i>" and the peptide taken from `column`. A row without a
    peptide in that column is skipped or, by default, aborts the conversion;
    files already written for earlier rows are removed on abort.
    Returns the list of created files in row order.
    """
    if column is None:
        column = config.PEPTIDE_COL_INDEX
    if skip_malformed is None:
        skip_malformed = config.SKIP_MALFORMED_ROWS

    fasta_files = []
    try:
        with open(csv_file, encoding=config.CSV_ENCODING) as csv_reader:
            next(csv_reader, None)  # header
            for line_no, line in enumerate(csv_reader, 2):
                line = line.rstrip("\n")
                if not line.strip():
                    continue
                fields = line.split(DELIMITER)
                if len(fields) <= column:
                    msg = (f"{csv_file} line {line_no}: expected at least {column + 1} fields, "
                           f"found {len(fields)}")
                elif not fields[column].strip():
                    msg = f"{csv_file} line {line_no}: no peptide in column {column}"
                else:
                    msg = None
                if msg:
                    if skip_malformed:
                        print(f"Warning: skipping {msg}")
                        continue
                    raise MalformedRowError(msg)

                name = f"{PREFIX}{len(fasta_files) + 1}"
                fasta_file = os.path.join(output_dir, f"{name}.fasta")
                write_fasta(name, fields[column], fasta_file)
                fasta_files.append(fasta_file)
    except MalformedRowError:
        remove_files(fasta_files)
        raise
    except OSError as e:
        remove_files(fasta_files)
        raise PipelineError(f"Could not convert {csv_file} to FASTA: {e}") from e

    print(f"Wrote {len(fasta_files)} FASTA files to {output_dir}")
    return fasta_files

def write_fasta(name, peptide, fasta_file):
    """Write a single record as two lines, header and unwrapped sequence."""
    with open(fasta_file, "w", encoding=config.CSV_ENCODING) as f:
        f.write(f">{name}\n")
        f.write(peptide + "\n")

def remove_files(paths):
    for path in paths:
        if os.path.exists(path):
            os.remove(path)
