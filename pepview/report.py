#!/usr/bin/env python3
import os
import sys

from Bio import SeqIO

def summarize(fa_files):
    """Count the sequences in each MView FASTA output."""
    counts = []
    for fa_file in fa_files:
        if not os.path.exists(fa_file):
            print(f"Warning: {fa_file} does not exist")
            counts.append((fa_file, 0))
            continue
        n_seqs = sum(1 for _ in SeqIO.parse(fa_file, "fasta"))
        counts.append((fa_file, n_seqs))
    return counts

def print_summary(counts):
    for fa_file, n_seqs in counts:
        print(f"{os.path.basename(fa_file)}: {n_seqs} sequences")
    empty = sum(1 for _, n in counts if n == 0)
    if empty:
        print(f"{empty} of {len(counts)} files have no alignments at the identity threshold")

def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print(f"Usage: {sys.argv[0]} <fa_file> [<fa_file> ...]")
        return 1

    print_summary(summarize(argv))
    return 0

if __name__ == "__main__":
    sys.exit(main())
