import os
import sys

from . import config, tools

def mview_command(result_file):
    cmd = ["mview",
           "-in", "blast", result_file,
           "-hsp", "discrete",
           "-minident", str(config.MIN_IDENTITY),
           "-out", "fasta"]
    # mview ships as a launcher script that only cmd.exe resolves on Windows
    if sys.platform == "win32":
        cmd = ["cmd", "/c"] + cmd
    return cmd

def run_mview(result_files, output_dir, log_dir):
    """
    Convert BLAST results to FASTA alignments with MView.

    Only HSPs at config.MIN_IDENTITY percent identity are kept. The output
    of result i is written to output_dir/mv<i>.fa.
    Returns the list of written files in input order.
    """
    log_file = os.path.join(log_dir, "mview.log")
    fa_files = []
    for i, result_file in enumerate(result_files, 1):
        fa_file = os.path.join(output_dir, f"mv{i}.fa")
        with open(fa_file, "w") as out_f:
            tools.run_tool(mview_command(result_file), log_file, stdout=out_f)
        fa_files.append(fa_file)

    print(f"Converted {len(result_files)} BLAST results to FASTA")
    return fa_files
