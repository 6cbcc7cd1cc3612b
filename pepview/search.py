import os

from . import tools

def run_blastp(db_path, query_files, output_dir, log_dir):
    """Run BLASTP for every query, writing output_dir/result<i>.txt in query order"""
    log_file = os.path.join(log_dir, "blastp.log")
    result_files = []
    for i, query_file in enumerate(query_files, 1):
        result_file = os.path.join(output_dir, f"result{i}.txt")
        cmd = ["blastp",
               "-db", db_path,
               "-query", query_file,
               "-outfmt", "0",
               "-out", result_file]
        tools.run_tool(cmd, log_file)
        result_files.append(result_file)
    return result_files
