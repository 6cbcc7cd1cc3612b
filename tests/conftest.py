import subprocess

import pytest

from pepview import tools

N_COLUMNS = 30

def csv_row(peptide, n_fields=N_COLUMNS, column=25):
    fields = [f"f{i}" for i in range(n_fields)]
    if column < n_fields:
        fields[column] = peptide
    return ",".join(fields)

@pytest.fixture
def write_csv(tmp_path):
    """Write a peptide CSV with a header and one row per peptide."""
    def _write(peptides, name="peptides.csv", rows=None):
        lines = [",".join(f"col{i}" for i in range(N_COLUMNS))]
        lines += rows if rows is not None else [csv_row(p) for p in peptides]
        csv_file = tmp_path / name
        csv_file.write_text("\n".join(lines) + "\n", encoding="latin-1")
        return csv_file
    return _write

@pytest.fixture
def tool_calls(monkeypatch):
    """Replace external tools with fakes that write the files they would produce."""
    calls = []

    def fake_run_tool(cmd, log_file, stdout=None, timeout=None):
        cmd = [str(c) for c in cmd]
        calls.append(cmd)
        if cmd[0] == "makeblastdb":
            out = cmd[cmd.index("-out") + 1]
            open(out + ".pin", "w").close()
        elif cmd[0] == "blastp":
            query = cmd[cmd.index("-query") + 1]
            with open(cmd[cmd.index("-out") + 1], "w") as f:
                f.write(f"BLASTP 2.15.0+\nQuery= {query}\n")
        elif "mview" in cmd:
            result = cmd[cmd.index("blast") + 1]
            stdout.write(f">query {result}\nPEPAAA\n>hit\nPEPAAA\n")
        return subprocess.CompletedProcess(cmd, 0, stderr="")

    monkeypatch.setattr(tools, "run_tool", fake_run_tool)
    return calls

@pytest.fixture
def no_viewer(monkeypatch, tmp_path):
    from pepview import config
    monkeypatch.setattr(config, "VIEWER_PATHS", {
        "win32": [str(tmp_path / "missing" / "gbench.exe")],
        "darwin": [str(tmp_path / "missing" / "Genome Workbench")],
    })

@pytest.fixture
def make_row():
    return csv_row
