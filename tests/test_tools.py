import sys

import pytest

from pepview import config
from pepview.errors import ToolError
from pepview.tools import run_tool

def python_cmd(code):
    return [sys.executable, "-c", code]

def test_exit_status_and_log(tmp_path):
    log_file = tmp_path / "tool.log"

    result = run_tool(python_cmd("import sys; sys.stderr.write('warning: low memory\\n')"), str(log_file))

    assert result.returncode == 0
    assert "low memory" in result.stderr
    log = log_file.read_text()
    assert log.startswith("$ ")
    assert "warning: low memory" in log

def test_stdout_goes_to_log_by_default(tmp_path):
    log_file = tmp_path / "tool.log"

    run_tool(python_cmd("print('hello from tool')"), str(log_file))

    assert "hello from tool" in log_file.read_text()

def test_stdout_redirect(tmp_path):
    out_file = tmp_path / "mv1.fa"
    with open(out_file, "w") as out_f:
        run_tool(python_cmd("print('>pep1'); print('PEPAAA')"), str(tmp_path / "tool.log"), stdout=out_f)

    assert out_file.read_text() == ">pep1\nPEPAAA\n"

def test_nonzero_exit(tmp_path):
    with pytest.raises(ToolError, match="exit code 3") as excinfo:
        run_tool(python_cmd("import sys; sys.stderr.write('bad query'); sys.exit(3)"),
                 str(tmp_path / "tool.log"))

    assert excinfo.value.returncode == 3
    assert "bad query" in excinfo.value.stderr

def test_missing_executable(tmp_path):
    with pytest.raises(ToolError, match="not found"):
        run_tool(["pepview-no-such-tool", "-h"], str(tmp_path / "tool.log"))

def test_timeout(tmp_path):
    with pytest.raises(ToolError, match="timed out"):
        run_tool(python_cmd("import time; time.sleep(30)"), str(tmp_path / "tool.log"), timeout=0.5)

def test_timeout_from_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "TOOL_TIMEOUT", 0.5)
    with pytest.raises(ToolError, match="timed out"):
        run_tool(python_cmd("import time; time.sleep(30)"), str(tmp_path / "tool.log"))
