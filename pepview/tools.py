import os
import subprocess

from . import config
from .errors import ToolError

def run_tool(cmd, log_file, stdout=None, timeout=None):
    """
    Run an external tool and wait for it to exit.

    Parameters:
        cmd (list): command and arguments
        log_file (str): file the command line and stderr are appended to
        stdout (file): open handle receiving the tool's stdout (log_file if None)
        timeout (float): seconds before the tool is killed (config.TOOL_TIMEOUT if None)

    A non-zero exit status raises ToolError.
    Returns the subprocess.CompletedProcess with the exit status and stderr.
    """
    if timeout is None:
        timeout = config.TOOL_TIMEOUT
    tool = os.path.basename(cmd[0])
    cmd_line = " ".join(str(c) for c in cmd)

    print(f"Running {tool}: {cmd_line}")
    with open(log_file, "a") as log:
        log.write(f"$ {cmd_line}\n")
        log.flush()
        try:
            proc = subprocess.Popen(
                [str(c) for c in cmd],
                stdout=log if stdout is None else stdout,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except FileNotFoundError as e:
            log.write(f"{tool} not found\n")
            raise ToolError(f"{tool} not found. Make sure it is installed and on PATH.") from e

        try:
            _, err = proc.communicate(timeout=timeout)
        except subprocess.TimeoutExpired:
            proc.kill()
            _, err = proc.communicate()
            log.write(err or "")
            log.write(f"{tool} killed after {timeout} seconds\n")
            raise ToolError(f"{tool} timed out after {timeout} seconds. See {log_file} for details.",
                            stderr=err or "")

        if err:
            log.write(err)

    if proc.returncode != 0:
        raise ToolError(f"{tool} failed with exit code {proc.returncode}. See {log_file} for details.",
                        returncode=proc.returncode, stderr=err or "")
    return subprocess.CompletedProcess(cmd, proc.returncode, stderr=err or "")
