class PipelineError(RuntimeError):
    """A pipeline stage could not complete."""


class MalformedRowError(PipelineError):
    """A CSV data row does not contain the peptide column."""


class ToolError(PipelineError):
    """An external tool was not found, timed out or exited non-zero."""

    def __init__(self, message, returncode=None, stderr=""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
