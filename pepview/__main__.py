import sys

from . import run_pipeline
from .errors import PipelineError

USAGE = "pepview <peptide csv path>"

def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        print(USAGE)
        return 0

    try:
        run_pipeline(argv[0])
    except PipelineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
