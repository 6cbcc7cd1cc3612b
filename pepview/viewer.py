import os
import subprocess

from . import config

def locate_viewer(paths=None):
    """Return the first Genome Workbench executable that exists, or None."""
    if paths is None:
        paths = [p for candidates in config.VIEWER_PATHS.values() for p in candidates]
    for path in paths:
        if os.path.exists(path):
            return path
    return None

def launch_viewer(fa_files, paths=None):
    """
    Open Genome Workbench on the given files.
    The viewer is started detached and left running.
    Returns the Popen object, or None if nothing was launched.
    """
    if not fa_files:
        print("No output files to open in Genome Workbench")
        return None

    viewer = locate_viewer(paths)
    if viewer is None:
        print("Genome Workbench not found")
        return None

    cmd = [viewer] + [str(f) for f in fa_files]
    print(f"Opening Genome Workbench: {subprocess.list2cmdline(cmd)}")
    try:
        return subprocess.Popen(cmd,
                                stdin=subprocess.DEVNULL,
                                stdout=subprocess.DEVNULL,
                                stderr=subprocess.DEVNULL)
    except OSError as e:
        print(f"Could not start Genome Workbench: {e}")
        return None
