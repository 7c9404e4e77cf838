"""gvt - minimal local version control for single files.

Snapshots a tracked file's successive states into numbered, immutable
versions under `.gvt/` in the project root, and moves the working
directory back to any of them.

A repository assumes a single writer. There is no locking on the pointer
files, so running two gvt commands against the same project at the same
time can corrupt version numbering.
"""

__version__ = "1.0.0"
