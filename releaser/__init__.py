"""Cut releases of a git repository: version, branch, commit, tag, push."""

__version__ = "0.1.0"
