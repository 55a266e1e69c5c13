"""linedelta.

Attributes per-file line additions and removals to commits on a remote
GitLab instance, fetching everything over the HTTP API instead of cloning.
"""

__version__ = "1.0.0"
__author__ = "linedelta developers"

__all__ = []
