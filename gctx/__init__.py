"""gctx - named snapshots of your git config.

Save the live ~/.gitconfig under a name, list saved variants,
and switch between them.
"""

__version__ = "1.0.0"
