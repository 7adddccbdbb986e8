"""
memocalc CLI entrypoint.

Executed via:
  python -m memocalc
"""

from memocalc.cli.app import app

if __name__ == "__main__":
    app()
