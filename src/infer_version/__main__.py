"""Entry point for running infer-version as a module: python -m infer_version"""

from infer_version.cli import app

if __name__ == "__main__":
    app()
