"""
Allow running JUPAG as a module: python -m jupag
"""

from jupag.cli import entrypoint

if __name__ == "__main__":
    entrypoint()
