"""Run the keyescape CLI with `python -m keyescape`."""

from .cli import entrypoint

if __name__ == "__main__":
    entrypoint()
