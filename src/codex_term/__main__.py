"""Allow running as ``python -m codex_term``."""

from .cli import main

if __name__ == "__main__":
    main()
