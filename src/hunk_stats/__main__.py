"""Allow ``python -m hunk_stats``."""

from hunk_stats.cli import main

if __name__ == "__main__":
    main()
