"""Allow ``python -m namelint``."""

from namelint.main import main

if __name__ == "__main__":
    raise SystemExit(main())
