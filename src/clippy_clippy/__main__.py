"""Allow running as `python -m clippy_clippy`."""

from clippy_clippy.cli.cli import main

if __name__ == "__main__":
    main()
