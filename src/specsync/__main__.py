"""Allow ``python -m specsync``."""

from specsync.app import main

if __name__ == "__main__":
    main()
