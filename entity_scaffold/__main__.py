"""Allow ``python -m entity_scaffold``."""

from entity_scaffold.cli import main

if __name__ == "__main__":
    main()
