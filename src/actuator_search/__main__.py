"""Allow ``python -m actuator_search``."""

from actuator_search.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
