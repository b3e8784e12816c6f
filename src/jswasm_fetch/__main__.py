"""Allow running as ``python -m jswasm_fetch``."""

from jswasm_fetch.main import main

if __name__ == "__main__":
    main()
