"""Package entry point for ``python -m morse_converter``."""

from morse_converter.cli import main

if __name__ == "__main__":
    main()
