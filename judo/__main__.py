"""Allow running judo as a module: python -m judo."""

from judo.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
