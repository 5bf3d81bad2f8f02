# main.py - run the CLI from a source checkout

from freq_autocompleter.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
