"""Entry point for 'python -m studybuddy'."""

from studybuddy.cli import main

if __name__ == "__main__":
    main()
