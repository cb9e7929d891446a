"""Allows `python -m memonotes --host 127.0.0.1 --port 8000 --cache ./cache`."""

from memonotes.cli import main

if __name__ == "__main__":
    main()
