"""Main entry point for screenplayer CLI when run as a module."""

from screenplayer.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
