"""
Song List Shuffler - Main Entrypoint
Reads songs from a CSV file and prints them as a table in random order.

Usage: python main.py <song_list.csv>
"""
import logging
import random
import sys
from pathlib import Path
from typing import Optional

from songlist.config.settings import Settings, settings
from songlist.services.song_list import SongList, SongListError
from songlist.utils.logging import setup_logging


def parse_file_path_from_args(args: list[str]) -> Optional[Path]:
    """Return the song list path from the command-line arguments, if any."""
    if not args:
        return None
    return Path(args[0])


def run(args: list[str], config: Settings = settings) -> int:
    setup_logging(config=config)
    logger = logging.getLogger(__name__)

    file_path = parse_file_path_from_args(args)
    if file_path is None:
        logger.error("Expected a path to a song list, but got none")
        return 1

    rng = random.Random(config.SHUFFLE_SEED)
    song_list = SongList(rng=rng)
    try:
        song_list.read_song_data(file_path, encoding=config.CSV_ENCODING)
    except (OSError, SongListError) as exc:
        logger.error("%s", exc, extra={"path": str(file_path)})
        return 1

    print()

    song_list.shuffle()
    song_list.list_as_table()
    return 0


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
