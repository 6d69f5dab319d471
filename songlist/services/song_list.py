"""
In-memory song list:
  CSV file → Song records → shuffle / add / remove / find → listing
"""
import csv
import logging
import random
import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence, TextIO, Union

from songlist.services.models import SONG_FIELDS, Song
from songlist.utils.parsing import parse_float_or_default, parse_int_or_default
from songlist.utils.table import render_table

logger = logging.getLogger(__name__)


class SongListError(Exception):
    pass


class SongDataError(SongListError):
    """The CSV source does not split into song records."""

    def __init__(self, message: str, path: Optional[Path] = None, line: Optional[int] = None):
        self.path = path
        self.line = line
        where = ""
        if path is not None:
            where = f"{path}, line {line}: " if line is not None else f"{path}: "
        super().__init__(f"{where}{message}")


class SongNotFoundError(SongListError, LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Song '{name}' was not found from song list")


class SongList:
    """Ordered collection of songs. Duplicates are allowed."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._songs: list[Song] = []
        self._rng = rng if rng is not None else random.Random()

    @property
    def songs(self) -> tuple[Song, ...]:
        return tuple(self._songs)

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(self._songs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SongList):
            return NotImplemented
        return self._songs == other._songs

    def copy(self) -> "SongList":
        clone = SongList(rng=self._rng)
        clone._songs = list(self._songs)
        return clone

    def read_song_data(self, file_path: Union[str, Path], encoding: str = "utf-8") -> None:
        """
        Append every record of a CSV song file (header row first).
        Raises OSError if the file can't be read and SongDataError if a
        record is malformed; on failure nothing is appended.
        """
        path = Path(file_path)
        songs: list[Song] = []
        with path.open(newline="", encoding=encoding) as fh:
            logger.info("Reading song data from: %s", path, extra={"path": str(path)})
            reader = csv.reader(fh)
            try:
                header = next((row for row in reader if row), [])
                for record in reader:
                    if not record:
                        continue
                    if len(record) != len(header) or len(record) < len(SONG_FIELDS):
                        raise SongDataError(
                            f"found record with {len(record)} fields, expected {len(header)}",
                            path=path,
                            line=reader.line_num,
                        )
                    songs.append(self.extract_song_data(record))
            except csv.Error as exc:
                raise SongDataError(str(exc), path=path, line=reader.line_num) from exc
            except UnicodeDecodeError as exc:
                raise SongDataError(f"invalid {encoding} text ({exc.reason})", path=path) from exc

        for song in songs:
            self.add(song)

    def extract_song_data(self, record: Sequence[str]) -> Song:
        """Build a Song from a positional Name,Artist,Album,Year,Length record."""
        logger.info("Extracting song data of: %s", record[0])

        year, warning = parse_int_or_default(record[3])
        if warning:
            logger.warning(warning, extra={"song": record[0], "field": "year"})
        length, warning = parse_float_or_default(record[4])
        if warning:
            logger.warning(warning, extra={"song": record[0], "field": "length"})

        return Song(
            name=record[0],
            artist=record[1],
            album=record[2],
            year=year,
            length=length,
        )

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        logger.info("Shuffling song list...")
        (rng or self._rng).shuffle(self._songs)
        logger.info("Song list shuffled!", extra={"count": len(self._songs)})

    def add(self, song: Song) -> None:
        logger.info("Adding song '%s' to song list", song.name)
        self._songs.append(song)

    def remove(self, song_name: str) -> Song:
        """Remove the first song named exactly `song_name`."""
        for index, song in enumerate(self._songs):
            if song.name == song_name:
                logger.info("Removing song '%s' from song list", song_name)
                return self._songs.pop(index)
        raise SongNotFoundError(song_name)

    def find(self, song_name: str) -> Optional[Song]:
        logger.info("Trying to find song '%s' from song list", song_name)
        return next((s for s in self._songs if s.name == song_name), None)

    def list_as_table(self, stream: Optional[TextIO] = None) -> str:
        table = render_table(SONG_FIELDS, (song.as_row() for song in self._songs))
        print(table, file=stream if stream is not None else sys.stdout)
        return table

    def list(self) -> list[str]:
        logger.info("Listing all songs in the song list")
        lines = [f"{s.name} - {s.artist} - {s.album}" for s in self._songs]
        for line in lines:
            logger.info(line)
        return lines
