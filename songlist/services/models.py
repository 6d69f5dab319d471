from dataclasses import astuple, dataclass

SONG_FIELDS = ("name", "artist", "album", "year", "length")


@dataclass(frozen=True)
class Song:
    name: str
    artist: str
    album: str
    year: int
    length: float  # minutes

    def as_row(self) -> tuple:
        return astuple(self)
