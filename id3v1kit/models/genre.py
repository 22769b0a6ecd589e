"""
ID3v1 genre lookup table.

The genre is a single byte at the end of the trailer. Codes 0-191 have
well-known names; anything else is kept as an ``UnknownGenre`` carrying the
raw byte so it can be written back unchanged.

Reference: https://id3.org/d3v2.3.0 (Appendix A)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


class Genre(Enum):
    """
    Named ID3v1 genres.

    Each member's value is its byte code in the trailer; ``label`` is the
    display name used by most taggers.
    """

    def __new__(cls, code: int, label: str) -> "Genre":
        member = object.__new__(cls)
        member._value_ = code
        member.label = label
        return member

    # Original ID3v1 list (0-79)
    BLUES = (0, "Blues")
    CLASSIC_ROCK = (1, "Classic Rock")
    COUNTRY = (2, "Country")
    DANCE = (3, "Dance")
    DISCO = (4, "Disco")
    FUNK = (5, "Funk")
    GRUNGE = (6, "Grunge")
    HIP_HOP = (7, "Hip-Hop")
    JAZZ = (8, "Jazz")
    METAL = (9, "Metal")
    NEW_AGE = (10, "New Age")
    OLDIES = (11, "Oldies")
    OTHER = (12, "Other")
    POP = (13, "Pop")
    RHYTHM_AND_BLUES = (14, "R&B")
    RAP = (15, "Rap")
    REGGAE = (16, "Reggae")
    ROCK = (17, "Rock")
    TECHNO = (18, "Techno")
    INDUSTRIAL = (19, "Industrial")
    ALTERNATIVE = (20, "Alternative")
    SKA = (21, "Ska")
    DEATH_METAL = (22, "Death Metal")
    PRANKS = (23, "Pranks")
    SOUNDTRACK = (24, "Soundtrack")
    EURO_TECHNO = (25, "Euro-Techno")
    AMBIENT = (26, "Ambient")
    TRIP_HOP = (27, "Trip-Hop")
    VOCAL = (28, "Vocal")
    JAZZ_FUNK = (29, "Jazz+Funk")
    FUSION = (30, "Fusion")
    TRANCE = (31, "Trance")
    CLASSICAL = (32, "Classical")
    INSTRUMENTAL = (33, "Instrumental")
    ACID = (34, "Acid")
    HOUSE = (35, "House")
    GAME = (36, "Game")
    SOUND_CLIP = (37, "Sound Clip")
    GOSPEL = (38, "Gospel")
    NOISE = (39, "Noise")
    ALT_ROCK = (40, "Alt. Rock")
    BASS = (41, "Bass")
    SOUL = (42, "Soul")
    PUNK = (43, "Punk")
    SPACE = (44, "Space")
    MEDITATIVE = (45, "Meditative")
    INSTRUMENTAL_POP = (46, "Instrumental Pop")
    INSTRUMENTAL_ROCK = (47, "Instrumental Rock")
    ETHNIC = (48, "Ethnic")
    GOTHIC = (49, "Gothic")
    DARKWAVE = (50, "Darkwave")
    TECHNO_INDUSTRIAL = (51, "Techno-Industrial")
    ELECTRONIC = (52, "Electronic")
    POP_FOLK = (53, "Pop-Folk")
    EURODANCE = (54, "Eurodance")
    DREAM = (55, "Dream")
    SOUTHERN_ROCK = (56, "Southern Rock")
    COMEDY = (57, "Comedy")
    CULT = (58, "Cult")
    GANGSTA_RAP = (59, "Gangsta Rap")
    TOP_40 = (60, "Top 40")
    CHRISTIAN_RAP = (61, "Christian Rap")
    POP_FUNK = (62, "Pop/Funk")
    JUNGLE = (63, "Jungle")
    NATIVE_AMERICAN = (64, "Native American")
    CABARET = (65, "Cabaret")
    NEW_WAVE = (66, "New Wave")
    PSYCHEDELIC = (67, "Psychedelic")
    RAVE = (68, "Rave")
    SHOWTUNES = (69, "Showtunes")
    TRAILER = (70, "Trailer")
    LO_FI = (71, "Lo-Fi")
    TRIBAL = (72, "Tribal")
    ACID_PUNK = (73, "Acid Punk")
    ACID_JAZZ = (74, "Acid Jazz")
    POLKA = (75, "Polka")
    RETRO = (76, "Retro")
    MUSICAL = (77, "Musical")
    ROCK_AND_ROLL = (78, "Rock & Roll")
    HARD_ROCK = (79, "Hard Rock")

    # Winamp extensions (80-141), unofficial but widely understood
    FOLK = (80, "Folk")
    FOLK_ROCK = (81, "Folk-Rock")
    NATIONAL_FOLK = (82, "National Folk")
    SWING = (83, "Swing")
    FAST_FUSION = (84, "Fast-Fusion")
    BEBOP = (85, "Bebop")
    LATIN = (86, "Latin")
    REVIVAL = (87, "Revival")
    CELTIC = (88, "Celtic")
    BLUEGRASS = (89, "Bluegrass")
    AVANTGARDE = (90, "Avantgarde")
    GOTHIC_ROCK = (91, "Gothic Rock")
    PROGRESSIVE_ROCK = (92, "Progressive Rock")
    PSYCHEDELIC_ROCK = (93, "Psychedelic Rock")
    SYMPHONIC_ROCK = (94, "Symphonic Rock")
    SLOW_ROCK = (95, "Slow Rock")
    BIG_BAND = (96, "Big Band")
    CHORUS = (97, "Chorus")
    EASY_LISTENING = (98, "Easy Listening")
    ACOUSTIC = (99, "Acoustic")
    HUMOUR = (100, "Humour")
    SPEECH = (101, "Speech")
    CHANSON = (102, "Chanson")
    OPERA = (103, "Opera")
    CHAMBER_MUSIC = (104, "Chamber Music")
    SONATA = (105, "Sonata")
    SYMPHONY = (106, "Symphony")
    BOOTY_BASS = (107, "Booty Bass")
    PRIMUS = (108, "Primus")
    PORN_GROOVE = (109, "Porn Groove")
    SATIRE = (110, "Satire")
    SLOW_JAM = (111, "Slow Jam")
    CLUB = (112, "Club")
    TANGO = (113, "Tango")
    SAMBA = (114, "Samba")
    FOLKLORE = (115, "Folklore")
    BALLAD = (116, "Ballad")
    POWER_BALLAD = (117, "Power Ballad")
    RHYTHMIC_SOUL = (118, "Rhythmic Soul")
    FREESTYLE = (119, "Freestyle")
    DUET = (120, "Duet")
    PUNK_ROCK = (121, "Punk Rock")
    DRUM_SOLO = (122, "Drum Solo")
    A_CAPPELLA = (123, "A Cappella")
    EURO_HOUSE = (124, "Euro-House")
    DANCE_HALL = (125, "Dance Hall")
    GOA = (126, "Goa")
    DRUM_AND_BASS = (127, "Drum & Bass")
    CLUB_HOUSE = (128, "Club-House")
    HARDCORE = (129, "Hardcore")
    TERROR = (130, "Terror")
    INDIE = (131, "Indie")
    BRIT_POP = (132, "BritPop")
    AFRO_PUNK = (133, "Afro-Punk")
    POLSK_PUNK = (134, "Polsk Punk")
    BEAT = (135, "Beat")
    CHRISTIAN_GANGSTA_RAP = (136, "Christian Gangsta Rap")
    HEAVY_METAL = (137, "Heavy Metal")
    BLACK_METAL = (138, "Black Metal")
    CROSSOVER = (139, "Crossover")
    CONTEMPORARY_CHRISTIAN = (140, "Contemporary Christian")
    CHRISTIAN_ROCK = (141, "Christian Rock")

    # Later Winamp additions (142-191)
    MERENGUE = (142, "Merengue")
    SALSA = (143, "Salsa")
    THRASH_METAL = (144, "Thrash Metal")
    ANIME = (145, "Anime")
    J_POP = (146, "JPop")
    SYNTHPOP = (147, "Synthpop")
    ABSTRACT = (148, "Abstract")
    ART_ROCK = (149, "Art Rock")
    BAROQUE = (150, "Baroque")
    BHANGRA = (151, "Bhangra")
    BIG_BEAT = (152, "Big Beat")
    BREAKBEAT = (153, "Breakbeat")
    CHILLOUT = (154, "Chillout")
    DOWNTEMPO = (155, "Downtempo")
    DUB = (156, "Dub")
    EBM = (157, "EBM")
    ECLECTIC = (158, "Eclectic")
    ELECTRO = (159, "Electro")
    ELECTROCLASH = (160, "Electroclash")
    EMO = (161, "Emo")
    EXPERIMENTAL = (162, "Experimental")
    GARAGE = (163, "Garage")
    GLOBAL = (164, "Global")
    IDM = (165, "IDM")
    ILLBIENT = (166, "Illbient")
    INDUSTRO_GOTH = (167, "Industro-Goth")
    JAM_BAND = (168, "Jam Band")
    KRAUTROCK = (169, "Krautrock")
    LEFTFIELD = (170, "Leftfield")
    LOUNGE = (171, "Lounge")
    MATH_ROCK = (172, "Math Rock")
    NEW_ROMANTIC = (173, "New Romantic")
    NU_BREAKZ = (174, "Nu-Breakz")
    POST_PUNK = (175, "Post-Punk")
    POST_ROCK = (176, "Post-Rock")
    PSYTRANCE = (177, "Psytrance")
    SHOEGAZE = (178, "Shoegaze")
    SPACE_ROCK = (179, "Space Rock")
    TROP_ROCK = (180, "Trop Rock")
    WORLD_MUSIC = (181, "World Music")
    NEOCLASSICAL = (182, "Neoclassical")
    AUDIOBOOK = (183, "Audiobook")
    AUDIO_THEATRE = (184, "Audio Theatre")
    NEUE_DEUTSCHE_WELLE = (185, "Neue Deutsche Welle")
    PODCAST = (186, "Podcast")
    INDIE_ROCK = (187, "Indie Rock")
    G_FUNK = (188, "G-Funk")
    DUBSTEP = (189, "Dubstep")
    GARAGE_ROCK = (190, "Garage Rock")
    PSYBIENT = (191, "Psybient")

    @property
    def code(self) -> int:
        """Byte code of this genre."""
        return self.value

    @property
    def is_recognized(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class UnknownGenre:
    """
    A genre byte without a name.

    Covers the unassigned range 192-255 (255 is commonly used to mean
    "no genre").
    """

    raw_value: int

    def __post_init__(self) -> None:
        if not 0 <= self.raw_value <= 255:
            raise ValueError(f"Genre byte must be 0-255, got {self.raw_value}")
        if self.raw_value < len(Genre):
            raise ValueError(f"Genre byte {self.raw_value} is {Genre(self.raw_value).name}")

    @property
    def code(self) -> int:
        return self.raw_value

    @property
    def label(self) -> str:
        return ""

    @property
    def is_recognized(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"Unknown ({self.raw_value})"


GenreClassification = Union[Genre, UnknownGenre]

# Label and member name index for find_genre(), built once from the enum
_GENRE_INDEX: Dict[str, Genre] = {}
for _genre in Genre:
    _GENRE_INDEX[_genre.label.casefold()] = _genre
    _GENRE_INDEX[_genre.name.casefold()] = _genre


def classification_for(byte: int) -> GenreClassification:
    """
    Get the genre for a trailer byte.

    Args:
        byte: Genre byte (0-255)

    Returns:
        Named Genre, or UnknownGenre carrying the byte

    Raises:
        ValueError: If ``byte`` is not 0-255
    """
    if not 0 <= byte <= 255:
        raise ValueError(f"Genre byte must be 0-255, got {byte}")
    try:
        return Genre(byte)
    except ValueError:
        return UnknownGenre(byte)


def byte_for(genre: GenreClassification) -> int:
    """Get the trailer byte for a genre."""
    if isinstance(genre, Genre):
        return genre.value
    return genre.raw_value


def label_for(genre: GenreClassification) -> str:
    """Get the display label for a genre ("" if it has no name)."""
    return genre.label


def find_genre(text: str) -> Optional[GenreClassification]:
    """
    Look up a genre by label, member name or byte code.

    Matching is case-insensitive; "hip-hop", "HIP_HOP" and "7" all find
    Genre.HIP_HOP. A numeric code without a name gives an UnknownGenre.

    Args:
        text: Genre label, enum member name, or decimal byte code

    Returns:
        Matching genre, or None if nothing matches
    """
    text = text.strip()
    if text.isdigit():
        code = int(text)
        return classification_for(code) if code <= 255 else None
    return _GENRE_INDEX.get(text.casefold())
