"""
Mock TVDB legacy API responses (XML / ZIP) for testing.

These fixtures simulate the XML documents served by the legacy API for
languages, series, episodes, actors, banners and updates.

Reference: http://www.thetvdb.com/wiki/index.php?title=Programmers_API
"""

import io
import zipfile

LEGACY_BASE_URL = "http://www.thetvdb.com/api"
LEGACY_TOKEN = "TESTAPIKEY1234"

# GET /{token}/languages.xml
LANGUAGES_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Languages>
  <Language>
    <name>English</name>
    <abbreviation>en</abbreviation>
    <id>7</id>
  </Language>
  <Language>
    <name>Français</name>
    <abbreviation>fr</abbreviation>
    <id>17</id>
  </Language>
</Languages>
"""

# GET /Updates.php?type=none
TIME_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Items>
  <Time>1442937120</Time>
</Items>
"""

# GET /GetSeries.php?seriesname=Breaking%20Bad (one result)
SEARCH_SINGLE_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Series>
    <seriesid>81189</seriesid>
    <language>en</language>
    <SeriesName>Breaking Bad</SeriesName>
    <banner>graphical/81189-g21.jpg</banner>
    <Overview>Walter White, a struggling high school chemistry teacher,
      is diagnosed with advanced lung cancer.</Overview>
    <FirstAired>2008-01-20</FirstAired>
    <Network>AMC</Network>
    <IMDB_ID>tt0903747</IMDB_ID>
    <zap2it_id>SH01009396</zap2it_id>
    <id>81189</id>
  </Series>
</Data>
"""

# GET /GetSeries.php?seriesname=Doctor%20Who (several results)
SEARCH_MULTIPLE_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Series>
    <seriesid>76107</seriesid>
    <language>en</language>
    <SeriesName>Doctor Who</SeriesName>
    <id>76107</id>
  </Series>
  <Series>
    <seriesid>78804</seriesid>
    <language>en</language>
    <SeriesName>Doctor Who (2005)</SeriesName>
    <id>78804</id>
  </Series>
</Data>
"""

# GET /GetSeries.php?seriesname=Nothing (no result)
SEARCH_EMPTY_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Data></Data>
"""

# GET /{token}/series/81189/en.xml
SERIES_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Series>
    <id>81189</id>
    <Actors>|Bryan Cranston|Aaron Paul|Anna Gunn|</Actors>
    <Airs_DayOfWeek>Sunday</Airs_DayOfWeek>
    <Airs_Time>9:00 PM</Airs_Time>
    <ContentRating>TV-MA</ContentRating>
    <FirstAired>2008-01-20</FirstAired>
    <Genre>|Crime|Drama|Suspense|Thriller|</Genre>
    <IMDB_ID>tt0903747</IMDB_ID>
    <Language>en</Language>
    <Network>AMC</Network>
    <NetworkID></NetworkID>
    <Overview>Walter White, a struggling high school chemistry teacher, is diagnosed with advanced lung cancer.</Overview>
    <Rating>9.3</Rating>
    <RatingCount>1180</RatingCount>
    <Runtime>60</Runtime>
    <SeriesName>Breaking Bad</SeriesName>
    <Status>Ended</Status>
    <banner>graphical/81189-g21.jpg</banner>
    <fanart>fanart/original/81189-21.jpg</fanart>
    <lastupdated>1442587227</lastupdated>
    <poster>posters/81189-10.jpg</poster>
    <zap2it_id>SH01009396</zap2it_id>
  </Series>
</Data>
"""

# Contenu de /{token}/series/81189/all/en.zip -> en.xml
SERIES_ALL_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Series>
    <id>81189</id>
    <SeriesName>Breaking Bad</SeriesName>
    <Status>Ended</Status>
  </Series>
  <Episode>
    <id>349232</id>
    <EpisodeName>Pilot</EpisodeName>
    <EpisodeNumber>1</EpisodeNumber>
    <SeasonNumber>1</SeasonNumber>
    <FirstAired>2008-01-20</FirstAired>
    <seriesid>81189</seriesid>
  </Episode>
  <Episode>
    <id>349235</id>
    <EpisodeName>Cat's in the Bag...</EpisodeName>
    <EpisodeNumber>2</EpisodeNumber>
    <SeasonNumber>1</SeasonNumber>
    <FirstAired>2008-01-27</FirstAired>
    <seriesid>81189</seriesid>
  </Episode>
</Data>
"""

# GET /{token}/episodes/349232/en.xml
EPISODE_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Episode>
    <id>349232</id>
    <EpisodeName>Pilot</EpisodeName>
    <EpisodeNumber>1</EpisodeNumber>
    <SeasonNumber>1</SeasonNumber>
    <FirstAired>2008-01-20</FirstAired>
    <GuestStars></GuestStars>
    <seriesid>81189</seriesid>
  </Episode>
</Data>
"""

# GET /{token}/series/81189/actors.xml (one actor)
ACTORS_SINGLE_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Actors>
  <Actor>
    <id>43403</id>
    <Image>actors/43403.jpg</Image>
    <Name>Bryan Cranston</Name>
    <Role>Walter White</Role>
    <SortOrder>0</SortOrder>
  </Actor>
</Actors>
"""

# GET /{token}/series/81189/banners.xml
BANNERS_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Banners>
  <Banner>
    <id>1034</id>
    <BannerPath>fanart/original/81189-1.jpg</BannerPath>
    <BannerType>fanart</BannerType>
    <BannerType2>1920x1080</BannerType2>
    <Language>en</Language>
  </Banner>
  <Banner>
    <id>23605</id>
    <BannerPath>posters/81189-1.jpg</BannerPath>
    <BannerType>poster</BannerType>
    <BannerType2>680x1000</BannerType2>
    <Language>en</Language>
  </Banner>
</Banners>
"""

# GET /Updates.php?type=all&time=1442937000
UPDATES_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Items>
  <Time>1442937120</Time>
  <Series>81189</Series>
  <Series>76107</Series>
  <Episode>349232</Episode>
</Items>
"""

# GET /{token}/updates/updates_day.xml
UPDATE_RECORDS_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Data time="1442937120">
  <Series>
    <id>81189</id>
    <time>1442936000</time>
  </Series>
</Data>
"""

# Erreur applicative servie avec un statut 200
ERROR_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Error>Series Not Found</Error>
"""

# Page HTML servie avec un statut 200 par certains miroirs
NOT_FOUND_HTML = "<html><head><title>404 Not Found</title></head><body><h1>404 Not Found</h1></body></html>"


def make_zip(entries: dict[str, str]) -> bytes:
    """Construit une archive ZIP en memoire a partir de {nom: contenu}."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in entries.items():
            archive.writestr(name, content)
    return buffer.getvalue()


# /{token}/series/81189/all/en.zip (en.xml + banners.xml + actors.xml)
SERIES_ALL_ZIP = make_zip(
    {
        "en.xml": SERIES_ALL_XML,
        "banners.xml": BANNERS_XML,
        "actors.xml": ACTORS_SINGLE_XML,
    }
)


def make_corrupt_zip(name: str, content: str) -> bytes:
    """
    Archive deflate valide dont le flux compresse de l'entree est altere.

    Le repertoire central reste lisible: l'erreur n'apparait qu'a la lecture.
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr(name, content)
    data = bytearray(buffer.getvalue())
    # En-tete local: 30 octets fixes + nom de fichier, sans champ extra
    start = 30 + len(name.encode("utf-8"))
    for index in range(start, start + 20):
        data[index] ^= 0xFF
    return bytes(data)
