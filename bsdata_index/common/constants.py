"""Constants for BattleScribe data files and the repository index."""

# Data file suffixes (raw, compressed)
GAME_SYSTEM_FILE_EXTENSION = ".gst"
GAME_SYSTEM_COMPRESSED_FILE_EXTENSION = ".gstz"
CATALOGUE_FILE_EXTENSION = ".cat"
CATALOGUE_COMPRESSED_FILE_EXTENSION = ".catz"
ROSTER_FILE_EXTENSION = ".ros"
ROSTER_COMPRESSED_FILE_EXTENSION = ".rosz"
INDEX_FILE_EXTENSION = ".xml"
INDEX_COMPRESSED_FILE_EXTENSION = ".bsi"

# Files with no known suffix are wrapped in a plain zip
ZIP_FILE_EXTENSION = ".zip"

# Reserved index file names
DEFAULT_INDEX_FILE_NAME = "index" + INDEX_FILE_EXTENSION
DEFAULT_INDEX_COMPRESSED_FILE_NAME = "index" + INDEX_COMPRESSED_FILE_EXTENSION

# Root element names
GAME_SYSTEM_TAG = "gameSystem"
CATALOGUE_TAG = "catalogue"
ROSTER_TAG = "roster"

# Root element attributes
ID_ATTRIBUTE = "id"
GAME_SYSTEM_ID_ATTRIBUTE = "gameSystemId"
BATTLESCRIBE_VERSION_ATTRIBUTE = "battleScribeVersion"
REVISION_ATTRIBUTE = "revision"
NAME_ATTRIBUTE = "name"
AUTHOR_NAME_ATTRIBUTE = "authorName"
AUTHOR_CONTACT_ATTRIBUTE = "authorContact"
AUTHOR_URL_ATTRIBUTE = "authorUrl"
DESCRIPTION_ATTRIBUTE = "description"
POINTS_ATTRIBUTE = "points"
POINTS_LIMIT_ATTRIBUTE = "pointsLimit"
GAME_SYSTEM_NAME_ATTRIBUTE = "gameSystemName"
GAME_SYSTEM_REVISION_ATTRIBUTE = "gameSystemRevision"

# Data index document
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
DATA_INDEX_NAMESPACE = "http://www.battlescribe.net/schema/dataIndexSchema"
DATA_INDEX_TAG = "dataIndex"
REPOSITORY_URLS_TAG = "repositoryUrls"
REPOSITORY_URL_TAG = "repositoryUrl"
DATA_INDEX_ENTRIES_TAG = "dataIndexEntries"
DATA_INDEX_ENTRY_TAG = "dataIndexEntry"

# Zip entries get a fixed timestamp so archives are reproducible
ZIP_ENTRY_DATE_TIME = (1980, 1, 1, 0, 0, 0)
