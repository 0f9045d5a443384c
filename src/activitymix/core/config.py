"""Core configuration for activitymix."""

# Header of the column holding activity titles
DEFAULT_COLUMN_KEY = "activity_title"

# Input file settings
DEFAULT_ENCODING = "utf-8-sig"
ALLOWED_EXTENSIONS = {'.csv', '.txt'}

# Settings database
DB_PATH_ENV_VAR = "ACTIVITYMIX_DB_PATH"
DEFAULT_DB_DIRNAME = ".activitymix"
DEFAULT_DB_FILENAME = "settings.db"
