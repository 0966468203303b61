"""Constants and configuration for File Explorer."""

APP_NAME = "File Explorer"
APP_VERSION = "0.3.0"

# Default names used by the create actions.
DEFAULT_FILE_NAME = "new_file.txt"
DEFAULT_FOLDER_NAME = "new_folder"

# Upper bound for the conflict-free name search.
MAX_NAME_ATTEMPTS = 100_000

# Access time column format.
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

# Bookmark sidebar: label and platformdirs lookup (None means home).
BOOKMARK_LOCATIONS = [
    ("Home", None),
    ("Downloads", "user_downloads_dir"),
    ("Documents", "user_documents_dir"),
    ("Pictures", "user_pictures_dir"),
    ("Music", "user_music_dir"),
    ("Videos", "user_videos_dir"),
]

# Layout.
SIDEBAR_WIDTH = 14
SIZE_COLUMN_WIDTH = 12
DATE_COLUMN_WIDTH = 17
HEADER_HEIGHT = 2
STATUS_HEIGHT = 1

# Curses color pair ids per semantic role.
ROLE_TO_PAIR_ID = {
    "header": 1,
    "body": 2,
    "directory": 3,
    "selected": 4,
    "sidebar": 5,
    "status": 6,
    "error": 7,
}

# (foreground, background) as curses color numbers; 0..7 are the ANSI colors.
ROLE_COLORS = {
    "header": (7, 4),
    "body": (7, -1),
    "directory": (6, -1),
    "selected": (0, 6),
    "sidebar": (3, -1),
    "status": (0, 7),
    "error": (7, 1),
}
