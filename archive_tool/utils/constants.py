"""Reusable phrases, names and defaults."""
APP_NAME = "archive-tool"

BACKUP_MODE = "backup"
ARCHIVE_MODE = "archive"

DEFAULT_MAX_BACKUPS = 10
ARCHIVE_SUFFIX = ".tar.gz"

# Series names are restricted to this character set before any filename matching.
SERIES_NAME_CHARS = "letters, digits, '-' and '_'"

MODE_REQUIRED = "Specify either backup mode with -b or archive mode with -a."
TARGET_REQUIRED = "Specify a target directory with -t."
NAME_REQUIRED = "A backup name must be supplied with -n. Use something short and simple, the date and time will be appended."
INPUTS_REQUIRED = "Backup mode needs at least one file or directory to back up."
SOURCE_REQUIRED = "Archive mode needs an existing source directory given with -d."

# Triggers for job runs, useful for logging.
SCHEDULED_TRIGGER = "schedule"
MANUAL_TRIGGER = "manual"
