"""Command-line entry point: parse arguments, build settings, run one mode."""
from __future__ import annotations
from typing import List, NoReturn, Optional
import argparse
import sys

from archive_tool.config.settings import Settings
from archive_tool.exceptions.custom_exceptions import ArchiveToolError, ValidationError
from archive_tool.services.job_service import JobService
from archive_tool.services.scheduler_service import SchedulerService
from archive_tool.utils.constants import APP_NAME, DEFAULT_MAX_BACKUPS
from archive_tool.utils.logger import configure_logging, get_logger

log = get_logger(__name__)

EPILOG = f"""\
Backups are named NAME-YYYYMMDD-HHMMSS.N.tar.gz, where N is the generation
number (0 is the newest). At most MAX_BACKUPS generations are kept per name;
-m falls back to $MAX_BACKUPS and then to {DEFAULT_MAX_BACKUPS}.

In archive mode the newest backup (generation 0) of NAME in the source
directory is copied into the target directory, which is rotated the same way.

The intent is two periodic jobs: frequent backups (-b, e.g. hourly) and
sparse archives of those backups (-a, e.g. daily or weekly).

examples:
  back up file1 and file2 into /path/to/backups, keeping 5 generations:
    {APP_NAME} -b -t /path/to/backups -m 5 -n backup /target/file1 /target/file2

  archive the newest "backup" into /path/to/archives, keeping 4 generations:
    {APP_NAME} -a -d /path/to/backups -m 4 -n backup -t /path/to/archives
"""

class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise ValidationError(message)

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    p = _Parser(
        prog=APP_NAME,
        description="Rotate timestamped .tar.gz backups of a named series.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("-a", dest="archive", action="store_true", help="Archive mode: copy the newest existing backup.")
    mode.add_argument("-b", dest="backup", action="store_true", help="Backup mode: archive the given files.")
    p.add_argument("-t", dest="target_dir", metavar="TARGET_DIR", help="Directory that receives the backup/archive file.")
    p.add_argument("-n", dest="name", metavar="NAME", help="Backup name; the date and time are appended.")
    p.add_argument("-d", dest="source_dir", metavar="SOURCE_DIR", help="Directory containing the backups (archive mode).")
    p.add_argument("-m", dest="max_backups", metavar="MAX_BACKUPS", type=int, help="Maximum number of backups kept for NAME.")
    p.add_argument("--every", metavar="SECONDS", type=int, help="Keep running and repeat the job every SECONDS.")
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug output.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors.")
    p.add_argument("inputs", nargs="*", metavar="FILE", help="Files/directories to back up (backup mode).")
    return p

def main(argv: Optional[List[str]] = None) -> int:
    """Run the tool and return the process exit code."""
    parser = build_parser()
    try:
        settings = Settings.from_args(parser.parse_args(argv))
    except ValidationError as e:
        print(f"{APP_NAME}: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    configure_logging(settings)

    if settings.interval_seconds:
        SchedulerService(settings).start()
        return 0

    try:
        JobService(settings).run()
    except ArchiveToolError as e:
        log.error("%s", e)
        return 1
    return 0
