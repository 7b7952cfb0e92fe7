import datetime
from pathlib import Path

from archive_tool.config.settings import Settings
from archive_tool.services.scheduler_service import SchedulerService


def test_registers_single_interval_job(tmp_path):
    settings = Settings(mode="backup", target_dir=tmp_path / "b", name="db",
                        inputs=(Path(__file__),), interval_seconds=3600)
    scheduler = SchedulerService(settings).build()

    (job,) = scheduler.get_jobs()
    assert job.id == "backup_db"
    assert job.max_instances == 1
    assert job.coalesce is True
    assert job.trigger.interval == datetime.timedelta(hours=1)


def test_failed_run_is_logged_not_raised(tmp_path, caplog):
    source = tmp_path / "empty"
    source.mkdir()
    settings = Settings(mode="archive", target_dir=tmp_path / "a", name="db",
                        source_dir=source, interval_seconds=60)

    SchedulerService(settings)._run_job_safely()

    assert "Scheduled archive job failed" in caplog.text
    assert not (tmp_path / "a").exists()


def test_scheduled_run_creates_backup(tmp_path):
    payload = tmp_path / "f.txt"
    payload.write_text("x")
    settings = Settings(mode="backup", target_dir=tmp_path / "b", name="db",
                        inputs=(payload,), interval_seconds=60)

    SchedulerService(settings)._run_job_safely()

    assert len(list((tmp_path / "b").glob("db-*.0.tar.gz"))) == 1
