"""License engine: per-file pipeline plus sequential / worker-pool dispatch.

A ``LiceEngine`` is built once per run and never mutated afterwards, so the
worker threads share it without locking. The only synchronised object is
the queue that carries discovered paths from the walking thread to the
workers.
"""
from __future__ import annotations

import queue
import threading
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .config import LiceConfig, resolve_jobs
from .header import Outcome, is_current, replace, synthesize
from .logutil import get_logger
from .styles import resolve
from .walk import walk


class FileStatus(str, Enum):
    CURRENT = "current"
    INSERTED = "inserted"
    UPDATED = "updated"
    MALFORMED = "malformed"
    UNSUPPORTED = "unsupported"
    FAILED = "failed"


_OUTCOME_STATUS: Dict[Outcome, FileStatus] = {
    Outcome.INSERTED: FileStatus.INSERTED,
    Outcome.UPDATED: FileStatus.UPDATED,
    Outcome.SKIPPED_MALFORMED: FileStatus.MALFORMED,
}

# Called from worker threads; output ordering across threads is unspecified.
Reporter = Callable[[Path, FileStatus], None]


@dataclass
class RunSummary:
    workers: int = 1
    counts: Counter = field(default_factory=Counter)

    @property
    def files(self) -> int:
        return sum(self.counts.values())

    def count(self, status: FileStatus) -> int:
        return self.counts.get(status, 0)

    def merge(self, tally: Counter) -> None:
        self.counts.update(tally)

    def format(self) -> str:
        fields = " ".join(f"{status.value}={self.count(status)}" for status in FileStatus)
        return f"files={self.files} {fields}"


def read_text(path: Path) -> str:
    # newline="" keeps \r\n intact outside the header region
    with open(path, "r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_text(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)


@dataclass(frozen=True)
class LiceEngine:
    config: LiceConfig
    license_text: str

    @classmethod
    def from_config(cls, config: LiceConfig) -> "LiceEngine":
        """Load the license template. Raises OSError / UnicodeDecodeError if unreadable."""
        return cls(config=config, license_text=read_text(Path(config.license_file)))

    def process_file(self, path: Path, report: Optional[Reporter] = None) -> FileStatus:
        """Bring one file's header up to date. Never raises for I/O problems."""
        log = get_logger()
        ext = path.suffix[1:]
        if not ext:
            log.debug("Ignoring file without extension: %s", path)
            return FileStatus.UNSUPPORTED
        profile = resolve(ext)
        if profile is None:
            log.info("Ignoring unsupported file type: %s", path)
            return FileStatus.UNSUPPORTED

        try:
            content = read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("Could not read file %s: %s", path, exc)
            return FileStatus.FAILED

        header = synthesize(self.license_text, profile)
        if is_current(content, header):
            status = FileStatus.CURRENT
        else:
            new_content, outcome = replace(content, header, profile)
            status = _OUTCOME_STATUS[outcome]
            if outcome is Outcome.SKIPPED_MALFORMED:
                log.warning("Skipping %s: unclosed block comment detected", path)
                return status
            if new_content != content:
                try:
                    write_text(path, new_content)
                except OSError as exc:
                    log.warning("Error writing %s: %s", path, exc)
                    return FileStatus.FAILED
        if report is not None:
            report(path, status)
        return status

    def _process_isolated(self, path: Path, report: Optional[Reporter]) -> FileStatus:
        try:
            return self.process_file(path, report)
        except Exception:  # noqa: BLE001 - one bad file must not take down the run
            get_logger().exception("Error processing %s", path)
            return FileStatus.FAILED

    def run(self, report: Optional[Reporter] = None) -> RunSummary:
        num_workers = resolve_jobs(self.config.jobs)
        summary = RunSummary(workers=num_workers)
        if num_workers == 1:
            get_logger().info("Running in single-threaded mode.")
            tally: Counter = Counter()

            def _visit(path: Path) -> None:
                tally[self._process_isolated(path, report)] += 1

            walk(self.config.targets, self.config.excludes, _visit)
            summary.merge(tally)
            return summary

        get_logger().info("Starting %d worker threads...", num_workers)
        # None is the close marker; one per worker
        work: "queue.Queue[Optional[Path]]" = queue.Queue()
        tallies: List[Counter] = [Counter() for _ in range(num_workers)]

        def _worker(tally: Counter) -> None:
            while True:
                path = work.get()
                if path is None:
                    break
                tally[self._process_isolated(path, report)] += 1

        threads = [
            threading.Thread(target=_worker, args=(tallies[i],), name=f"lice-worker-{i}", daemon=True)
            for i in range(num_workers)
        ]
        for t in threads:
            t.start()
        try:
            walk(self.config.targets, self.config.excludes, work.put)
        finally:
            for _ in threads:
                work.put(None)
            for t in threads:
                t.join()
        for tally in tallies:
            summary.merge(tally)
        return summary


__all__ = ["FileStatus", "LiceEngine", "Reporter", "RunSummary"]
