from __future__ import annotations

import logging

from pdf_slicer.observer import LoggingObserver, NullObserver, RecordingObserver


def test_recording_observer_tracks_busy() -> None:
    observer = RecordingObserver()
    assert observer.busy is False

    observer.on_busy_changed(True)
    assert observer.busy is True
    observer.on_busy_changed(False)
    observer.on_event("done")

    assert observer.busy_changes == [True, False]
    assert observer.events == ["done"]


def test_logging_observer_logs_events(caplog) -> None:
    logger = logging.getLogger("pdf_slicer.tests.observer")
    observer = LoggingObserver(logger)

    with caplog.at_level(logging.INFO, logger=logger.name):
        observer.on_event("Saved → a.pdf")

    assert "Saved → a.pdf" in caplog.text


def test_null_observer_accepts_notifications() -> None:
    observer = NullObserver()
    assert observer.on_busy_changed(True) is None
    assert observer.on_event("ignored") is None
