from __future__ import annotations

from pathlib import Path

from pypdf import PdfReader

from pdf_slicer.observer import RecordingObserver
from pdf_slicer.rasterizer import RasterCompressor
from pdf_slicer.settings import SlicerSettings
from pdf_slicer.workspace import MERGED_NAME, Workspace


def make_workspace(tmp_path: Path, **settings) -> tuple[Workspace, RecordingObserver]:
    observer = RecordingObserver()
    export = tmp_path / "export"
    workspace = Workspace(SlicerSettings(export_folder=export, **settings), observer=observer)
    return workspace, observer


def page_count(path: Path) -> int:
    return len(PdfReader(str(path)).pages)


def test_add_files_sets_first_active(tmp_path: Path, pdf_factory) -> None:
    workspace, observer = make_workspace(tmp_path)
    added = workspace.add_files([pdf_factory("a.pdf", 2), pdf_factory("b.pdf", 3)])

    assert added == 2
    assert workspace.active.display_name == "a.pdf"
    assert observer.events[-1] == "Added 2 file(s)"
    assert workspace.log[0] == "Ready."


def test_unreadable_file_is_reported_and_skipped(tmp_path: Path, pdf_factory) -> None:
    bogus = tmp_path / "bogus.pdf"
    bogus.write_text("nope")
    workspace, observer = make_workspace(tmp_path)

    assert workspace.add_files([bogus, pdf_factory("ok.pdf", 1)]) == 1
    assert any(event.startswith("Could not open bogus.pdf") for event in observer.events)


def test_selection_follows_active_document(tmp_path: Path, pdf_factory) -> None:
    workspace, _ = make_workspace(tmp_path)
    workspace.add_files([pdf_factory("a.pdf", 3), pdf_factory("b.pdf", 6)])

    workspace.select_all()
    assert workspace.selection == {0, 1, 2}

    workspace.set_active(1)
    assert len(workspace.selection) == 0

    result = workspace.select_range("5-9,zz")
    assert workspace.selection == {4, 5}
    assert result.dropped == ("zz",)

    workspace.invert_selection()
    assert workspace.selection == {0, 1, 2, 3}


def test_selection_without_documents_is_a_no_op(tmp_path: Path) -> None:
    workspace, _ = make_workspace(tmp_path)
    workspace.select_all()
    assert workspace.select_range("1-3") is None
    assert len(workspace.selection) == 0


def test_delete_selected(tmp_path: Path, pdf_factory, widths) -> None:
    workspace, observer = make_workspace(tmp_path)
    workspace.add_files([pdf_factory("a.pdf", 5)])
    workspace.select_range("2,4")

    result = workspace.delete_selected()

    assert result.applied_count == 2
    assert widths(workspace.active_document) == [100, 102, 104]
    assert len(workspace.selection) == 0
    assert observer.events[-1] == "Deleted 2 page(s) from a.pdf"


def test_export_selection_saves_extract(tmp_path: Path, pdf_factory) -> None:
    workspace, observer = make_workspace(tmp_path)
    workspace.add_files([pdf_factory("report.pdf", 5)])
    workspace.select_range("4,1")

    result = workspace.export_selection()

    assert result.success
    assert result.path == tmp_path / "export" / "report_extract.pdf"
    assert page_count(result.path) == 2
    assert observer.events[-1] == "Saved → report_extract.pdf"
    assert workspace.active_document.page_count == 5


def test_export_with_empty_selection_does_nothing(tmp_path: Path, pdf_factory) -> None:
    workspace, _ = make_workspace(tmp_path)
    workspace.add_files([pdf_factory("report.pdf", 2)])
    assert workspace.export_selection() is None
    assert workspace.delete_selected() is None


def test_merge_all_respects_list_order(tmp_path: Path, pdf_factory) -> None:
    workspace, _ = make_workspace(tmp_path)
    workspace.add_files([
        pdf_factory("a.pdf", 2, base_width=100),
        pdf_factory("b.pdf", 1, base_width=300),
    ])
    workspace.set_active(1)
    assert workspace.move_active(up=True) is True
    assert workspace.move_active(up=True) is False

    result = workspace.merge_all()

    assert result.path.name == MERGED_NAME
    widths = [round(float(page.mediabox.width)) for page in PdfReader(str(result.path)).pages]
    assert widths == [300, 100, 101]


def test_split_all_names_parts(tmp_path: Path, pdf_factory) -> None:
    workspace, _ = make_workspace(tmp_path)
    workspace.add_files([pdf_factory("book.pdf", 25)])

    results = workspace.split_all(10)

    assert [r.path.name for r in results] == ["book_part_01.pdf", "book_part_02.pdf", "book_part_03.pdf"]
    assert [page_count(r.path) for r in results] == [10, 10, 5]


def test_split_all_uses_settings_and_ignores_small_n(tmp_path: Path, pdf_factory) -> None:
    workspace, _ = make_workspace(tmp_path, split_every=2)
    workspace.add_files([pdf_factory("book.pdf", 3)])

    assert workspace.split_all(1) == []
    assert len(workspace.split_all()) == 2


def test_compress_all(tmp_path: Path, pdf_factory) -> None:
    workspace, observer = make_workspace(tmp_path, dpi=72, quality=0.5)
    workspace.add_files([pdf_factory("scan.pdf", 2)])

    results = workspace.compress_all()

    assert [r.path.name for r in results] == ["scan_compressed.pdf"]
    assert page_count(results[0].path) == 2
    assert observer.busy_changes == [True, False]
    assert not workspace.busy
    assert "Saved → scan_compressed.pdf" in workspace.log


def test_save_failure_is_logged(tmp_path: Path, pdf_factory) -> None:
    blocker = tmp_path / "export"
    blocker.write_text("a file, not a folder")
    workspace, observer = make_workspace(tmp_path)
    workspace.add_files([pdf_factory("a.pdf", 1)])

    result = workspace.merge_all()

    assert result.success is False
    assert observer.events[-1] == f"Save failed for {MERGED_NAME}"


def test_remove_active(tmp_path: Path, pdf_factory) -> None:
    workspace, observer = make_workspace(tmp_path)
    workspace.add_files([pdf_factory("a.pdf", 1), pdf_factory("b.pdf", 1)])
    workspace.set_active(1)
    workspace.selection.add(0)

    removed = workspace.remove_active()

    assert removed.display_name == "b.pdf"
    assert workspace.active.display_name == "a.pdf"
    assert len(workspace.selection) == 0
    assert observer.events[-1] == "Removed b.pdf from list"

    workspace.remove_active()
    assert workspace.active is None
    assert workspace.remove_active() is None
    assert workspace.merge_all() is None


def test_supplied_compressor_keeps_its_observer(tmp_path: Path, pdf_factory) -> None:
    compressor_observer = RecordingObserver()
    compressor = RasterCompressor(observer=compressor_observer)
    workspace_observer = RecordingObserver()
    workspace = Workspace(
        SlicerSettings(export_folder=tmp_path / "export", dpi=72),
        observer=workspace_observer,
        compressor=compressor,
    )
    workspace.add_files([pdf_factory("scan.pdf", 1)])

    workspace.compress_all()

    assert compressor.observer is workspace
    assert compressor_observer.busy_changes == [True, False]
    assert compressor_observer.events == ["Rasterized scan.pdf: 1/1 page(s)"]
    assert workspace_observer.busy_changes == [True, False]
    assert "Rasterized scan.pdf: 1/1 page(s)" in workspace.log
    assert "Added 1 file(s)" not in compressor_observer.events
