from unittest.mock import MagicMock

import demo
from common.config import Section

EXPECTED_LINES = [
    "Observer notified",
    "Executing strategy A",
    "Executing strategy B",
    "Action performed",
    "Element: 1",
    "Element: 2",
    "Element: 3",
    "Element: 4",
    "Element: 5",
]


def test_main_emits_expected_lines_in_order():
    lines = []

    demo.main(output=lines.append, logger=MagicMock())

    assert lines == EXPECTED_LINES

def test_main_logs_each_section():
    logger = MagicMock()

    demo.main(output=MagicMock(), logger=logger)

    logged = [c.args[0] for c in logger.log.call_args_list]
    for section in (Section.OBSERVER, Section.STRATEGY, Section.COMMAND, Section.ITERATOR):
        assert section in logged
    assert logged[-1] == "Demo finished"

def test_main_prints_to_console_by_default(capsys):
    demo.main(logger=MagicMock())

    captured = capsys.readouterr()
    assert captured.out.splitlines() == EXPECTED_LINES

def test_main_creates_file_logger_when_none_given(monkeypatch, tmp_path):
    monkeypatch.setattr("common.utils.project_root", str(tmp_path))
    (tmp_path / "pyproject.toml").write_text("")

    demo.main(output=MagicMock())

    log_file = tmp_path / "logs" / "patterns_demo.txt"
    assert log_file.exists()
    assert "Demo finished" in log_file.read_text()

def test_installed_main_logs_to_working_dir_not_package_dir(monkeypatch, tmp_path, capsys):
    site_packages = tmp_path / "site-packages"
    site_packages.mkdir()
    site_packages.chmod(0o555)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setattr("common.utils.project_root", str(site_packages))
    monkeypatch.chdir(workdir)

    try:
        demo.main()
    finally:
        site_packages.chmod(0o755)

    captured = capsys.readouterr()
    assert captured.out.splitlines() == EXPECTED_LINES
    assert (workdir / "logs" / "patterns_demo.txt").exists()
    assert not (site_packages / "logs").exists()
