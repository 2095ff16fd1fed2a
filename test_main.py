import pytest

import main


def _run(monkeypatch, capsys, *args):
    monkeypatch.setattr(main.sys, "argv", ["wardgrid", *args])
    monkeypatch.setattr(
        main.config_paths,
        "load_config",
        lambda: {
            "PAGE_SIZE": 10,
            "PAGE_SIZE_OPTIONS": [10, 50, 100],
            "UNDO_MAX_DEPTH": 50,
            "PRUNE_STALE_SELECTION": False,
        },
    )
    main.main()
    return capsys.readouterr().out


def test_version_flag(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, "-v").strip() == main.__version__


def test_help_flag(monkeypatch, capsys):
    assert "Usage:" in _run(monkeypatch, capsys, "-h")


def test_demo_output(monkeypatch, capsys):
    out = _run(monkeypatch, capsys)
    lines = out.splitlines()
    # sorted by patient name, selections marked
    assert lines[1].startswith("[x] PAT-003")
    assert lines[4].startswith("[x] PAT-001")
    assert "2 selected | 1–4 of 4 | [1]" in out
    assert "Export: 2 rows" in out
    assert "X-ray" in out
    assert "Total: $320.00" in out


def test_demo_page_size(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, "--page-size", "2")
    assert "1–2 of 4 | [1] 2" in out


@pytest.mark.parametrize("value", ["0", "abc"])
def test_bad_page_size(monkeypatch, capsys, value):
    with pytest.raises(SystemExit):
        _run(monkeypatch, capsys, "--page-size", value)
