from pathlib import Path

import pytest

CONFIG_DOCUMENT = """\
// Build settings for the example project.
project name="example" version=1.2.0
  description:A small project used to exercise the parser
    :across more than one line.
  sources
    file=main.c
    file=util.c optional
  targets
    target=debug flags="-O0 -g"
    target=release flags="-O2" // shipped build
"""


def _write_config_document(path: Path) -> None:
    """Writes a realistic document with CRLF line endings."""
    path.write_bytes(CONFIG_DOCUMENT.replace("\n", "\r\n").encode())


def _write_large_document(path: Path) -> None:
    """Writes many sections, each with nested children and a long value."""
    lines = []
    for i in range(500):
        lines.append(f"section id={i}")
        lines.append(f"  value:{'v' * 300}")
        lines.append("    :tail")
        lines.append("  items")
        for j in range(5):
            lines.append(f"    item={j}")
    path.write_text("\n".join(lines) + "\n")


def _write_broken_document(path: Path) -> None:
    path.write_text("root\n    deep\n  shallow\n")


@pytest.fixture(scope="module")
def documents_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test documents once per module."""
    dir_path: Path = tmp_path_factory.mktemp("documents")

    _write_config_document(dir_path / "config.bml")
    _write_large_document(dir_path / "large.bml")
    _write_broken_document(dir_path / "broken.bml")
    (dir_path / "parser.yaml").write_text("max_depth: 4\nchunk_size: 7\n")

    return dir_path
