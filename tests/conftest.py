"""Test configuration and fixtures for project-tree."""

import pytest


@pytest.fixture
def test_dir(tmp_path):
    """Create the reference project used throughout the test suite.

    test-dir/
    ├── cache/
    │   └── data.bin
    ├── node_modules/
    │   └── module.js
    ├── src/
    │   └── app.js
    ├── package.json
    └── README.md
    """
    root = tmp_path / "test-dir"
    root.mkdir()
    (root / "src").mkdir()
    (root / "src" / "app.js").write_text("console.log('app');\n")
    (root / "cache").mkdir()
    (root / "cache" / "data.bin").write_bytes(b"\x00\x01")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "module.js").write_text("export default {}\n")
    (root / "package.json").write_text('{"name": "test"}\n')
    (root / "README.md").write_text("# Test\n")
    return root


@pytest.fixture
def output_file(tmp_path):
    """Path for the rendered outline, outside the rendered tree."""
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    return out_dir / "structure.md"
