# tests/conftest.py
"""
Shared civra test fixtures.
"""

import os
import tempfile
from pathlib import Path

import pytest

SAMPLE_RESPONSE = """I'll add a hero section and clean up the old banner.

<dec-code>
<dec-write file_path="app/page.tsx">
export default function Home() {
  return <main className="p-4">Hello</main>;
}
</dec-write>
<dec-delete file_path="components/Banner.tsx" />
<dec-rename original_file_path="components/old.tsx" new_file_path="components/new.tsx" />
<dec-add-dependency>framer-motion</dec-add-dependency>
</dec-code>

These changes add a hero section.
Run the dev server to see it.
"""


@pytest.fixture(scope="function")
def isolated_filesystem():
    """
    Run the test inside a fresh temporary directory and restore the cwd afterwards.
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        original_cwd = os.getcwd()
        os.chdir(temp_path)
        try:
            yield temp_path
        finally:
            os.chdir(original_cwd)


@pytest.fixture
def sample_response() -> str:
    return SAMPLE_RESPONSE


@pytest.fixture
def runner():
    """Click CliRunner for CLI commands"""
    from click.testing import CliRunner
    return CliRunner()
