"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path

import pytest


@pytest.fixture
def fixtures_path() -> Path:
    """Get the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_diff_path(fixtures_path: Path) -> Path:
    """Get the path to the sample diff file."""
    return fixtures_path / "sample.diff"


@pytest.fixture
def simple_diff_content() -> str:
    """A two-file diff: one modified file with two hunks, one new file."""
    # Note: Context lines must start with exactly one space character
    # The space is the diff marker, followed by the actual line content
    lines = [
        "diff --git a/services/user_service.py b/services/user_service.py",
        "index 1234567..abcdefg 100644",
        "--- a/services/user_service.py",
        "+++ b/services/user_service.py",
        "@@ -10,5 +10,6 @@ def get_user(user_id: int) -> User:",
        " " + "    user = db.query(User).filter(User.id == user_id).first()",
        "-" + "    return user",
        "+" + "    return user or None",
        "+" + "    # cached",
        " ",
        " " + "def create_user(user_data: UserCreate) -> User:",
        " " + "    user = User(**user_data.dict())",
        "@@ -30,3 +31,2 @@ def create_user(user_data: UserCreate) -> User:",
        " " + "    db.add(user)",
        "-" + "    db.commit()",
        "-" + "    db.flush()",
        "+" + "    db.commit(flush=True)",
        "diff --git a/utils/slug.py b/utils/slug.py",
        "new file mode 100644",
        "index 0000000..1111111",
        "--- /dev/null",
        "+++ b/utils/slug.py",
        "@@ -0,0 +1,3 @@",
        "+import re",
        "+",
        "+def slugify(text): return re.sub(r'\\W+', '-', text)",
    ]
    return "\n".join(lines) + "\n"
