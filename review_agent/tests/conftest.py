"""Pytest fixtures for Review Agent tests."""

import io
import tempfile
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from git import Repo
from rich.console import Console

from review_agent.config import Settings
from review_agent.output.formatter import OutputFormatter

ENV_VARS = [field.alias for field in Settings.model_fields.values()]


def _text_chunk(text):
    delta = SimpleNamespace(content=text, tool_calls=None)
    return SimpleNamespace(choices=[SimpleNamespace(delta=delta)])


def _tool_chunk(index, call_id, name, arguments):
    function = SimpleNamespace(name=name, arguments=arguments)
    call = SimpleNamespace(index=index, id=call_id, function=function)
    delta = SimpleNamespace(content=None, tool_calls=[call])
    return SimpleNamespace(choices=[SimpleNamespace(delta=delta)])


def _completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def text_chunk():
    """Factory for a streamed text delta."""
    return _text_chunk


@pytest.fixture
def tool_chunk():
    """Factory for a streamed tool call delta."""
    return _tool_chunk


@pytest.fixture
def completion():
    """Factory for a one-shot chat completion response."""
    return _completion


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every configuration variable from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch


@pytest.fixture
def api_key_env(clean_env):
    """Set a fake API key in the environment."""
    clean_env.setenv("GOOGLE_GENERATIVE_AI_API_KEY", "test-key-1234567890")
    yield clean_env


@pytest.fixture
def settings():
    """Settings with documented defaults and a fake API key."""
    return Settings(api_key="test-key-1234567890")


@pytest.fixture
def mock_openai_client():
    """Patch the OpenAI class used by the generation client."""
    with patch("review_agent.agents.client.OpenAI") as mock_class:
        mock_client = MagicMock()
        mock_class.return_value = mock_client
        yield mock_client


@pytest.fixture
def formatter():
    """Formatter writing to an in-memory buffer."""
    return OutputFormatter(Console(file=io.StringIO(), width=120, force_terminal=False))


@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        repo = Repo.init(tmpdir)

        # Configure git user for commits
        repo.config_writer().set_value("user", "name", "Test User").release()
        repo.config_writer().set_value("user", "email", "test@example.com").release()

        # Create initial commit
        test_file = Path(tmpdir) / "test.py"
        test_file.write_text("# Initial file\n")
        repo.index.add(["test.py"])
        repo.index.commit("Initial commit")

        yield repo


@pytest.fixture
def repo_with_changes(temp_git_repo):
    """Repo with unstaged edits to source files and excluded paths."""
    repo = temp_git_repo
    repo_path = Path(repo.working_dir)

    tracked = {
        "src/app.py": "def main():\n    return 1\n",
        "dist/bundle.js": "console.log(1);\n",
        "bun.lock": "lockfile v1\n",
        "node_modules/pkg/index.js": "module.exports = 1;\n",
    }
    for name, content in tracked.items():
        path = repo_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    repo.index.add(list(tracked))
    repo.index.commit("Add tracked files")

    # Modify everything without staging
    for name, content in tracked.items():
        (repo_path / name).write_text(content + "# changed\n")
    (repo_path / "test.py").write_text("# Initial file\nprint('changed')\n")

    yield repo


def _stage_file(repo, name="feature.py", content="def feature():\n    return 'ok'\n"):
    """Write and stage a file in a repository."""
    path = Path(repo.working_dir) / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    repo.index.add([name])
    return path


@pytest.fixture
def staged_repo(temp_git_repo):
    """Repo with one staged file."""
    _stage_file(temp_git_repo)
    yield temp_git_repo


@pytest.fixture
def stage():
    """Factory that writes and stages a file in a repository."""
    return _stage_file
