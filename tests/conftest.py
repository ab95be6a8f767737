"""Root test configuration: shared settings, resource index, and log capture fixtures"""

from pathlib import PurePath

import pytest
from loguru import logger

from yarimd.config import Settings
from yarimd.core.models import RewriteContext
from yarimd.core.resources import MemoryResourceIndex


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings()


@pytest.fixture(name="index")
def index_fixture():
    """Empty in-memory resource index: every term resolves remotely."""
    return MemoryResourceIndex()


@pytest.fixture(name="ctx")
def ctx_fixture(index, settings):
    return RewriteContext(path=PurePath("learn/html/index.md"), index=index, settings=settings)


@pytest.fixture(name="content_root")
def content_root_fixture(tmp_path):
    """Content root with resources/glossary/ holding a single local entry, HTML.md."""
    glossary = tmp_path / "resources" / "glossary"
    glossary.mkdir(parents=True)
    (glossary / "HTML.md").write_text("# HTML\n")
    return tmp_path


@pytest.fixture(name="log_messages")
def log_messages_fixture():
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def reset_log_sinks():
    """Drop sinks added during a test (the CLI binds one to the runner's stderr)."""
    yield
    logger.remove()
