import pytest

from termselect.select import Select

from .helpers import RecordingRenderer, ScriptedReader


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def make_select(renderer):
    """builds a select wired to a scripted reader and the recording renderer"""

    def _make(keys, **kwargs):
        kwargs.setdefault("message", "choose a letter:")
        reader = ScriptedReader(keys)
        return Select(renderer=renderer, reader=reader, **kwargs), reader

    return _make
