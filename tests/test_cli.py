"""Tests for the click command-line interface."""

import json

import pytest
from click.testing import CliRunner

from conftest import StubAssociations, StubDefinitions, StubTranslations
from easydict.cli import cli
from easydict.errors import NetworkError
from easydict.models.analysis_models import PartOfSpeech, VerifiedForm
from easydict.models.dictionary_models import TranslationPayload
from easydict.pipeline import LookupPipeline
from easydict.storage.stores import HistoryStore, NotebookStore, default_backend

EN_ZH = ("en", "zh-CN")
ZH_EN = ("zh-CN", "en")


async def verify_create(candidate):
    if candidate == "creation":
        return VerifiedForm(word=candidate, part_of_speech=PartOfSpeech.NOUN)
    return None


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def pipeline(hello_entry, create_entry, en_zh_payload):
    translations = StubTranslations({
        EN_ZH: en_zh_payload,
        ZH_EN: TranslationPayload(primary="Hello")
    })
    return LookupPipeline(
        definitions=StubDefinitions({"hello": [hello_entry], "create": [create_entry]}),
        translations=translations,
        associations=StubAssociations(["hi", "hey"]),
        verifier=verify_create
    )


def invoke(runner, args, pipeline, tmp_path):
    return runner.invoke(cli, args, obj={"pipeline": pipeline, "data_dir": tmp_path})


def test_lookup_renders_and_records_history(runner, pipeline, tmp_path):
    result = invoke(runner, ["lookup", "hello"], pipeline, tmp_path)

    assert result.exit_code == 0, result.output
    assert "hello" in result.output
    assert "你好" in result.output
    assert "used as a greeting" in result.output
    assert "Casual Conversation" in result.output
    assert HistoryStore(default_backend("history_file", tmp_path)).items() == ["hello"]


def test_lookup_shows_word_family(runner, pipeline, tmp_path):
    result = invoke(runner, ["lookup", "create"], pipeline, tmp_path)

    assert result.exit_code == 0, result.output
    assert "Word family" in result.output
    assert "creation" in result.output


def test_lookup_json(runner, pipeline, tmp_path):
    result = invoke(runner, ["lookup", "--json", "hello"], pipeline, tmp_path)

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["chinese_translation"]["primary"] == "你好"
    assert data["is_phrase"] is False


def test_lookup_chinese(runner, pipeline, tmp_path):
    result = invoke(runner, ["lookup", "你好"], pipeline, tmp_path)

    assert result.exit_code == 0, result.output
    assert "Hello" in result.output


def test_lookup_save_adds_to_notebook(runner, pipeline, tmp_path):
    invoke(runner, ["lookup", "--save", "hello"], pipeline, tmp_path)

    assert NotebookStore(default_backend("notebook_file", tmp_path)).items() == ["hello"]


def test_lookup_error_message(runner, tmp_path):
    failing = LookupPipeline(
        definitions=StubDefinitions(error=NetworkError("offline")),
        translations=StubTranslations(error=NetworkError("offline")),
        associations=StubAssociations()
    )

    result = invoke(runner, ["lookup", "hello"], failing, tmp_path)

    assert result.exit_code == 1
    assert "Network error. Please check your connection and try again." in result.output


def test_related(runner, pipeline, tmp_path):
    result = invoke(runner, ["related", "hello", "--max", "1"], pipeline, tmp_path)

    assert result.exit_code == 0, result.output
    assert result.output.split() == ["hi"]


def test_history_commands(runner, pipeline, tmp_path):
    invoke(runner, ["lookup", "hello"], pipeline, tmp_path)
    invoke(runner, ["lookup", "create"], pipeline, tmp_path)

    listed = invoke(runner, ["history"], pipeline, tmp_path)
    assert listed.output.split() == ["1.", "create", "2.", "hello"]

    removed = invoke(runner, ["history", "--remove", "create"], pipeline, tmp_path)
    assert removed.exit_code == 0

    missing = invoke(runner, ["history", "--remove", "create"], pipeline, tmp_path)
    assert missing.exit_code == 1

    invoke(runner, ["history", "--clear"], pipeline, tmp_path)
    assert "No searches yet." in invoke(runner, ["history"], pipeline, tmp_path).output


def test_notebook_commands(runner, pipeline, tmp_path):
    assert invoke(runner, ["notebook", "add", "Serendipity"], pipeline, tmp_path).exit_code == 0
    assert "already saved" in invoke(runner, ["notebook", "add", "serendipity"], pipeline, tmp_path).output
    invoke(runner, ["notebook", "add", "ephemeral"], pipeline, tmp_path)
    invoke(runner, ["notebook", "move", "1", "2"], pipeline, tmp_path)

    listed = invoke(runner, ["notebook", "list"], pipeline, tmp_path)
    assert listed.output.split() == ["1.", "Serendipity", "2.", "ephemeral"]

    assert invoke(runner, ["notebook", "move", "1", "9"], pipeline, tmp_path).exit_code == 1
    assert invoke(runner, ["notebook", "remove", "SERENDIPITY"], pipeline, tmp_path).exit_code == 0

    cleared = invoke(runner, ["notebook", "clear", "--yes"], pipeline, tmp_path)
    assert cleared.exit_code == 0
    assert "Notebook is empty." in invoke(runner, ["notebook", "list"], pipeline, tmp_path).output


def test_known_toggle(runner, pipeline, tmp_path):
    assert "Marked 'abandon' as known." in invoke(runner, ["known", "Abandon"], pipeline, tmp_path).output
    assert invoke(runner, ["known"], pipeline, tmp_path).output.split() == ["abandon"]
    assert "Unmarked 'abandon'." in invoke(runner, ["known", "abandon"], pipeline, tmp_path).output
