"""
Command-line interface for EasyDict.

Provides commands for looking up English or Chinese words, browsing related
words and managing the search history, the word notebook and known words.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

import aiohttp
import click
from click_help_colors import HelpColorsCommand, HelpColorsGroup
from click_option_group import OptionGroup, optgroup

from easydict import __version__
from easydict.config import API_CONFIG, DATA_DIR
from easydict.errors import DictionaryError, StorageError
from easydict.models.lookup_models import LookupResult, Script
from easydict.pipeline import LookupPipeline
from easydict.storage.stores import HistoryStore, KnownWordsStore, NotebookStore, default_backend
from easydict.utils.logging_config import component_logger

log = component_logger("cli")

DEFINITIONS_PER_MEANING = 3


class ColorGroup(HelpColorsGroup):
    def get_help(self, ctx):
        """Override to add custom formatting to help text."""
        return click.style("""
╭────────────────────────────────────────────╮
│        EasyDict English-Chinese CLI        │
╰────────────────────────────────────────────╯
        """, fg='blue') + super().get_help(ctx)


def _fail(message: str) -> None:
    click.echo(click.style(f"❌ {message}", fg='red'), err=True)
    sys.exit(1)


def _data_dir(ctx: click.Context) -> Path:
    return ctx.obj["data_dir"]


def _history(ctx: click.Context) -> HistoryStore:
    return HistoryStore(default_backend("history_file", _data_dir(ctx)))


def _notebook(ctx: click.Context) -> NotebookStore:
    return NotebookStore(default_backend("notebook_file", _data_dir(ctx)))


def _known(ctx: click.Context) -> KnownWordsStore:
    return KnownWordsStore(default_backend("known_words_file", _data_dir(ctx)))


async def _run_lookup(ctx: click.Context, query: str, wait_family: bool) -> LookupResult:
    pipeline = ctx.obj.get("pipeline")
    if pipeline is not None:
        return await pipeline.search(query, await_word_family=wait_family)
    timeout = aiohttp.ClientTimeout(total=API_CONFIG["timeout"])
    async with aiohttp.ClientSession(timeout=timeout) as session:
        return await LookupPipeline(session=session).search(query, await_word_family=wait_family)


async def _run_related(ctx: click.Context, word: str, relation: str, max_results: int) -> List[str]:
    pipeline = ctx.obj.get("pipeline")
    if pipeline is not None:
        return await pipeline.related_words(word, relation, max_results)
    timeout = aiohttp.ClientTimeout(total=API_CONFIG["timeout"])
    async with aiohttp.ClientSession(timeout=timeout) as session:
        return await LookupPipeline(session=session).related_words(word, relation, max_results)


def render_definitions(result: LookupResult) -> None:
    for entry in result.english_definitions:
        for meaning in entry.meanings:
            click.echo(click.style(f"\n[{meaning.part_of_speech}]", fg='cyan'))
            for i, definition in enumerate(meaning.definitions[:DEFINITIONS_PER_MEANING], 1):
                click.echo(f"  {i}. {definition.definition}")
                if definition.example:
                    click.echo(click.style(f"     \"{definition.example}\"", dim=True))


def render_result(result: LookupResult) -> None:
    """Print a lookup result in a human-readable layout."""
    if result.script == Script.CHINESE:
        reverse = result.reverse
        click.echo(click.style(result.word, fg='yellow', bold=True) + f"  →  {reverse.english_translation}")
        if reverse.alternatives:
            click.echo(f"Related: {', '.join(reverse.alternatives)}")
        render_definitions(result)
        return

    header = click.style(result.word, fg='yellow', bold=True)
    entry = result.primary_entry
    if entry and entry.phonetic_text():
        header += f"  {entry.phonetic_text()}"
    if result.is_phrase:
        header += click.style("  (phrase)", dim=True)
    click.echo(header)

    translation = result.chinese_translation
    if translation:
        click.echo(click.style(translation.primary, fg='green', bold=True))
        if translation.alternatives:
            click.echo(f"Also: {', '.join(translation.alternatives)}")

    render_definitions(result)

    if result.etymology and result.etymology.has_content:
        click.echo(click.style("\nEtymology", fg='cyan'))
        parts = [
            f"{c.text} ({c.kind.label.lower()}: {c.gloss}, {c.gloss_zh})"
            for c in result.etymology.components
        ]
        if parts:
            click.echo("  " + " + ".join(parts))
        if result.etymology.origin:
            click.echo(f"  Origin: {result.etymology.origin}")

    if result.usage and result.usage.has_content:
        click.echo(click.style("\nUsage", fg='cyan'))
        for suggestion in result.usage.sorted_suggestions():
            scenario = suggestion.scenario
            if suggestion.is_appropriate:
                click.echo(click.style(f"  ✓ {scenario.label} ({scenario.label_zh})", fg='green'))
            elif suggestion.suggested_word:
                click.echo(f"  ✗ {scenario.label} ({scenario.label_zh}) → {suggestion.suggested_word}")
            else:
                click.echo(click.style(f"  ✗ {scenario.label} ({scenario.label_zh})", dim=True))

    if result.word_family_pending:
        click.echo(click.style("\nWord family: still loading", dim=True))
    elif result.word_family and result.word_family.has_content:
        click.echo(click.style("\nWord family", fg='cyan'))
        for form in result.word_family.forms:
            click.echo(f"  {form.word} [{form.icon}] {form.part_of_speech}")


@click.group(
    cls=ColorGroup,
    help_headers_color='yellow',
    help_options_color='green'
)
@click.option(
    '--data-dir',
    type=click.Path(file_okay=False),
    help='📁 Directory for history, notebook and known-word files'
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Optional[str]):
    """
    EasyDict English-Chinese dictionary

    Look up English words and phrases for definitions, Chinese translations,
    etymology, usage register and word families, or Chinese words for their
    English equivalents.

    Examples:

    \b
    Look up a word:
        $ easydict lookup create

    \b
    Look up Chinese:
        $ easydict lookup 你好

    \b
    Save a word for later:
        $ easydict notebook add serendipity
    """
    ctx.ensure_object(dict)
    if data_dir:
        ctx.obj["data_dir"] = Path(data_dir)
    ctx.obj.setdefault("data_dir", DATA_DIR)


@cli.command(
    cls=HelpColorsCommand,
    help_headers_color='yellow',
    help_options_color='green'
)
@click.argument('query', nargs=-1, required=True)
@optgroup.group('Output Options', cls=OptionGroup)
@optgroup.option(
    '--wait-family/--no-wait-family',
    default=True,
    help='👪 Wait for the word family before printing'
)
@optgroup.option(
    '--json', 'as_json',
    is_flag=True,
    help='📊 Print the result as JSON'
)
@optgroup.group('Storage Options')
@optgroup.option(
    '--save',
    is_flag=True,
    help='📓 Add the word to the notebook'
)
@click.pass_context
def lookup(ctx: click.Context, query: tuple, wait_family: bool, as_json: bool, save: bool):
    """Look up an English or Chinese word or phrase."""
    text = " ".join(query)
    log.info(f"CLI lookup: {text}")
    try:
        result = asyncio.run(_run_lookup(ctx, text, wait_family))
    except DictionaryError as e:
        log.warning(f"Lookup failed for {text}: {e.kind.value}")
        _fail(e.user_message())
        return

    try:
        _history(ctx).add(result.word)
        if save:
            _notebook(ctx).add(result.word)
    except StorageError as e:
        click.echo(click.style(f"⚠️  {str(e)}", fg='yellow'), err=True)

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        render_result(result)


@cli.command()
@click.argument('word', nargs=-1, required=True)
@click.option(
    '--relation', '-r',
    type=click.Choice(['ml', 'syn', 'ant', 'trg']),
    default='ml',
    help='🔗 Relation: means-like, synonyms, antonyms or triggers'
)
@click.option('--max', 'max_results', type=click.IntRange(1, 100), default=10, help='🔢 Maximum number of words')
@click.pass_context
def related(ctx: click.Context, word: tuple, relation: str, max_results: int):
    """Show words related to WORD."""
    text = " ".join(word)
    try:
        words = asyncio.run(_run_related(ctx, text, relation, max_results))
    except DictionaryError as e:
        _fail(e.user_message())
        return
    if not words:
        click.echo("No related words found.")
        return
    for w in words:
        click.echo(w)


@cli.command()
@click.option('--clear', is_flag=True, help='🧹 Clear the search history')
@click.option('--remove', 'remove_word', help='➖ Remove one word from the history')
@click.pass_context
def history(ctx: click.Context, clear: bool, remove_word: Optional[str]):
    """Show or edit the search history."""
    store = _history(ctx)
    try:
        if clear:
            store.clear()
            click.echo("History cleared.")
            return
        if remove_word:
            if not store.remove(remove_word):
                _fail(f"'{remove_word}' is not in the history")
            click.echo(f"Removed '{remove_word}'.")
            return
    except StorageError as e:
        _fail(str(e))

    items = store.items()
    if not items:
        click.echo("No searches yet.")
        return
    for i, word in enumerate(items, 1):
        click.echo(f"{i:>2}. {word}")


@cli.group()
def notebook():
    """Manage saved words."""
    pass


@notebook.command('list')
@click.pass_context
def notebook_list(ctx: click.Context):
    """List saved words, newest first."""
    items = _notebook(ctx).items()
    if not items:
        click.echo("Notebook is empty.")
        return
    for i, word in enumerate(items, 1):
        click.echo(f"{i:>2}. {word}")


@notebook.command('add')
@click.argument('word', nargs=-1, required=True)
@click.pass_context
def notebook_add(ctx: click.Context, word: tuple):
    """Save WORD to the notebook."""
    text = " ".join(word)
    try:
        added = _notebook(ctx).add(text)
    except StorageError as e:
        _fail(str(e))
        return
    click.echo(f"Saved '{text}'." if added else f"'{text}' is already saved.")


@notebook.command('remove')
@click.argument('word', nargs=-1, required=True)
@click.pass_context
def notebook_remove(ctx: click.Context, word: tuple):
    """Remove WORD from the notebook."""
    text = " ".join(word)
    try:
        removed = _notebook(ctx).remove(text)
    except StorageError as e:
        _fail(str(e))
        return
    if not removed:
        _fail(f"'{text}' is not in the notebook")
    click.echo(f"Removed '{text}'.")


@notebook.command('move')
@click.argument('position', type=int)
@click.argument('new_position', type=int)
@click.pass_context
def notebook_move(ctx: click.Context, position: int, new_position: int):
    """Move the word at POSITION to NEW_POSITION (1-based)."""
    try:
        _notebook(ctx).move(position - 1, new_position - 1)
    except IndexError as e:
        _fail(str(e))
        return
    except StorageError as e:
        _fail(str(e))
        return
    click.echo(f"Moved word {position} to position {new_position}.")


@notebook.command('clear')
@click.confirmation_option(prompt='Remove every saved word?')
@click.pass_context
def notebook_clear(ctx: click.Context):
    """Remove every saved word."""
    try:
        _notebook(ctx).clear()
    except StorageError as e:
        _fail(str(e))
        return
    click.echo("Notebook cleared.")


@cli.command()
@click.argument('word', required=False)
@click.pass_context
def known(ctx: click.Context, word: Optional[str]):
    """Toggle WORD as known, or list known words."""
    store = _known(ctx)
    if not word:
        for w in store.items():
            click.echo(w)
        return
    try:
        is_known = store.toggle(word)
    except StorageError as e:
        _fail(str(e))
        return
    key = word.strip().lower()
    click.echo(f"Marked '{key}' as known." if is_known else f"Unmarked '{key}'.")


@cli.command()
def version():
    """Show the version of EasyDict."""
    click.echo(click.style(f"EasyDict v{__version__}", fg='blue'))
