# civra/cli.py
"""
civra CLI entry point: inspect LLM responses and context selections from
the terminal. Nothing here applies operations to a project.
"""
import json
from pathlib import Path
from typing import List

import click
import yaml

from civra import __version__
from civra.core.config import CONFIG_FILE, build_context_manager, default_config_yaml, load_config
from civra.core.models import FileOperation, OperationType
from civra.core.parser import extract_clean_messages, extract_text_content, parse_response
from civra.core.utils import read_context_files
from civra.utils.console import (
    console, info, success, warning, error, heading, plain,
    confirm, print_table, setup_logging, show_welcome
)
from civracontext import ContextRequest, ConversationMessage, build_file_context

# ------------------------------
# CLI main entry
# ------------------------------

@click.group(invoke_without_command=True)
@click.version_option(__version__, message="civra v%(version)s")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, verbose: bool):
    """🤖 civra - LLM response parser & context selector"""
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        show_welcome()
        click.echo(ctx.get_help())

# ------------------------------
# Command 1: init
# ------------------------------

@cli.command()
@click.option("--force", is_flag=True, help="Overwrite an existing config without asking")
def init(force: bool):
    """🔧 Write the default .civra/config.yaml"""
    heading("Project Initialization")
    if CONFIG_FILE.exists() and not force:
        if not confirm(f"{CONFIG_FILE} already exists. Overwrite?", default=False):
            info("Cancelled.")
            return
    try:
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_FILE.write_text(default_config_yaml(), encoding="utf-8")
    except OSError as e:
        error(f"Failed to write {CONFIG_FILE}: {e}")
        raise click.Abort()
    success(f"Generated: {CONFIG_FILE}")

# ------------------------------
# Response commands: parse / text / messages
# ------------------------------

def _describe(op: FileOperation) -> str:
    if op.type is OperationType.WRITE:
        return f"{op.file_path} ({len(op.content)} chars)"
    if op.type is OperationType.DELETE:
        return op.file_path
    if op.type is OperationType.RENAME:
        return f"{op.original_path} -> {op.new_path}"
    return op.package_name


@cli.command()
@click.argument("response_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--json", "as_json", is_flag=True, help="Print the parsed response as JSON")
def parse(response_file, as_json: bool):
    """🧩 Parse file operations out of an LLM response (file or stdin)"""
    parsed = parse_response(response_file.read())

    if as_json:
        click.echo(json.dumps(parsed.to_dict(), indent=2, ensure_ascii=False))
        return

    heading("Parsed Response")
    if parsed.explanation:
        console.print("[bold cyan]### Explanation[/bold cyan]")
        plain(parsed.explanation)

    if parsed.code_block is None:
        info("No command block found; the response is plain conversation.")
        return

    if parsed.has_operations:
        rows = [(i, op.type.value, _describe(op)) for i, op in enumerate(parsed.operations, 1)]
        print_table(rows, headers=["#", "Type", "Target"], title=f"📋 {len(rows)} operation(s)")
    else:
        warning("Command block found but no operations could be parsed.")

    if parsed.summary:
        console.print("[bold cyan]### Summary[/bold cyan]")
        plain(parsed.summary)


@cli.command()
@click.argument("response_file", type=click.File("r", encoding="utf-8"), default="-")
def text(response_file):
    """📝 Print a response with all command markup removed"""
    click.echo(extract_text_content(response_file.read()))


@cli.command()
@click.argument("response_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--json", "as_json", is_flag=True, help="Print the messages as a JSON list")
def messages(response_file, as_json: bool):
    """💬 Print the chat messages around the command block"""
    clean_messages = extract_clean_messages(response_file.read())
    if as_json:
        click.echo(json.dumps(clean_messages, indent=2, ensure_ascii=False))
        return
    if not clean_messages:
        info("Response has no message text.")
        return
    for i, message in enumerate(clean_messages, 1):
        console.rule(f"message {i}")
        plain(message)

# ------------------------------
# Command: context
# ------------------------------

def _load_history(history_file: Path) -> List[ConversationMessage]:
    """Load a JSON or YAML list of {role, content} mappings."""
    try:
        with open(history_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or []
    except yaml.YAMLError as e:
        error(f"Failed to read history file {history_file}: {e}")
        raise click.Abort()

    if not isinstance(data, list):
        error(f"History file {history_file} must contain a list of messages.")
        raise click.Abort()
    try:
        return [ConversationMessage.from_dict(item) for item in data]
    except ValueError as e:
        error(f"Invalid message in {history_file}: {e}")
        raise click.Abort()


@cli.command()
@click.argument("message")
@click.option("--history", "history_file", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="JSON/YAML list of previous {role, content} messages")
@click.option("--root", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".",
              help="Project root used to read files for --render")
@click.option("--config", "config_file", type=click.Path(dir_okay=False, path_type=Path), default=str(CONFIG_FILE),
              help="Config file overriding the selector defaults")
@click.option("--render", is_flag=True, help="Print the prompt context block for the selected files")
@click.option("--json", "as_json", is_flag=True, help="Print the selection as JSON")
def context(message: str, history_file: Path, root: Path, config_file: Path, render: bool, as_json: bool):
    """📚 Show which files belong in the next prompt for MESSAGE"""
    try:
        config = load_config(config_file)
    except (RuntimeError, ValueError) as e:
        error(f"Failed to load {config_file}: {e}")
        raise click.Abort()

    history = _load_history(history_file) if history_file else []
    request = ContextRequest(message=message, conversation_history=history,
                             history_window=config.history_window)
    selection = build_context_manager(config).get_context(request)

    contents = read_context_files(root, selection.paths) if render else {}

    if as_json:
        payload = {"paths": selection.paths, "diagnostics": selection.provider_diagnostics}
        if render:
            payload["context"] = build_file_context(contents)
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    if render:
        missing = [p for p in selection.paths if p not in contents]
        if missing:
            warning(f"{len(missing)} selected file(s) not found under {root}: {', '.join(missing)}")
        click.echo(build_file_context(contents))
        return

    heading("Context Selection")
    rows = [(i, path, "yes" if (root / path).is_file() else "no") for i, path in enumerate(selection.paths, 1)]
    print_table(rows, headers=["#", "Path", "Exists"], title=f"📋 {len(rows)} file(s)")
