"""
cli.py - command line interface for the frequency autocompleter

Commands:
 - complete WORDS QUERIES [-o OUT]   one result line per query
 - dictionary WORDS -o OUT           alphabetical `word,freq` file
 - shell WORDS                       interactive prefix lookups
Uses Rich for tables, prompts and error output.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table
from rich import box
from rich.markup import escape

from freq_autocompleter.core.autocompleter import Autocompleter, QueryMatch
from freq_autocompleter.core.frequency_table import FrequencyTable
from freq_autocompleter.utils.config_manager import Config, ConfigError
from freq_autocompleter.utils.logger_utils import configure_logging, time_block
from freq_autocompleter.utils.word_io import read_words, save_lines

# initialise console for rich output
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="freq-autocomplete",
        description="Rank word completions for prefixes by corpus frequency.",
    )
    p.add_argument("--config", default="config.json", help="JSON config file")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    p.add_argument("--max", type=int, default=None, dest="max_results",
                   help="completions per query (default from config)")
    sub = p.add_subparsers(dest="command", required=True)

    c = sub.add_parser("complete", help="answer every query in QUERIES")
    c.add_argument("words", help="delimited word list (corpus)")
    c.add_argument("queries", help="delimited prefix list")
    c.add_argument("-o", "--out", default=None, help="write result lines here")

    d = sub.add_parser("dictionary", help="write the alphabetical word,freq dictionary")
    d.add_argument("words", help="delimited word list (corpus)")
    d.add_argument("-o", "--out", required=True)

    s = sub.add_parser("shell", help="interactive lookups against WORDS")
    s.add_argument("words", help="delimited word list (corpus)")
    return p


def _make_completer(args, cfg: Config) -> Autocompleter:
    max_results = args.max_results if args.max_results is not None else cfg.get("max_suggestions")
    with time_block("build autocompleter"):
        words = read_words(args.words)
        return Autocompleter(words, max_results=max_results, float_format=cfg.get("float_format"))


def render_matches(prefix: str, matches: List[QueryMatch]) -> Table:
    table = Table(title=escape(f"'{prefix}'"), box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("word", style="cyan")
    table.add_column("freq", justify="right")
    table.add_column("probability", justify="right", style="green")
    for i, m in enumerate(matches, 1):
        table.add_row(str(i), m.word, str(m.frequency), f"{float(m.probability):.4f}")
    return table


def cmd_complete(args, cfg: Config) -> int:
    ac = _make_completer(args, cfg)
    queries = read_words(args.queries)
    with time_block(f"{len(queries)} queries"):
        lines = ac.complete(queries)
    if args.out:
        save_lines(lines, args.out)
        console.print(f"[green]wrote {len(lines)} result lines to {escape(str(args.out))}[/green]")
    else:
        for line in lines:
            console.print(line, markup=False, highlight=False, soft_wrap=True)
    return 0


def cmd_dictionary(args, cfg: Config) -> int:
    table = FrequencyTable.from_words(read_words(args.words))
    table.save(args.out)
    console.print(f"[green]wrote {len(table)} words to {escape(str(args.out))}[/green]")
    return 0


def cmd_shell(args, cfg: Config) -> int:
    ac = _make_completer(args, cfg)
    console.rule("[bold magenta]Frequency Autocompleter[/bold magenta]")
    console.print(f"[cyan]{len(ac.table)} distinct words loaded. Type a prefix, /quit to exit.[/cyan]")
    while True:
        try:
            prefix = Prompt.ask("[green]prefix[/green]", default="").strip().lower()
        except (EOFError, KeyboardInterrupt):
            break
        if prefix in ("/q", "/quit", "/exit"):
            break
        if not prefix:
            continue
        try:
            matches = ac.suggest(prefix)
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            continue
        if not matches:
            console.print(f"[yellow]no completions for '{escape(prefix)}'[/yellow]")
            continue
        console.print(render_matches(prefix, matches))
    console.print("bye.")
    return 0


COMMANDS = {
    "complete": cmd_complete,
    "dictionary": cmd_dictionary,
    "shell": cmd_shell,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = Config(args.config)
        if args.log_level:
            cfg.set("log_level", args.log_level.upper(), persist=False)
        if args.max_results is not None and args.max_results < 0:
            raise ConfigError("--max must be >= 0")
    except ConfigError as e:
        err_console.print(f"[red]config error:[/red] {escape(str(e))}")
        return 1
    configure_logging(cfg.get("log_level"), console=err_console)

    try:
        return COMMANDS[args.command](args, cfg)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        err_console.print(f"[red]error:[/red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
