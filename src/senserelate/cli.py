"""Command-line interface: disambiguate every word of a text file.

Usage:
    senserelate --context text.txt
    senserelate --context tagged.txt --type path --window 2 --trace 3
    senserelate --context text.txt --scheme sense1 --table senses.csv

Prints one line per sentence with every word replaced by its sense
("cat#n#1") or left as is when it cannot be disambiguated.
"""

import logging
from pathlib import Path

import typer
from tqdm import tqdm

from senserelate import __version__
from senserelate.config import Settings
from senserelate.constants import SCHEMES
from senserelate.text_io import TextLoadError, load_compounds, load_stoplist, read_contexts
from senserelate.wsd.annotate import rows_to_frame, sentence_rows
from senserelate.wsd.base import ConfigurationError
from senserelate.wsd.engine import SenseRelate
from senserelate.wsd.wordnet_backend import WordNetDatabase

logger = logging.getLogger(__name__)

app = typer.Typer(help="Disambiguate words by semantic relatedness (SenseRelate)")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"senserelate version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    context: Path = typer.Option(
        ...,
        "--context",
        "-c",
        help="File containing the text to disambiguate",
    ),
    scheme: str | None = typer.Option(
        None,
        "--scheme",
        help=f"Disambiguation scheme: {', '.join(SCHEMES)} (default: normal)",
    ),
    measure: str | None = typer.Option(
        None,
        "--type",
        "--measure",
        "-m",
        help="Relatedness measure: lesk, path, wup, lch, res, lin, jcn, random (default: lesk)",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file for the relatedness measure",
    ),
    compounds: Path | None = typer.Option(
        None,
        "--compounds",
        help="File of compound words, one per line",
    ),
    stoplist: Path | None = typer.Option(
        None,
        "--stoplist",
        help="File of regular expressions; matching words are not disambiguated",
    ),
    window: int | None = typer.Option(
        None,
        "--window",
        "-w",
        min=0,
        help="Number of words on each side of the target (default: 3)",
    ),
    pair_score: float | None = typer.Option(
        None,
        "--pair-score",
        "--pairScore",
        help="Minimum pairwise score used in a sense's total (default: 0)",
    ),
    context_score: float | None = typer.Option(
        None,
        "--context-score",
        "--contextScore",
        help="Minimum total score a winning sense must reach (default: 0)",
    ),
    boundary: bool | None = typer.Option(
        None,
        "--boundary/--no-boundary",
        help="Detect sentence boundaries (default: only for untagged text)",
    ),
    forcepos: bool = typer.Option(
        False,
        "--forcepos",
        help="Coerce context words to the part of speech of the target",
    ),
    trace: int | None = typer.Option(
        None,
        "--trace",
        "-t",
        help="Trace level: 1 windows, 2 winning scores, 4 all scores, 8 measure traces (add up)",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        "-s",
        help="Only print the results",
    ),
    outfile: Path | None = typer.Option(
        None,
        "--outfile",
        "-o",
        help="Also write one formatted line per word to this file",
    ),
    table: Path | None = typer.Option(
        None,
        "--table",
        help="Write a CSV table with one row per word",
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Random seed for the sense1 and random schemes",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Disambiguate every word of a text file."""
    logging.basicConfig(
        level=logging.WARNING if silent else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    scheme = scheme or settings.scheme
    if scheme not in SCHEMES:
        typer.echo(f"Error: unknown scheme {scheme!r}; choose one of: {', '.join(SCHEMES)}", err=True)
        raise typer.Exit(1)
    measure = measure or settings.measure
    window = settings.window if window is None else window
    pair_score = settings.pair_score if pair_score is None else pair_score
    context_score = settings.context_score if context_score is None else context_score
    trace = settings.trace if trace is None else trace

    try:
        sentences, tagged = read_contexts(context, boundary)
    except (FileNotFoundError, TextLoadError) as exc:
        typer.echo(f"Error: cannot read context file {context}: {exc}", err=True)
        raise typer.Exit(1) from exc

    if not silent:
        _print_configuration(
            context=context,
            scheme=scheme,
            tagged=tagged,
            measure=measure,
            window=window,
            context_score=context_score,
            pair_score=pair_score,
            config=config,
            compounds=compounds,
            stoplist=stoplist,
            trace=trace,
            boundary=not tagged if boundary is None else boundary,
        )

    try:
        engine = SenseRelate(
            WordNetDatabase(),
            measure,
            config=config,
            compounds=load_compounds(compounds) if compounds else None,
            stoplist=load_stoplist(stoplist) if stoplist else None,
            outfile=outfile,
            pair_score=pair_score,
            context_score=context_score,
            trace=trace,
            forcepos=forcepos,
            seed=seed,
        )
    except ConfigurationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    rows = []
    for sentence_id, sentence in enumerate(
        tqdm(sentences, desc="Disambiguating", unit="sentence", disable=silent)
    ):
        results = engine.disambiguate_senses(sentence, window=window, tagged=tagged, scheme=scheme)
        engine.write_results(sentence, results)
        typer.echo(" ".join(str(result) for result in results))

        if engine.trace_level:
            typer.echo(engine.drain_trace(), nl=False)

        if table is not None:
            rows.extend(sentence_rows(sentence_id, sentence, results))

    if table is not None:
        table.parent.mkdir(parents=True, exist_ok=True)
        rows_to_frame(rows).to_csv(table, index=False)
        logger.info(f"Wrote {len(rows)} rows to {table}")


def _print_configuration(**values) -> None:
    typer.echo("Current configuration:", err=True)
    labels = {
        "context": "context file",
        "scheme": "scheme",
        "tagged": "tagged text",
        "measure": "measure",
        "window": "window",
        "context_score": "contextScore",
        "pair_score": "pairScore",
        "config": "measure config",
        "compounds": "compound file",
        "stoplist": "stoplist",
        "trace": "trace",
        "boundary": "boundary",
    }
    for key, label in labels.items():
        value = values[key]
        if isinstance(value, bool):
            shown = "yes" if value else "no"
            if key == "boundary":
                shown = "detect" if value else "assume"
        elif value is None:
            shown = "(none)"
        elif key == "trace" and not value:
            shown = "no"
        else:
            shown = value
        typer.echo(f"    {label:<14}: {shown}", err=True)


if __name__ == "__main__":
    app()
