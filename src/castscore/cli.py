"""CLI entry point for Castscore."""

import json
import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from castscore.catalog import CatalogSnapshot, Channel, load_snapshot
from castscore.config.defaults import get_default_config_content
from castscore.config.logging import setup_logging
from castscore.config.manager import ConfigManager
from castscore.config.schema import GlobalConfig
from castscore.relevance import ContextSelector, KeywordExpander
from castscore.scoring import (
    OptimizationEngine,
    ScoreResult,
    build_report,
    estimate_transcript_cost,
)
from castscore.scoring.ranker import top
from castscore.ui import get_theme
from castscore.utils.errors import (
    CastscoreError,
    ChannelNotFoundError,
    ConfigError,
    ValidationError,
)

app = typer.Typer(
    name="castscore",
    help="Score podcast and video episodes and build grounding context for questions",
    no_args_is_help=True,
)
config_app = typer.Typer(name="config", help="Show or initialize configuration")
app.add_typer(config_app)

console = Console()

SnapshotArg = Annotated[
    Path, typer.Argument(help="Catalog snapshot file (JSON or YAML)")
]
ChannelOpt = Annotated[str, typer.Option("--channel", "-c", help="Channel identifier")]
JsonOpt = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
    config_dir: Path | None = typer.Option(
        None, "--config-dir", help="Configuration directory (defaults to the XDG config dir)"
    ),
) -> None:
    """Castscore - find the episodes that need work and ground questions in a catalog."""
    # Initialize logging before any command runs
    setup_logging(verbose=verbose, log_file=log_file)
    ctx.obj = {"verbose": verbose, "log_file": log_file, "config_dir": config_dir}


def _load_config(ctx: typer.Context) -> GlobalConfig:
    options = ctx.obj or {}
    config = ConfigManager(options.get("config_dir")).load_config()
    if not options.get("verbose"):
        setup_logging(log_file=options.get("log_file"), level=config.log_level)
    return config


def _require_channel(snapshot: CatalogSnapshot, channel_id: str) -> Channel:
    channel = snapshot.get_channel(channel_id)
    if channel is None:
        raise ChannelNotFoundError(f"Channel '{channel_id}' not found in snapshot")
    return channel


def _fail(message: str, suggestion: str | None = None) -> None:
    theme = get_theme()
    console.print(theme.error_text(escape(message)))
    if suggestion:
        console.print(theme.muted_text(f"  {escape(suggestion)}"))
    sys.exit(1)


def _result_to_dict(result: ScoreResult) -> dict[str, Any]:
    data: dict[str, Any] = {
        "episode_id": result.episode.id,
        "title": result.episode.title,
        "score": result.score,
        "stars": result.stars,
        "improvement_potential": result.improvement_potential,
        "issues": [issue.model_dump(mode="json") for issue in result.issues],
    }
    if result.channel is not None:
        data["channel"] = {"id": result.channel.id, "name": result.channel.name}
    return data


def _results_table(title: str, results: list[ScoreResult], show_channel: bool) -> Table:
    theme = get_theme()
    table = Table(title=title, show_lines=True, header_style=theme.table_header)
    table.add_column("#", style="dim", width=4)
    if show_channel:
        table.add_column("Channel", style="cyan", max_width=24)
    table.add_column("Title", max_width=50)
    table.add_column("Rating", no_wrap=True)
    table.add_column("Score", justify="right")
    if show_channel:
        table.add_column("Potential", justify="right")
    table.add_column("Issues")

    for i, result in enumerate(results, 1):
        issues = "\n".join(
            f"[{theme.severity_color(issue.severity)}]{issue.category}[/]: {escape(issue.message)}"
            for issue in result.issues
        )
        row = [str(i)]
        if show_channel:
            row.append(escape(result.channel.name if result.channel else "-"))
        row.extend([escape(result.episode.title), theme.stars_text(result.stars), f"{result.score}%"])
        if show_channel:
            row.append(theme.potential_text(result.improvement_potential))
        row.append(issues or theme.muted_text("none"))
        table.add_row(*row)

    return table


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from castscore import __version__

    console.print(f"[bold cyan]Castscore[/bold cyan] v{__version__}")


@app.command("score")
def score_channel(
    ctx: typer.Context,
    snapshot_path: SnapshotArg,
    channel_id: ChannelOpt,
    include_excluded: Annotated[
        bool, typer.Option("--include-excluded", help="Also score excluded episodes")
    ] = False,
    limit: Annotated[
        int | None, typer.Option("--limit", "-n", help="Show at most N episodes", min=1)
    ] = None,
    json_output: JsonOpt = False,
) -> None:
    """Score one channel's episodes, lowest score first.

    Examples:
        castscore score catalog.json --channel my-podcast

        castscore score catalog.yaml -c my-podcast --include-excluded --json
    """
    try:
        config = _load_config(ctx)
        snapshot = load_snapshot(snapshot_path)
        channel = _require_channel(snapshot, channel_id)

        engine = OptimizationEngine(config)
        results = engine.channel_view(
            channel, snapshot.episodes_for(channel.id), include_excluded=include_excluded
        )
        report = build_report(results)
        shown = top(results, limit)

        if json_output:
            payload = {
                "channel": channel.id,
                "average_score": round(report.average_score, 1),
                "episode_count": report.episode_count,
                "transcript_coverage": round(report.transcript_coverage, 3),
                "results": [_result_to_dict(r) for r in shown],
            }
            print(json.dumps(payload, indent=2))
            return

        if not results:
            console.print(f"[yellow]No episodes to score for {escape(channel.name)}.[/yellow]")
            return

        console.print(_results_table(f"Optimization: {escape(channel.name)}", shown, False))
        counts = ", ".join(
            f"{count} {severity.value}" for severity, count in report.issue_counts.items()
        )
        console.print(
            f"\n[bold]Average score:[/bold] {round(report.average_score)}%  "
            f"[bold]Transcripts:[/bold] {report.transcript_count}/{report.episode_count}  "
            f"[bold]Issues:[/bold] {counts}"
        )

    except ValidationError as e:
        _fail(str(e), e.suggestion)
    except ConfigError as e:
        _fail(str(e))
    except CastscoreError as e:
        _fail(f"Error: {e}")


@app.command("rank")
def rank_global(
    ctx: typer.Context,
    snapshot_path: SnapshotArg,
    limit: Annotated[
        int | None, typer.Option("--limit", "-n", help="Show at most N episodes", min=1)
    ] = 20,
    json_output: JsonOpt = False,
) -> None:
    """Rank episodes across all channels by improvement potential."""
    try:
        config = _load_config(ctx)
        snapshot = load_snapshot(snapshot_path)

        engine = OptimizationEngine(config)
        results = engine.global_view(snapshot.channels, snapshot.episodes)
        shown = top(results, limit)

        if json_output:
            payload = {
                "total": len(results),
                "results": [_result_to_dict(r) for r in shown],
            }
            print(json.dumps(payload, indent=2))
            return

        if not results:
            console.print("[yellow]No episodes to rank.[/yellow]")
            return

        console.print(_results_table("Global optimization priorities", shown, True))
        console.print(f"\n[dim]Showing {len(shown)} of {len(results)} episode(s)[/dim]")

    except ConfigError as e:
        _fail(str(e))
    except CastscoreError as e:
        _fail(f"Error: {e}")


@app.command("context")
def build_context(
    ctx: typer.Context,
    snapshot_path: SnapshotArg,
    question: Annotated[str, typer.Argument(help="Question to ground")],
    channel_id: ChannelOpt,
    json_output: JsonOpt = False,
) -> None:
    """Build the grounding context for a question about one channel.

    Examples:
        castscore context catalog.json "Which guests talked about weddings?" -c my-podcast
    """
    try:
        if not question.strip():
            raise ValidationError(
                "Question must not be empty", suggestion="Ask something about the channel"
            )

        config = _load_config(ctx)
        snapshot = load_snapshot(snapshot_path)
        channel = _require_channel(snapshot, channel_id)
        episodes = snapshot.episodes_for(channel.id)

        keywords = KeywordExpander(config.vocabulary).expand(question)
        selector = ContextSelector(policy=config.selection, vocabulary=config.vocabulary)
        document = selector.select(channel, episodes, keywords)

        if json_output:
            payload = document.model_dump(mode="json")
            payload["selected_count"] = document.selected_count
            print(json.dumps(payload, indent=2))
            return

        if not document.has_grounding:
            console.print(f"[yellow]No episodes available for {escape(channel.name)}.[/yellow]")
            return

        # Plain print keeps the prompt text free of rich markup processing
        print(document.to_prompt_context())

    except ValidationError as e:
        _fail(str(e), e.suggestion)
    except ConfigError as e:
        _fail(str(e))
    except CastscoreError as e:
        _fail(f"Error: {e}")


@app.command("costs")
def transcript_costs(
    ctx: typer.Context,
    snapshot_path: SnapshotArg,
    channel_id: ChannelOpt,
    json_output: JsonOpt = False,
) -> None:
    """Estimate transcription costs for episodes without a transcript."""
    try:
        _load_config(ctx)
        snapshot = load_snapshot(snapshot_path)
        channel = _require_channel(snapshot, channel_id)

        missing = [
            ep
            for ep in snapshot.episodes_for(channel.id)
            if not ep.has_transcript and not ep.excluded
        ]
        estimates = [(ep, estimate_transcript_cost(ep)) for ep in missing]
        total = sum(estimate.cost_usd for _, estimate in estimates)

        if json_output:
            payload = {
                "channel": channel.id,
                "episodes": [
                    {
                        "episode_id": ep.id,
                        "title": ep.title,
                        "minutes": estimate.minutes,
                        "cost_usd": round(estimate.cost_usd, 4),
                        "estimated": estimate.estimated,
                    }
                    for ep, estimate in estimates
                ],
                "total_cost_usd": round(total, 4),
            }
            print(json.dumps(payload, indent=2))
            return

        if not estimates:
            console.print(get_theme().success_text("Every episode has a transcript."))
            return

        table = Table(title=f"Transcript costs: {escape(channel.name)}")
        table.add_column("Title", style="cyan", max_width=60)
        table.add_column("Minutes", justify="right")
        table.add_column("Cost", justify="right", style="yellow")
        for ep, estimate in estimates:
            table.add_row(escape(ep.title), str(estimate.minutes), estimate.formatted)
        console.print(table)
        console.print(f"\n[bold]Total:[/bold] ${total:.3f}")

    except ConfigError as e:
        _fail(str(e))
    except CastscoreError as e:
        _fail(f"Error: {e}")


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show the active configuration as YAML."""
    import yaml

    try:
        config = _load_config(ctx)
    except ConfigError as e:
        _fail(str(e))
        return
    print(yaml.safe_dump(config.model_dump(mode="json"), default_flow_style=False, sort_keys=False))


@config_app.command("init")
def config_init(
    ctx: typer.Context,
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing file")] = False,
) -> None:
    """Write the default configuration file."""
    manager = ConfigManager((ctx.obj or {}).get("config_dir"))
    if manager.config_file.exists() and not force:
        _fail(
            f"Config already exists at {manager.config_file}",
            "Use --force to overwrite it",
        )
        return

    manager.config_dir.mkdir(parents=True, exist_ok=True)
    manager.config_file.write_text(get_default_config_content())
    console.print(get_theme().success_text(f"Wrote {escape(str(manager.config_file))}"))


if __name__ == "__main__":
    app()
