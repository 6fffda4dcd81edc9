from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from experiments.bechdel import run_bechdel_digits, run_bechdel_exploratory
from experiments.plots import PlotSaveConfig
from experiments.post_offices import run_post_offices
from tidyviz.datahub import DataRequest, prepare_datasets
from tidyviz.encoding import GlyphConfig

app = typer.Typer()


def _save_config(
    plots_root: Optional[Path],
    plots_tag: Optional[str],
    chart: str,
    save_static: bool,
    save_html: bool,
) -> Optional[PlotSaveConfig]:
    if not plots_root:
        return None
    tag = plots_tag or datetime.utcnow().strftime("%Y%m%d-%H%M%S")
    base_dir = plots_root / chart
    print(f"[plots] Saving figures under {base_dir / tag}")
    return PlotSaveConfig(base_dir=base_dir, run_tag=tag, save_static=save_static, save_html=save_html)


RAW_ROOT_OPTION = typer.Option(
    Path("data/raw"),
    "--raw-root",
    exists=False,
    file_okay=False,
    dir_okay=True,
    help="Directory holding the downloaded CSV files.",
)
PLOTS_ROOT_OPTION = typer.Option(
    None,
    "--plots-root",
    help="Directory where plots should be saved (subfolders are created automatically).",
)
PLOTS_TAG_OPTION = typer.Option(
    None,
    "--plots-tag",
    help="Folder suffix for this run (defaults to timestamp).",
)


@app.command("datahub")
def datahub(
    all: bool = typer.Option(False, "--all", help="Download every dataset."),
    bechdel: bool = typer.Option(False, "--bechdel", help="Download the Bechdel Test dataset."),
    post_offices: bool = typer.Option(False, "--post-offices", help="Download the US Post Offices dataset."),
    force: bool = typer.Option(False, "--force", help="Redownload even if files exist."),
    raw_root: Path = typer.Option(
        Path("data/raw"),
        "--raw-root",
        exists=False,
        file_okay=False,
        dir_okay=True,
        writable=True,
        help="Directory to store raw CSV files.",
    ),
) -> None:
    """
    Download the requested TidyTuesday datasets into the raw cache.
    """
    try:
        request = DataRequest.from_flags(all=all, bechdel=bechdel, post_offices=post_offices)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    prepare_datasets(request, raw_root=raw_root, force=force)


@app.command("bechdel")
def bechdel(
    raw_root: Path = RAW_ROOT_OPTION,
    plots_root: Optional[Path] = PLOTS_ROOT_OPTION,
    plots_tag: Optional[str] = PLOTS_TAG_OPTION,
    font: str = typer.Option("JetBrains Mono", "--font", help="Font family for the year digits."),
    offset_increment: float = typer.Option(
        0.04,
        "--offset-increment",
        help="Extra horizontal gap after each bold digit.",
    ),
    skip_invalid: bool = typer.Option(
        False,
        "--skip-invalid",
        help="Skip years whose summary cannot be encoded instead of aborting.",
    ),
    save_static: bool = typer.Option(True, help="Write static PNG snapshots when saving plots."),
    save_html: bool = typer.Option(True, help="Write interactive HTML plots when saving."),
) -> None:
    """Draw the year-digit chart of median Bechdel ratings."""
    glyph_config = GlyphConfig(base_font=font, offset_increment=offset_increment)
    try:
        glyph_config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    save_config = _save_config(plots_root, plots_tag, "bechdel", save_static, save_html)
    run_bechdel_digits(raw_root, save_config, glyph_config, skip_invalid=skip_invalid)


@app.command("bechdel-explore")
def bechdel_explore(
    raw_root: Path = RAW_ROOT_OPTION,
    plots_root: Optional[Path] = PLOTS_ROOT_OPTION,
    plots_tag: Optional[str] = PLOTS_TAG_OPTION,
    save_static: bool = typer.Option(True, help="Write static PNG snapshots when saving plots."),
    save_html: bool = typer.Option(True, help="Write interactive HTML plots when saving."),
) -> None:
    """Print Bechdel outcome counts, chart yearly/decade trends and export summary CSVs."""
    save_config = _save_config(plots_root, plots_tag, "bechdel_exploratory", save_static, save_html)
    run_bechdel_exploratory(raw_root, save_config)


@app.command("post-offices")
def post_offices(
    raw_root: Path = RAW_ROOT_OPTION,
    plots_root: Optional[Path] = PLOTS_ROOT_OPTION,
    plots_tag: Optional[str] = PLOTS_TAG_OPTION,
    population_csv: Optional[Path] = typer.Option(
        None,
        "--population-csv",
        exists=True,
        dir_okay=False,
        help="CSV with year, state, population columns; enables the per-capita maps.",
    ),
    animate: bool = typer.Option(False, "--animate", help="Render the post office GIF."),
    frames: int = typer.Option(100, "--frames", help="Number of GIF frames."),
    fps: int = typer.Option(5, "--fps", help="GIF frames per second."),
    snapshot_year: int = typer.Option(2000, "--snapshot-year", help="Year for the per-capita map."),
    density_year: int = typer.Option(1900, "--density-year", help="Year for the location density map."),
    save_static: bool = typer.Option(True, help="Write static PNG snapshots when saving plots."),
    save_html: bool = typer.Option(True, help="Write interactive HTML plots when saving."),
) -> None:
    """Chart US post office coverage, optionally per capita and animated."""
    save_config = _save_config(plots_root, plots_tag, "post_offices", save_static, save_html)
    run_post_offices(
        raw_root,
        save_config,
        population_csv=population_csv,
        animate=animate,
        snapshot_year=snapshot_year,
        density_year=density_year,
        frames=frames,
        fps=fps,
    )


if __name__ == "__main__":
    app()
