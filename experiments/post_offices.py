from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from tidyviz.aggregation import (
    annual_counts,
    clean_post_offices,
    density_per_million,
    exclude_states,
    expand_active_years,
    historical_density,
    state_annual_counts,
    state_counts_for_year,
)
from tidyviz.datahub import load_post_offices, load_state_populations
from tidyviz.datahub.config import DEFAULT_OUTPUT_ROOT, DEFAULT_RAW_ROOT
from experiments.plots import (
    PlotSaveConfig,
    plot_annual_post_offices,
    plot_historical_density,
    plot_office_density,
    plot_state_choropleth,
    plot_state_post_offices,
    render_office_animation,
)

COUNT_MIDPOINT = 750
DENSITY_MIDPOINT = 250
HISTORICAL_MIDPOINT = 3000
# Offices still open are expanded through this year; the count map shows it.
OPEN_UNTIL = 2003


def run_post_offices(
    raw_root: Path = DEFAULT_RAW_ROOT,
    save_config: Optional[PlotSaveConfig] = None,
    population_csv: Optional[Path] = None,
    animate: bool = False,
    snapshot_year: int = 2000,
    density_year: int = 1900,
    frames: int = 100,
    fps: int = 5,
) -> Dict[str, pd.DataFrame]:
    """
    Chart post office coverage over time.

    The per-capita maps need a state population table and are skipped
    without one. The GIF is only rendered when ``animate`` is set since it
    renders every frame through Kaleido.
    """
    print("[post-offices] Loading post offices.")
    offices = clean_post_offices(load_post_offices(raw_root))
    office_years = expand_active_years(offices, open_until=OPEN_UNTIL)
    print(f"[post-offices] Expanded {len(offices)} offices into {len(office_years)} office-years.")

    def dest(slug: str):
        return save_config.for_plot(slug) if save_config else None

    annual = annual_counts(office_years)
    by_state = state_annual_counts(office_years)
    plot_annual_post_offices(annual, save_to=dest("annual_post_offices"))
    plot_state_post_offices(by_state, save_to=dest("state_post_offices"))

    latest = state_counts_for_year(office_years, OPEN_UNTIL)
    plot_state_choropleth(
        latest,
        "n",
        COUNT_MIDPOINT,
        f"Post offices by state ({OPEN_UNTIL})",
        "# of PO",
        save_to=dest("state_counts"),
    )

    results: Dict[str, pd.DataFrame] = {"annual": annual, "by_state": by_state, "latest": latest}

    if population_csv is not None:
        populations = load_state_populations(population_csv)
        density = density_per_million(office_years, populations, snapshot_year)
        plot_state_choropleth(
            density,
            "po_density",
            DENSITY_MIDPOINT,
            f"Post offices per million people ({snapshot_year})",
            "PO per million people",
            save_to=dest("state_density"),
        )
        history = historical_density(office_years, populations)
        plot_historical_density(history, HISTORICAL_MIDPOINT, save_to=dest("historical_density"))
        results.update({"density": density, "history": history})
    else:
        print("[post-offices] No population table supplied; skipping per-capita maps.")

    contiguous = exclude_states(office_years)
    plot_office_density(
        contiguous[contiguous["year"] == density_year],
        density_year,
        save_to=dest(f"office_density_{density_year}"),
    )

    if animate:
        gif_dir = save_config.base_dir / save_config.run_tag if save_config else DEFAULT_OUTPUT_ROOT
        gif_path = render_office_animation(
            contiguous,
            gif_dir / "post_office_evolution.gif",
            frames=frames,
            fps=fps,
        )
        print(f"[post-offices] Saved animation to {gif_path}")

    return results


__all__ = ["run_post_offices"]
