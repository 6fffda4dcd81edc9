from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from tidyviz.aggregation import (
    decade_pass_rates,
    outcome_counts,
    rating_summary_stats,
    year_summaries,
    yearly_outcome_counts,
)
from tidyviz.datahub import load_bechdel_movies, load_bechdel_ratings
from tidyviz.datahub.config import DEFAULT_OUTPUT_ROOT, DEFAULT_RAW_ROOT
from tidyviz.encoding import GlyphConfig, GlyphStyle, encode_years
from experiments.plots import (
    PlotSaveConfig,
    plot_bechdel_digits,
    plot_decade_pass_rates,
    plot_yearly_outcomes,
)

# 13 x 8 inches at 320 dpi.
DIGITS_WIDTH = 1300
DIGITS_HEIGHT = 800
DIGITS_SCALE = 3.2


def run_bechdel_exploratory(
    raw_root: Path = DEFAULT_RAW_ROOT,
    save_config: Optional[PlotSaveConfig] = None,
    export_dir: Optional[Path] = None,
) -> Dict[str, pd.DataFrame]:
    """Print outcome counts, chart yearly/decade trends and export the summary tables."""
    print("[bechdel] Loading ratings and movies.")
    ratings = load_bechdel_ratings(raw_root)
    movies = load_bechdel_movies(raw_root)

    counts = outcome_counts(movies)
    print(counts.to_string(index=False))

    yearly = yearly_outcome_counts(movies)
    decades = decade_pass_rates(movies)
    stats = rating_summary_stats(ratings)
    print(stats.to_string(index=False))

    plot_yearly_outcomes(yearly, save_to=save_config.for_plot("yearly_outcomes") if save_config else None)
    plot_decade_pass_rates(decades, save_to=save_config.for_plot("decade_pass_rates") if save_config else None)

    if export_dir is None:
        export_dir = save_config.base_dir / save_config.run_tag if save_config else DEFAULT_OUTPUT_ROOT
    export_dir.mkdir(parents=True, exist_ok=True)
    decades.to_csv(export_dir / "bechdel_by_decade.csv", index=False)
    stats.to_csv(export_dir / "bechdel_yearly_stats.csv", index=False)
    print(f"[bechdel] Exported decade and yearly tables to {export_dir}")

    return {"outcomes": counts, "yearly": yearly, "decades": decades, "stats": stats}


def run_bechdel_digits(
    raw_root: Path = DEFAULT_RAW_ROOT,
    save_config: Optional[PlotSaveConfig] = None,
    glyph_config: GlyphConfig = GlyphConfig(),
    skip_invalid: bool = False,
) -> List[GlyphStyle]:
    """Encode every year's median rating into its digits and draw the decade grid."""
    ratings = load_bechdel_ratings(raw_root)
    summaries = year_summaries(ratings)
    print(f"[bechdel] Summarised {len(ratings)} films across {len(summaries)} years.")

    glyphs = encode_years(summaries, glyph_config, skip_invalid=skip_invalid)
    print(f"[bechdel] Encoded {len(glyphs)} glyphs.")

    save_to = (
        save_config.for_plot("bechdel-test", width=DIGITS_WIDTH, height=DIGITS_HEIGHT, scale=DIGITS_SCALE)
        if save_config
        else None
    )
    plot_bechdel_digits(glyphs, glyph_config, n_films=len(ratings), save_to=save_to)
    return glyphs


__all__ = ["run_bechdel_digits", "run_bechdel_exploratory"]
