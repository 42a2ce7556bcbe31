# backend/infra_resilience/run_event_matrix.py

from __future__ import annotations
import os
from typing import List

import pandas as pd

from .config import DEFAULT_SEVERITIES, EVENT_TYPES
from .experiments import run_severity_sweep
from .graph_loader import load_seed_graph


def run_event_matrix(
    event_types: List[str] | None = None,
    severities: List[int] | None = None,
    seed_path: str | None = None,
    output_csv: str = "outputs/event_matrix.csv",
) -> pd.DataFrame:
    """
    Run every event type at every severity against the seed graph and save
    one row per (event, severity) to CSV.
    """
    if event_types is None:
        event_types = EVENT_TYPES
    if severities is None:
        severities = DEFAULT_SEVERITIES

    out_dir = os.path.dirname(output_csv)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    snapshot = load_seed_graph(seed_path)
    frames = []
    for event_type in event_types:
        print(f"Running: {event_type} | severities={severities}")
        frames.append(run_severity_sweep(event_type, severities, snapshot=snapshot))

    df = pd.concat(frames, ignore_index=True)
    df.to_csv(output_csv, index=False)
    print(f"Saved results to {output_csv}")
    return df


if __name__ == "__main__":
    run_event_matrix()
