import os
import json
import pandas as pd
from datetime import datetime
from typing import Any, Dict, List

from cuberoll.core.codec import encode_path, encode_world
from cuberoll.core.path import Path, directions
from cuberoll.core.world import World
from cuberoll.utils.display import format_path


class SessionLogger:
    def __init__(self, log_dir: str, session_name: str):
        """
        Initializes the logger for a play session.

        Args:
            log_dir (str): The base directory for logs.
            session_name (str): A name for the session, usually the level name.
        """
        self.timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.session_name = f"{session_name}_{self.timestamp}"
        self.run_dir = os.path.join(log_dir, self.session_name)
        self.logs = []

        os.makedirs(self.run_dir, exist_ok=True)

    def log_step(self, step: int, data: Dict[str, Any], verbose: bool = False):
        """
        Logs a single roll of the session.

        Args:
            step (int): The current step number.
            data (Dict[str, Any]): Data to log; a "world" entry is stored in wire format.
            verbose (bool): Whether to print step information to console.
        """
        log_entry = {"step": step, "timestamp": datetime.now().isoformat(), **data}

        if isinstance(log_entry.get("world"), World):
            log_entry["world"] = encode_world(log_entry["world"])

        if verbose:
            outcome = data.get("outcome", "unknown")
            direction = data.get("direction", "?")
            print(f"🎲 Step {step}: roll {direction} -> {outcome}")
            if data.get("violation"):
                print(f"  ❌ Rule: {data['violation']}")

        self.logs.append(log_entry)

    def save_logs(self) -> str:
        """Saves all collected logs to a JSON file and writes a summary."""
        log_file = os.path.join(self.run_dir, "session_log.json")
        with open(log_file, "w") as f:
            json.dump(self.logs, f, indent=2, default=str)

        summary_file = os.path.join(self.run_dir, "summary.txt")
        self._create_summary_file(summary_file)
        return log_file

    def _create_summary_file(self, summary_file: str):
        """Create a human-readable summary file."""
        rolls = [log for log in self.logs if log.get("direction")]
        rejected = [log for log in rolls if log.get("violation")]
        solved = any(log.get("outcome") == "RollAndSolve" for log in self.logs)

        with open(summary_file, "w") as f:
            f.write(f"Session Summary: {self.session_name}\n")
            f.write("=" * 60 + "\n")
            f.write(f"Rolls Attempted: {len(rolls)}\n")
            f.write(f"Rolls Rejected: {len(rejected)}\n")
            f.write(f"Solved: {solved}\n")
            f.write("\nStep-by-step breakdown:\n")
            f.write("-" * 30 + "\n")
            for log in self.logs:
                step = log.get("step", "?")
                line = f"Step {step}: {log.get('direction', '-')} -> {log.get('outcome', 'unknown')}"
                if log.get("violation"):
                    line += f" ({log['violation']})"
                f.write(line + "\n")


def solutions_table(solutions: List[Path]) -> pd.DataFrame:
    """One row per solution: its length, cells and roll sequence."""
    rows = []
    for i, path in enumerate(solutions, 1):
        rows.append({
            "Solution": i,
            "Length": path.length,
            "Start": f"({path.first_cell.x},{path.first_cell.y})",
            "Finish": f"({path.last.x},{path.last.y})",
            "Rolls": " ".join(d.value for d in directions(path)),
            "Cells": format_path(path),
        })
    return pd.DataFrame(rows, columns=["Solution", "Length", "Start", "Finish", "Rolls", "Cells"])


def export_solutions(solutions: List[Path], output_path: str, fmt: str = "csv") -> str:
    """
    Saves computed solutions to a table file.

    Args:
        solutions: Solution paths
        output_path: Output file path
        fmt: "csv", "excel" or "json"

    Returns:
        The path written
    """
    os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)
    if fmt == "csv":
        solutions_table(solutions).to_csv(output_path, index=False)
    elif fmt == "excel":
        solutions_table(solutions).to_excel(output_path, index=False)
    elif fmt == "json":
        with open(output_path, "w") as f:
            json.dump([encode_path(p) for p in solutions], f, indent=2)
    else:
        raise ValueError(f"Unknown export format '{fmt}'")
    return output_path
