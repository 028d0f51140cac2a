"""
lowpass - Command-line signal smoother

Reads a recorded signal from CSV, runs it sample-by-sample through a
configured low-pass filter and writes the filtered rows.

Column count follows the value type:
    scalar      1 column
    vector3     3 columns (x, y, z)
    quaternion  4 columns (w, x, y, z)

A non-numeric first row is treated as a header and skipped.

Usage:
    python -m lowpass.main --input imu.csv
    python -m lowpass.main --input accel.csv --filter biquad --value-type vector3 --cutoff 5 --sample-rate 200
    python -m lowpass.main --input pose.csv --config config/settings.yaml --output pose_smooth.csv
"""

import argparse
import csv
import logging
import sys
from typing import Any, Iterable, List, Optional, TextIO

import numpy as np
import quaternion

from lowpass.filters.base import Filter
from lowpass.filters.factory import FILTER_TYPES, create_filter
from lowpass.shared.types import VALUE_TYPES, ValueType
from lowpass.utils.config import load_config

logger = logging.getLogger(__name__)

COLUMNS = {"scalar": 1, "vector3": 3, "quaternion": 4}


def _is_numeric(row: List[str]) -> bool:
    try:
        [float(cell) for cell in row]
    except ValueError:
        return False
    return True


def read_samples(path: str, value_type: ValueType) -> List[Any]:
    """
    Load samples from a CSV file.

    Args:
        path: CSV file path
        value_type: Type of each sample, decides the expected column count

    Returns:
        List of samples coerced to the value type

    Raises:
        ValueError: Row with the wrong number of columns or non-numeric data
    """
    width = COLUMNS[value_type.name]
    samples = []

    with open(path, 'r', newline='') as f:
        for line_no, row in enumerate(csv.reader(f), start=1):
            row = [cell.strip() for cell in row if cell.strip()]
            if not row:
                continue
            if line_no == 1 and not _is_numeric(row):
                logger.debug(f"Skipping header: {row}")
                continue
            if len(row) != width:
                raise ValueError(
                    f"{path}:{line_no}: expected {width} columns for {value_type}, got {len(row)}"
                )
            try:
                values = [float(cell) for cell in row]
            except ValueError:
                raise ValueError(f"{path}:{line_no}: non-numeric value in {row}") from None
            samples.append(value_type.coerce(values[0] if width == 1 else values))

    logger.info(f"Loaded {len(samples)} samples from {path}")
    return samples


def to_row(value: Any) -> List[float]:
    """Flatten a filter output into CSV columns."""
    if isinstance(value, quaternion.quaternion):
        value = quaternion.as_float_array(value)
    return [float(v) for v in np.ravel(value)]


def write_samples(rows: Iterable[Any], stream: TextIO):
    writer = csv.writer(stream)
    for value in rows:
        writer.writerow(to_row(value))


def smooth(samples: Iterable[Any], flt: Filter) -> List[Any]:
    """Filter samples in order; the output list holds a snapshot per sample."""
    return flt.process_many(samples)


class SignalSmoother:
    """
    Ties config, CSV input, filter and CSV output together.

    Flow:
        CSV file → read_samples → Filter.process → write_samples
    """

    def __init__(self, config: dict, input_path: str, output_path: Optional[str] = None):
        self.config = config
        self.input_path = input_path
        self.output_path = output_path
        self.filter: Optional[Filter] = None

    def setup(self):
        """Build the filter described by the config."""
        self.filter = create_filter(self.config["filter"])
        if not self.filter.configured:
            logger.warning("Filter has no cutoff/sample rate; output will be degenerate")

    def run(self) -> int:
        """
        Smooth the input file.

        Returns:
            Number of samples processed
        """
        samples = read_samples(self.input_path, self.filter.value_type)
        filtered = smooth(samples, self.filter)

        if self.output_path:
            with open(self.output_path, 'w', newline='') as f:
                write_samples(filtered, f)
            logger.info(f"Wrote {len(filtered)} samples to {self.output_path}")
        else:
            write_samples(filtered, sys.stdout)

        return len(filtered)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Low-pass filter a recorded signal")
    parser.add_argument("--input", "-i", required=True, help="Input CSV file")
    parser.add_argument("--output", "-o", help="Output CSV file (default: stdout)")
    parser.add_argument("--config", "-c", help="YAML config file (default: config/settings.yaml)")
    parser.add_argument("--filter", "-f", choices=FILTER_TYPES, help="Filter type")
    parser.add_argument("--value-type", "-t", choices=list(VALUE_TYPES), help="Sample type")
    parser.add_argument("--cutoff", type=float, help="Cutoff frequency (Hz)")
    parser.add_argument("--sample-rate", type=float, help="Sample rate (Hz)")
    parser.add_argument("--q", type=float, help="Bi-quad quality factor")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def apply_overrides(config: dict, args: argparse.Namespace) -> dict:
    """Copy command-line values over the filter section of the config."""
    overrides = {
        "type": args.filter,
        "value_type": args.value_type,
        "cutoff_hz": args.cutoff,
        "sample_rate": args.sample_rate,
        "q": args.q,
    }
    for key, value in overrides.items():
        if value is not None:
            config["filter"][key] = value
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    config = apply_overrides(load_config(args.config), args)
    if not args.verbose:
        logging.getLogger().setLevel(config["logging"].get("level", "INFO"))

    try:
        smoother = SignalSmoother(config, args.input, args.output)
        smoother.setup()
        smoother.run()
    except (OSError, ValueError) as e:
        logger.error(f"Smoothing failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
